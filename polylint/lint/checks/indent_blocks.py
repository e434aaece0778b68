"""Checks for languages whose blocks are introduced by `:` and indentation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_PYTHON_EMPTY_IF,
    LINT_PYTHON_EXPECTED_INDENTED_BLOCK,
    LINT_PYTHON_MISSING_COLON,
    LINT_PYTHON_MISSING_CONDITION,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import bracket_balance, continuation_flags
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, code_mask, leading_whitespace, split_line_comment

BLOCK_HEADER_RE = re.compile(
    r"^(?:async\s+)?(if|elif|else|for|while|def|class|with|try|except|finally)\b"
)
_PYTHON_SYNTAX = LiteralSyntax(quotes="\"'", triple_quotes=True, line_comment="#", block_comments=False)


def _has_top_level_colon(code: str) -> bool:
    depth = 0
    for position, char in enumerate(code):
        if char in "([{":
            depth += 1
        elif char in ")]}":
            depth -= 1
        elif char == ":" and depth == 0 and not code.startswith("=", position + 1):
            return True
    return False


def _headers(lines: Sequence[str], syntax: LiteralSyntax) -> list[tuple[int, str, str]]:
    """Block header lines as `(index, keyword, masked code)`, skipping continuation lines."""
    headers: list[tuple[int, str, str]] = []
    continued = continuation_flags(lines, syntax)
    for index, line in enumerate(lines):
        if continued[index]:
            continue
        code = code_mask(line, syntax).strip()
        match = BLOCK_HEADER_RE.match(code)
        if match is None or bracket_balance(code) > 0 or code.endswith("\\"):
            continue
        headers.append((index, match.group(1), code))
    return headers


def _width(line: str, unit: int) -> int:
    return len(leading_whitespace(line).expandtabs(unit))


@dataclass(frozen=True, slots=True)
class MissingColonRule:
    """Block headers (`if`, `def`, `class`, ...) end with a colon."""

    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_MISSING_COLON.code
    name: str = "syntaxMissingColon"
    category: str = LINT_PYTHON_MISSING_COLON.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, keyword, code in _headers(lines, self.syntax):
            if _has_top_level_colon(code):
                continue
            if keyword in ("if", "elif", "while") and code == keyword:
                # The missing condition is reported on its own.
                continue
            line = lines[index]
            body, comment = split_line_comment(line, self.syntax)
            stripped_body = body.rstrip()
            fixed = stripped_body + ":" + body[len(stripped_body) :] + comment
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_PYTHON_MISSING_COLON,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    keyword=keyword,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ExpectedIndentedBlockRule:
    """The first code line after a `:` header must be indented deeper than the header."""

    unit: int = 4
    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_EXPECTED_INDENTED_BLOCK.code
    name: str = "syntaxExpectedIndentedBlock"
    category: str = LINT_PYTHON_EXPECTED_INDENTED_BLOCK.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, _, code in _headers(lines, self.syntax):
            if not code.endswith(":"):
                continue
            header = lines[index]
            own = _width(header, self.unit)
            body_index = self._first_body_line(lines, index + 1)
            if body_index is None:
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_PYTHON_EXPECTED_INDENTED_BLOCK,
                        line=index + 1,
                        snippet=header,
                        replacement=f"{header.strip()}\n{' ' * self.unit}pass",
                        unit=self.unit,
                    )
                )
                continue
            body = lines[body_index]
            if _width(body, self.unit) > own:
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_PYTHON_EXPECTED_INDENTED_BLOCK,
                    line=body_index + 1,
                    snippet=body,
                    replacement=" " * (own + self.unit) + body.strip(),
                    unit=self.unit,
                )
            )
        return diagnostics

    def _first_body_line(self, lines: Sequence[str], start: int) -> int | None:
        for index in range(start, len(lines)):
            stripped = lines[index].strip()
            if stripped and not self.syntax.is_comment_line(stripped):
                return index
        return None


@dataclass(frozen=True, slots=True)
class MissingConditionRule:
    """`if`/`elif`/`while` need a condition and `for` needs `in`."""

    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_MISSING_CONDITION.code
    name: str = "syntaxMissingCondition"
    category: str = LINT_PYTHON_MISSING_CONDITION.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, keyword, code in _headers(lines, self.syntax):
            line = lines[index]
            if keyword in ("if", "elif", "while") and re.match(rf"^{keyword}\s*:?$", code):
                indent = leading_whitespace(line)
                _, comment = split_line_comment(line, self.syntax)
                fixed = f"{indent}{keyword} condition:" + (f"  {comment.strip()}" if comment else "")
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_PYTHON_MISSING_CONDITION,
                        line=index + 1,
                        snippet=line,
                        replacement=fixed,
                        keyword=keyword,
                    )
                )
            elif keyword == "for" and not re.search(r"\bin\b", code):
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_PYTHON_MISSING_CONDITION,
                        line=index + 1,
                        snippet=line,
                        message="Invalid for loop syntax: expected 'for item in iterable:'",
                        keyword=keyword,
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class EmptyIfRule:
    """An `if` whose body is only `pass`, `...` or comments does nothing."""

    unit: int = 4
    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_EMPTY_IF.code
    name: str = "qualityEmptyIf"
    category: str = LINT_PYTHON_EMPTY_IF.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, keyword, code in _headers(lines, self.syntax):
            if keyword not in ("if", "elif") or not code.endswith(":"):
                continue
            own = _width(lines[index], self.unit)
            body: list[str] = []
            for candidate in lines[index + 1 :]:
                stripped = candidate.strip()
                if not stripped:
                    continue
                if _width(candidate, self.unit) <= own:
                    break
                if not self.syntax.is_comment_line(stripped):
                    body.append(code_mask(candidate, self.syntax).strip())
            if body and all(statement in ("pass", "...") for statement in body):
                diagnostics.append(
                    diagnostic_from_spec(LINT_PYTHON_EMPTY_IF, line=index + 1, snippet=lines[index])
                )
        return diagnostics
