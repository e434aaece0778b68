"""Control-structure completeness checks for brace languages and Python."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
import re

from polylint.diagnostics import (
    LINT_PRACTICE_SWITCH_DEFAULT,
    LINT_SYNTAX_CONTROL_STRUCTURE,
    LINT_SYNTAX_TRY_HANDLER,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import (
    CONTROL_KEYWORD_RE,
    brace_depth_scan,
    matching_paren,
    next_code_index,
)
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, code_mask, leading_whitespace, mask_literals, split_line_comment


class BraceStyle(StrEnum):
    OWN_LINE = "own_line"
    SAME_LINE = "same_line"


class BlockMode(StrEnum):
    BRACES = "braces"
    INDENT = "indent"


_PLACEHOLDER_CONDITIONS = {
    "for": "(init; condition; increment)",
    "foreach": "(var item in collection)",
}
_RANGE_FOR_RE = re.compile(r"\b(in|of)\b|[^:]:[^:]")


@dataclass(frozen=True, slots=True)
class ControlStructureRule:
    """`if/for/foreach/while/switch` need a parenthesized condition and a braced body."""

    brace_style: BraceStyle = BraceStyle.OWN_LINE
    syntax: LiteralSyntax = LiteralSyntax()
    body_placeholder: str = "// code"
    unit: int = 4
    code: str = LINT_SYNTAX_CONTROL_STRUCTURE.code
    name: str = "syntaxControlStructure"
    category: str = LINT_SYNTAX_CONTROL_STRUCTURE.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            diagnostic = self._check_line(lines, index, line)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def _check_line(self, lines: Sequence[str], index: int, line: str) -> Diagnostic | None:
        code, comment = split_line_comment(line, self.syntax)
        body = code.strip()
        masked = mask_literals(body, self.syntax)
        match = CONTROL_KEYWORD_RE.match(masked)
        if match is None:
            return None
        keyword = match.group(1)
        keyword_end = match.end()
        rest = masked[keyword_end:].lstrip()
        rest_start = len(masked) - len(rest)

        if rest.startswith("("):
            close = matching_paren(masked, rest_start)
            if close is None:
                return None
            condition_text = body[rest_start : close + 1]
            header = body[: close + 1]
            after = body[close + 1 :].strip()
            if after.endswith(";") and after.strip(";").strip() == "":
                return None
            if keyword == "for" and not self._is_valid_for(masked[rest_start + 1 : close]):
                return diagnostic_from_spec(
                    LINT_SYNTAX_CONTROL_STRUCTURE,
                    line=index + 1,
                    snippet=line,
                    replacement=None,
                    message="Invalid for loop header: expected 'init; condition; increment'",
                )
            has_parens = True
        else:
            brace = rest.find("{")
            condition = (rest if brace < 0 else rest[:brace]).strip()
            condition_text = (
                f"({body[rest_start : rest_start + len(condition)]})"
                if condition
                else _PLACEHOLDER_CONDITIONS.get(keyword, "(condition)")
            )
            header = f"{body[:keyword_end]} {condition_text}"
            after = "" if brace < 0 else rest[brace:].strip()
            has_parens = False

        trailer = f" {comment.strip()}" if comment else ""
        if after.startswith("{"):
            if has_parens:
                return None
            return self._report(index, line, f"{header} {after}{trailer}")
        if after:
            return self._report(index, line, f"{header} {{ {after} }}{trailer}")

        following = next_code_index(lines, index + 1)
        if following is not None and lines[following].strip().startswith("{"):
            if has_parens:
                return None
            return self._report(index, line, f"{header}{trailer}")
        if following is not None and self._is_nested_statement(line, lines[following]):
            return diagnostic_from_spec(
                LINT_SYNTAX_CONTROL_STRUCTURE,
                line=index + 1,
                snippet=line,
                hint=(
                    f"Wrap the statement on line {following + 1} in braces; "
                    "a body on another line is not fixed automatically"
                ),
            )
        if self.brace_style == BraceStyle.OWN_LINE:
            skeleton = f"{header}{trailer}\n{{\n{' ' * self.unit}{self.body_placeholder}\n}}"
        else:
            skeleton = f"{header} {{{trailer}\n{' ' * self.unit}{self.body_placeholder}\n}}"
        return self._report(index, line, skeleton)

    def _report(self, index: int, line: str, replacement: str | None) -> Diagnostic:
        return diagnostic_from_spec(
            LINT_SYNTAX_CONTROL_STRUCTURE,
            line=index + 1,
            snippet=line,
            replacement=replacement,
        )

    def _is_valid_for(self, inner: str) -> bool:
        return inner.count(";") == 2 or _RANGE_FOR_RE.search(inner) is not None

    def _is_nested_statement(self, line: str, following: str) -> bool:
        own = len(leading_whitespace(line).expandtabs(self.unit))
        nested = len(leading_whitespace(following).expandtabs(self.unit))
        return nested > own and not self.syntax.is_comment_line(following.strip())


@dataclass(frozen=True, slots=True)
class TryHandlerRule:
    """A `try` scope must be followed by a handler or cleanup clause."""

    mode: BlockMode = BlockMode.BRACES
    syntax: LiteralSyntax = LiteralSyntax()
    handlers: tuple[str, ...] = ("catch", "finally")
    allow_resource_try: bool = False
    unit: int = 4
    code: str = LINT_SYNTAX_TRY_HANDLER.code
    name: str = "syntaxTryHandler"
    category: str = LINT_SYNTAX_TRY_HANDLER.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code = code_mask(line, self.syntax).strip()
            if self.mode == BlockMode.INDENT:
                handled = self._indent_handled(lines, index, line) if re.match(r"^try\s*:", code) else True
            else:
                handled = self._brace_handled(lines, index, code) if re.match(r"^try\b", code) else True
            if not handled:
                diagnostics.append(
                    diagnostic_from_spec(LINT_SYNTAX_TRY_HANDLER, line=index + 1, snippet=line)
                )
        return diagnostics

    def _brace_handled(self, lines: Sequence[str], index: int, code: str) -> bool:
        if self.allow_resource_try and re.match(r"^try\s*\(", code):
            return True
        _, close = brace_depth_scan(lines, index, self.syntax)
        if close is None:
            return True
        closing = code_mask(lines[close], self.syntax)
        handlers = "|".join(self.handlers)
        if re.search(rf"\}}\s*({handlers})\b", closing):
            return True
        following = next_code_index(lines, close + 1)
        return following is not None and lines[following].strip().startswith(self.handlers)

    def _indent_handled(self, lines: Sequence[str], index: int, line: str) -> bool:
        own = len(leading_whitespace(line).expandtabs(self.unit))
        for candidate in lines[index + 1 :]:
            stripped = candidate.strip()
            if not stripped or self.syntax.is_comment_line(stripped):
                continue
            width = len(leading_whitespace(candidate).expandtabs(self.unit))
            if width > own:
                continue
            return width == own and re.match(r"^(except|finally)\b", stripped) is not None
        return False


@dataclass(frozen=True, slots=True)
class SwitchDefaultRule:
    """A `switch` scope must contain a `default` clause at its own depth."""

    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_PRACTICE_SWITCH_DEFAULT.code
    name: str = "practiceSwitchDefault"
    category: str = LINT_PRACTICE_SWITCH_DEFAULT.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code = code_mask(line, self.syntax).strip()
            if not re.match(r"^switch\s*\(", code) or code.endswith(";"):
                continue
            visited, close = brace_depth_scan(lines, index, self.syntax)
            if close is None:
                continue
            has_default = any(
                depth == 1 and re.match(r"^default\s*(:|->)", code_mask(lines[position], self.syntax).strip())
                for position, depth in visited
                if position > index
            )
            if not has_default:
                diagnostics.append(
                    diagnostic_from_spec(LINT_PRACTICE_SWITCH_DEFAULT, line=index + 1, snippet=line)
                )
        return diagnostics
