"""Layout checks: blank lines, indentation and block-brace placement."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_FORMAT_BRACE_PLACEMENT,
    LINT_FORMAT_BRACE_SAME_LINE,
    LINT_FORMAT_EMPTY_LINE,
    LINT_FORMAT_INDENTATION,
    LINT_FORMAT_INDENTATION_CONSISTENCY,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import continuation_flags, previous_code_index
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, code_mask, leading_whitespace, split_line_comment

_ASSIGNED_BLOCK_RE = re.compile(r"(?<![=!<>])=(?![=>])[^;]*\{$")
_LAMBDA_CAPTURE_RE = re.compile(r"\[[^\]]*\]\s*(\([^)]*\))?\s*(mutable\s*)?(->\s*[\w:<>]+\s*)?\{$")


@dataclass(frozen=True, slots=True)
class EmptyLineRule:
    """Every blank line is flagged for deletion."""

    code: str = LINT_FORMAT_EMPTY_LINE.code
    name: str = "formatEmptyLine"
    category: str = LINT_FORMAT_EMPTY_LINE.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        return [
            diagnostic_from_spec(LINT_FORMAT_EMPTY_LINE, line=index + 1, snippet=line, replacement="")
            for index, line in enumerate(lines)
            if not line.strip()
        ]


@dataclass(frozen=True, slots=True)
class IndentationRule:
    """Leading whitespace must be a multiple of `unit`; the fix rounds down.

    With `continuations`, lines inside an unclosed bracket or after a
    backslash are left alone. Markup profiles turn it off.
    """

    unit: int = 4
    syntax: LiteralSyntax = LiteralSyntax()
    continuations: bool = True
    code: str = LINT_FORMAT_INDENTATION.code
    name: str = "formatIndentation"
    category: str = LINT_FORMAT_INDENTATION.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        continued = continuation_flags(lines, self.syntax) if self.continuations else [False] * len(lines)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or continued[index]:
                continue
            if self.syntax.block_comments and stripped.startswith("*"):
                continue
            width = len(leading_whitespace(line).expandtabs(self.unit))
            if width % self.unit == 0:
                continue
            fixed = " " * (width - width % self.unit) + line.lstrip(" \t")
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_FORMAT_INDENTATION,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    unit=self.unit,
                    width=width,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class IndentationConsistencyRule:
    """Brace-aware indentation: tracks the expected indent from `{` and `}` lines."""

    unit: int = 4
    syntax: LiteralSyntax = LiteralSyntax()
    flat_scopes: tuple[str, ...] = ("namespace",)
    code: str = LINT_FORMAT_INDENTATION_CONSISTENCY.code
    name: str = "formatIndentationConsistency"
    category: str = LINT_FORMAT_INDENTATION_CONSISTENCY.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        # One entry per open brace: how much that scope indents its body.
        scopes: list[int] = []
        continued = continuation_flags(lines, self.syntax)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped:
                continue
            masked = code_mask(line, self.syntax).strip()
            closes = masked.startswith("}")
            opens = masked.endswith("{")
            if closes and scopes:
                scopes.pop()
            expected = sum(scopes)
            width = len(leading_whitespace(line).expandtabs(self.unit))
            if width != expected and not continued[index] and not self._is_exempt(stripped, masked, opens):
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_FORMAT_INDENTATION_CONSISTENCY,
                        line=index + 1,
                        snippet=line,
                        replacement=" " * expected + stripped,
                        expected=expected,
                        width=width,
                        unit=self.unit,
                    )
                )
            if opens:
                scopes.append(0 if masked.startswith(self.flat_scopes) else self.unit)
        return diagnostics

    def _is_exempt(self, stripped: str, masked: str, opens: bool) -> bool:
        if stripped.startswith("#") or self.syntax.is_comment_line(stripped):
            return True
        # Access labels sit one level out by convention.
        if re.match(r"^(public|private|protected)\s*:$", masked):
            return True
        return not opens and "(" in masked and ")" in masked and "{" in masked


@dataclass(frozen=True, slots=True)
class BraceOwnLineRule:
    """Opening braces go on their own line (`header` then `{`)."""

    syntax: LiteralSyntax = LiteralSyntax()
    exempt_prefixes: tuple[str, ...] = ()
    lambda_arrows: tuple[str, ...] = ("=>",)
    code: str = LINT_FORMAT_BRACE_PLACEMENT.code
    name: str = "formatBraceOwnLine"
    category: str = LINT_FORMAT_BRACE_PLACEMENT.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            masked = code_mask(line, self.syntax).strip()
            if len(masked) <= 1 or not masked.endswith("{") or masked.startswith(("{", "}")):
                continue
            if self._is_exempt(masked):
                continue
            code, comment = split_line_comment(line, self.syntax)
            header = code.strip()[:-1].rstrip()
            if comment:
                header = f"{header} {comment.strip()}"
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_FORMAT_BRACE_PLACEMENT,
                    line=index + 1,
                    snippet=line,
                    replacement=f"{header}\n{{",
                )
            )
        return diagnostics

    def _is_exempt(self, masked: str) -> bool:
        if masked.startswith(self.exempt_prefixes) or masked.startswith(("return {", "return{", "@interface")):
            return True
        body = masked[:-1].rstrip()
        if not body or body[-1] in "([,:?=":
            return True
        if any(body.endswith(arrow) for arrow in self.lambda_arrows):
            return True
        return bool(_ASSIGNED_BLOCK_RE.search(masked) or _LAMBDA_CAPTURE_RE.search(masked))


@dataclass(frozen=True, slots=True)
class BraceSameLineRule:
    """A lone `{` belongs at the end of the statement above it.

    Emits a linked pair: one diagnostic appends ` {` to the header line, the
    other deletes the brace line.
    """

    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_FORMAT_BRACE_SAME_LINE.code
    name: str = "formatBraceSameLine"
    category: str = LINT_FORMAT_BRACE_SAME_LINE.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            if line.strip() != "{" or index == 0:
                continue
            header_index = previous_code_index(lines, index - 1)
            if header_index is None:
                continue
            header_line = lines[header_index]
            header = code_mask(header_line, self.syntax)
            if not header or header.endswith((";", "{", "}", ",", "(", "[")):
                continue
            if self.syntax.is_comment_line(header_line.strip()) or split_line_comment(header_line, self.syntax)[1]:
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_FORMAT_BRACE_SAME_LINE,
                    line=header_index + 1,
                    snippet=header_line,
                    replacement=header_line.rstrip() + " {",
                )
            )
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_FORMAT_BRACE_SAME_LINE,
                    line=index + 1,
                    snippet=line,
                    replacement="",
                )
            )
        return diagnostics
