"""Operator and comma spacing checks.

Both checks rebuild the whole line and report it as one diagnostic. String
literals, trailing comments and (where enabled) generic type spans such as
`List<int>` are copied through untouched.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_FORMAT_COMMA_SPACING,
    LINT_FORMAT_OPERATOR_SPACING,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, literal_spans, mask_literals, split_line_comment

_GENERIC_ATOM = r"[\w\s,.:?\[\]]"
GENERIC_SPAN_RE = re.compile(
    rf"(?<![\w$])[A-Za-z_][\w.:]*\s?<(?:{_GENERIC_ATOM}|<(?:{_GENERIC_ATOM}|<{_GENERIC_ATOM}*>)*>)*>"
)
_EXPONENT_RE = re.compile(r"(?<![\w.])\d+(?:\.\d*)?[eE]$")
_UNARY_AFTER = "([{,;=:?!&|+-*/%<>^~"
UNARY_KEYWORDS = frozenset(
    {
        "return",
        "case",
        "in",
        "and",
        "or",
        "not",
        "yield",
        "await",
        "throw",
        "else",
        "is",
        "lambda",
        "typeof",
        "new",
        "delete",
        "import",
    }
)


@dataclass(frozen=True, slots=True)
class OperatorTable:
    """Operators a language spaces, plus tokens that are never spaced."""

    binary: tuple[str, ...]
    unary_capable: frozenset[str] = frozenset({"+", "-", "*", "&", "**"})
    opaque: tuple[str, ...] = ("++", "--")
    control_keywords: tuple[str, ...] = ("if", "for", "while", "switch", "catch")

    def by_length(self) -> tuple[str, ...]:
        return tuple(sorted({*self.binary, *self.opaque}, key=len, reverse=True))


def protected_positions(code: str, syntax: LiteralSyntax, *, generics: bool) -> list[bool]:
    """Mark every character that belongs to a literal or a generic span."""
    protected = [False] * len(code)
    for start, end in literal_spans(code, syntax):
        for position in range(start, end):
            protected[position] = True
    if generics:
        masked = mask_literals(code, syntax)
        for match in GENERIC_SPAN_RE.finditer(masked):
            less = masked.index("<", match.start())
            for position in range(less, match.end()):
                protected[position] = True
    return protected


@dataclass(frozen=True, slots=True)
class OperatorSpacingRule:
    """Binary, comparison and assignment operators need one space on each side."""

    operators: OperatorTable
    syntax: LiteralSyntax = LiteralSyntax()
    generics: bool = True
    keyword_arguments: bool = False
    skip_prefixes: tuple[str, ...] = ()
    code: str = LINT_FORMAT_OPERATOR_SPACING.code
    name: str = "formatOperatorSpacing"
    category: str = LINT_FORMAT_OPERATOR_SPACING.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        ordered = self.operators.by_length()
        keyword_re = _control_keyword_re(self.operators.control_keywords)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or self.syntax.is_comment_line(stripped):
                continue
            if self.skip_prefixes and stripped.startswith(self.skip_prefixes):
                continue
            fixed, operators, keywords = self.normalize(line, ordered, keyword_re)
            if not operators and not keywords:
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_FORMAT_OPERATOR_SPACING,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    message=None if operators else f"Missing space after '{keywords[0]}'",
                    operator=operators[0] if operators else keywords[0],
                )
            )
        return diagnostics

    def normalize(
        self,
        line: str,
        ordered: tuple[str, ...],
        keyword_re: re.Pattern[str] | None,
    ) -> tuple[str, list[str], list[str]]:
        """Return the spacing-normalized line and the operators/keywords that were too tight."""
        code, comment = split_line_comment(line, self.syntax)
        masked = mask_literals(code, self.syntax)
        protected = protected_positions(code, self.syntax, generics=self.generics)
        inserts: dict[int, str] = {}
        if keyword_re is not None:
            for match in keyword_re.finditer(masked):
                if not protected[match.end() - 1]:
                    inserts[match.end() - 1] = match.group(1)

        out: list[str] = []
        tight_operators: list[str] = []
        tight_keywords: list[str] = []
        depth = 0
        position = 0
        length = len(code)
        while position < length:
            if position in inserts:
                out.append(" ")
                tight_keywords.append(inserts[position])
            if protected[position]:
                out.append(code[position])
                position += 1
                continue
            char = masked[position]
            if char in "([{":
                depth += 1
            elif char in ")]}":
                depth = max(depth - 1, 0)
            operator = _match_operator(masked, position, ordered)
            if operator is None:
                out.append(code[position])
                position += 1
                continue
            end = position + len(operator)
            if self._keep_verbatim(operator, masked, position, end, depth):
                out.append(code[position:end])
                position = end
                continue
            tight_before = not masked[position - 1].isspace()
            tight_after = end < length and not masked[end].isspace()
            if operator in self.operators.unary_capable:
                if not (tight_before and tight_after):
                    out.append(code[position:end])
                    position = end
                    continue
                tight = True
            else:
                tight = tight_before or tight_after
            if tight:
                tight_operators.append(operator)
            while out and out[-1] in (" ", "\t"):
                out.pop()
            following = end
            while following < length and masked[following] in " \t":
                following += 1
            if following < length:
                out.append(f" {operator} ")
                position = following
            else:
                out.append(f" {operator}")
                position = end
        return "".join(out) + comment, tight_operators, tight_keywords

    def _keep_verbatim(self, operator: str, masked: str, start: int, end: int, depth: int) -> bool:
        if operator in self.operators.opaque:
            return True
        if self.keyword_arguments and operator == "=" and depth > 0:
            return True
        before = masked[:start].rstrip()
        if not before or before[-1] in _UNARY_AFTER:
            return True
        word = re.search(r"[A-Za-z_]\w*$", before)
        if word is not None and word.group() in UNARY_KEYWORDS | {"operator"}:
            return True
        if operator in ("+", "-") and _EXPONENT_RE.search(before) and before == masked[:start]:
            return end < len(masked) and masked[end].isdigit()
        return False


@dataclass(frozen=True, slots=True)
class CommaSpacingRule:
    """A comma is followed by a space unless it closes a bracket or separates digits."""

    syntax: LiteralSyntax = LiteralSyntax()
    generics: bool = True
    skip_prefixes: tuple[str, ...] = ()
    code: str = LINT_FORMAT_COMMA_SPACING.code
    name: str = "formatCommaSpacing"
    category: str = LINT_FORMAT_COMMA_SPACING.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or self.syntax.is_comment_line(stripped):
                continue
            if self.skip_prefixes and stripped.startswith(self.skip_prefixes):
                continue
            fixed = self.normalize(line)
            if fixed == line:
                continue
            diagnostics.append(
                diagnostic_from_spec(LINT_FORMAT_COMMA_SPACING, line=index + 1, snippet=line, replacement=fixed)
            )
        return diagnostics

    def normalize(self, line: str) -> str:
        code, comment = split_line_comment(line, self.syntax)
        masked = mask_literals(code, self.syntax)
        protected = protected_positions(code, self.syntax, generics=self.generics)
        out: list[str] = []
        for position, char in enumerate(code):
            out.append(char)
            if char != "," or protected[position] or position + 1 >= len(code):
                continue
            following = masked[position + 1]
            if following.isspace() or following in ")]}":
                continue
            if position > 0 and masked[position - 1].isdigit() and following.isdigit():
                continue
            out.append(" ")
        return "".join(out) + comment


def _match_operator(masked: str, position: int, ordered: tuple[str, ...]) -> str | None:
    for operator in ordered:
        if masked.startswith(operator, position):
            return operator
    return None


def _control_keyword_re(keywords: tuple[str, ...]) -> re.Pattern[str] | None:
    if not keywords:
        return None
    alternatives = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"(?<![\w.$])({alternatives})\(")
