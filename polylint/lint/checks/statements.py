"""Statement terminator checks for brace languages."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_SYNTAX_EXTRA_TERMINATOR,
    LINT_SYNTAX_MISSING_TERMINATOR,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import (
    bracket_balance,
    continuation_flags,
    matching_paren,
    next_code_index,
    previous_code_index,
)
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, code_mask, mask_literals, split_line_comment

_BLOCK_HEADER_RE = re.compile(
    r"^(if|else|for|foreach|while|do|switch|try|catch|finally|case|default|lock|unsafe|fixed|checked|synchronized)\b"
)
_DECLARATION_RE = re.compile(r"\b(class|struct|interface|enum|namespace|record|template|union)\b")
_EXTRA_TERMINATOR_RE = re.compile(r"^(?:else\s+)?(if|for|while|switch)\s*\(")

NEEDS_TERMINATOR_PATTERNS: tuple[str, ...] = (
    # assignment, including compound assignment
    r"(?<![=!<>])(?:[-+*/%&|^]|<<|>>|\?\?)?=(?![=>])",
    # call or constructor expression
    r"[\w\]>)]\s*\(.*\)$",
    r"^(return|break|continue|throw|yield|goto|delete)\b",
    r"^[\w.\[\]]+\s*(\+\+|--)$",
    r"^(\+\+|--)[\w.]+$",
    r"^new\s",
    # stream insertion and extraction
    r"^[\w:.\[\]]+\s*(<<|>>)\s*\S",
    # bare declaration: `int x`, `std::string name`, `let total`
    r"^[A-Za-z_][\w.:<>,\[\]*&?]*(?<!:)\s+[A-Za-z_]\w*$",
)

_TRAILING_OPERATOR = tuple("{}(,[:\\+-*/%=&|<>?.")


@dataclass(frozen=True, slots=True)
class TerminatorRule:
    """Statements must end with the terminator unless an exemption applies."""

    terminator: str = ";"
    syntax: LiteralSyntax = LiteralSyntax()
    directive_prefixes: tuple[str, ...] = ()
    exempt_prefixes: tuple[str, ...] = ("#", "@", "[")
    needs: tuple[str, ...] = NEEDS_TERMINATOR_PATTERNS
    code: str = LINT_SYNTAX_MISSING_TERMINATOR.code
    name: str = "syntaxMissingTerminator"
    category: str = LINT_SYNTAX_MISSING_TERMINATOR.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        patterns = tuple(re.compile(pattern) for pattern in self.needs)
        continued = continuation_flags(lines, self.syntax)
        for index, line in enumerate(lines):
            stripped = line.strip()
            if not stripped or continued[index] or self.syntax.is_comment_line(stripped):
                continue
            code = code_mask(line, self.syntax).strip()
            if not code or not self._needs_terminator(code, patterns):
                continue
            following = next_code_index(lines, index + 1)
            if following is not None and lines[following].strip().startswith(("{", ".", "?", ":", "&&", "||", "+")):
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_SYNTAX_MISSING_TERMINATOR,
                    line=index + 1,
                    snippet=line,
                    replacement=self._terminate(line),
                )
            )
        return diagnostics

    def _needs_terminator(self, code: str, patterns: tuple[re.Pattern[str], ...]) -> bool:
        if code.endswith(self.terminator):
            return False
        if code.endswith(_TRAILING_OPERATOR) and not code.endswith(("++", "--")):
            return False
        if self.directive_prefixes and code.startswith(self.directive_prefixes):
            return not code.startswith("using (") and not code.startswith("using(")
        if code.startswith(self.exempt_prefixes) or code.startswith("}"):
            return False
        if _BLOCK_HEADER_RE.match(code) or code.startswith(("using (", "using(")):
            return False
        if _DECLARATION_RE.search(code) and "=" not in code:
            return False
        if bracket_balance(code) != 0:
            return False
        return any(pattern.search(code) for pattern in patterns)

    def _terminate(self, line: str) -> str:
        code, comment = split_line_comment(line, self.syntax)
        body = code.rstrip()
        return body + self.terminator + code[len(body) :] + comment


@dataclass(frozen=True, slots=True)
class ExtraTerminatorRule:
    """A terminator directly after a control header (`if (x);`) empties the statement."""

    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_SYNTAX_EXTRA_TERMINATOR.code
    name: str = "syntaxExtraTerminator"
    category: str = LINT_SYNTAX_EXTRA_TERMINATOR.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code, comment = split_line_comment(line, self.syntax)
            masked = mask_literals(code, self.syntax)
            body = masked.strip()
            match = _EXTRA_TERMINATOR_RE.match(body)
            if match is None or not body.endswith(";"):
                continue
            if match.group(1) == "while" and self._closes_do_block(lines, index):
                continue
            offset = len(masked) - len(masked.lstrip())
            close = matching_paren(masked, offset + match.end() - 1)
            if close is None or masked[close + 1 :].strip() != ";":
                continue
            kept = code[: close + 1]
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_SYNTAX_EXTRA_TERMINATOR,
                    line=index + 1,
                    snippet=line,
                    replacement=kept + (" " + comment if comment else ""),
                )
            )
        return diagnostics

    def _closes_do_block(self, lines: Sequence[str], index: int) -> bool:
        previous = previous_code_index(lines, index - 1) if index > 0 else None
        if previous is None:
            return False
        return code_mask(lines[previous], self.syntax).strip().endswith("}")
