"""Language idiom checks: comparisons, declarations and directives."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_CSHARP_NULL_COMPARISON,
    LINT_CSHARP_REDUNDANT_EQUALS,
    LINT_CSHARP_VAR_USAGE,
    LINT_JS_STRICT_EQUALITY,
    LINT_JS_STRICT_MODE,
    LINT_JS_VAR_DECLARATION,
    LINT_PYTHON_NONE_COMPARISON,
    Diagnostic,
    DiagnosticSpec,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import matching_paren
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, leading_whitespace, mask_literals, replace_word, split_line_comment

_PYTHON_SYNTAX = LiteralSyntax(quotes="\"'", triple_quotes=True, line_comment="#", block_comments=False)
_CONDITION_RE = re.compile(r"\b(if|while|for)\s*\(")
_REDUNDANT_EQUALS_RE = re.compile(r"==(?:\s*=)+")
_VAR_KEYWORD_RE = re.compile(r"(?<![\w$.])var\s+[A-Za-z_$[{]")
_USE_STRICT_RE = re.compile(r"""(['"])use strict\1""")
_MODULE_RE = re.compile(r"^\s*(import|export)\b")


def _rewrite_comparisons(
    line: str,
    syntax: LiteralSyntax,
    literal: str,
) -> tuple[str, list[str]]:
    """Turn `== literal` / `!= literal` into `is literal` / `is not literal` outside strings and comments."""
    code, comment = split_line_comment(line, syntax)
    masked = mask_literals(code, syntax)
    pattern = re.compile(rf"\s*(==|!=)\s*{re.escape(literal)}(?![\w$])")
    pieces: list[str] = []
    operators: list[str] = []
    cursor = 0
    for match in pattern.finditer(masked):
        operator = "is" if match.group(1) == "==" else "is not"
        operators.append(operator)
        pieces.append(code[cursor : match.start()])
        pieces.append(f" {operator} {literal}")
        cursor = match.end()
    pieces.append(code[cursor:])
    return "".join(pieces) + comment, operators


def _comparison_diagnostics(
    lines: Sequence[str],
    spec: DiagnosticSpec,
    syntax: LiteralSyntax,
    literal: str,
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for index, line in enumerate(lines):
        if literal not in line:
            continue
        fixed, operators = _rewrite_comparisons(line, syntax, literal)
        if not operators:
            continue
        diagnostics.append(
            diagnostic_from_spec(
                spec,
                line=index + 1,
                snippet=line,
                replacement=fixed,
                operator=f"{operators[0]} {literal}",
            )
        )
    return diagnostics


@dataclass(frozen=True, slots=True)
class NoneComparisonRule:
    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_NONE_COMPARISON.code
    name: str = "pythonNoneComparison"
    category: str = LINT_PYTHON_NONE_COMPARISON.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        return _comparison_diagnostics(lines, LINT_PYTHON_NONE_COMPARISON, self.syntax, "None")


@dataclass(frozen=True, slots=True)
class NullComparisonRule:
    """C# pattern-matching null checks: `x == null` becomes `x is null`."""

    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_CSHARP_NULL_COMPARISON.code
    name: str = "csharpNullComparison"
    category: str = LINT_CSHARP_NULL_COMPARISON.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        return _comparison_diagnostics(lines, LINT_CSHARP_NULL_COMPARISON, self.syntax, "null")


@dataclass(frozen=True, slots=True)
class VarUsageRule:
    """A local declared with a primitive type and an initializer can use `var`."""

    syntax: LiteralSyntax = LiteralSyntax()
    types: tuple[str, ...] = ("int", "string", "bool", "double", "float", "char")
    code: str = LINT_CSHARP_VAR_USAGE.code
    name: str = "csharpVarUsage"
    category: str = LINT_CSHARP_VAR_USAGE.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        alternatives = "|".join(self.types)
        pattern = re.compile(rf"^({alternatives})\s+[A-Za-z_]\w*\s*=(?!=)")
        for index, line in enumerate(lines):
            indent = leading_whitespace(line)
            masked = mask_literals(line, self.syntax)[len(indent) :]
            match = pattern.match(masked)
            if match is None:
                continue
            type_name = match.group(1)
            fixed = indent + "var" + line[len(indent) + len(type_name) :]
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_CSHARP_VAR_USAGE,
                    line=index + 1,
                    snippet=line,
                    replacement=fixed,
                    type=type_name,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class RedundantEqualsRule:
    """`x == = = 10` inside an `if/while/for` condition collapses to `x == 10`."""

    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_CSHARP_REDUNDANT_EQUALS.code
    name: str = "csharpRedundantEquals"
    category: str = LINT_CSHARP_REDUNDANT_EQUALS.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code, comment = split_line_comment(line, self.syntax)
            masked = mask_literals(code, self.syntax)
            match = _CONDITION_RE.search(masked)
            if match is None:
                continue
            close = matching_paren(masked, match.end() - 1)
            end = close if close is not None else len(masked)
            condition = masked[match.end() : end]
            runs = list(_REDUNDANT_EQUALS_RE.finditer(condition))
            if not runs:
                continue
            offset = match.end()
            pieces: list[str] = []
            cursor = 0
            for run in runs:
                pieces.append(code[cursor : offset + run.start()])
                pieces.append("==")
                cursor = offset + run.end()
            pieces.append(code[cursor:])
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_CSHARP_REDUNDANT_EQUALS,
                    line=index + 1,
                    snippet=line,
                    replacement="".join(pieces) + comment,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class VarDeclarationRule:
    syntax: LiteralSyntax = LiteralSyntax(quotes="\"'`")
    code: str = LINT_JS_VAR_DECLARATION.code
    name: str = "jsVarDeclaration"
    category: str = LINT_JS_VAR_DECLARATION.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code, comment = split_line_comment(line, self.syntax)
            if _VAR_KEYWORD_RE.search(mask_literals(code, self.syntax)) is None:
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_JS_VAR_DECLARATION,
                    line=index + 1,
                    snippet=line,
                    replacement=replace_word(code, "var", "let", self.syntax) + comment,
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class StrictEqualityRule:
    """Loose `==` and `!=` are reported separately, each fix tightening every occurrence of its operator."""

    syntax: LiteralSyntax = LiteralSyntax(quotes="\"'`")
    code: str = LINT_JS_STRICT_EQUALITY.code
    name: str = "jsStrictEquality"
    category: str = LINT_JS_STRICT_EQUALITY.category
    domain: LintDomain = "correctness"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        checks = (
            ("==", "===", re.compile(r"(?<![=!<>])==(?!=)")),
            ("!=", "!==", re.compile(r"!=(?!=)")),
        )
        for index, line in enumerate(lines):
            code, comment = split_line_comment(line, self.syntax)
            masked = mask_literals(code, self.syntax)
            for loose, strict, pattern in checks:
                positions = [match.start() for match in pattern.finditer(masked)]
                if not positions:
                    continue
                fixed = code
                for position in reversed(positions):
                    fixed = fixed[:position] + strict + fixed[position + len(loose) :]
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_JS_STRICT_EQUALITY,
                        line=index + 1,
                        snippet=line,
                        replacement=fixed + comment,
                        strict=strict,
                        loose=loose,
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class StrictModeRule:
    """Scripts without a `'use strict'` directive get one above the first statement.

    ES modules are strict already, so any `import`/`export` line disables the check.
    """

    syntax: LiteralSyntax = LiteralSyntax(quotes="\"'`")
    code: str = LINT_JS_STRICT_MODE.code
    name: str = "jsStrictMode"
    category: str = LINT_JS_STRICT_MODE.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        first: int | None = None
        for index, line in enumerate(lines):
            if _USE_STRICT_RE.search(line) or _MODULE_RE.match(line):
                return []
            stripped = line.strip()
            if first is None and stripped and not stripped.startswith("#!") and not self.syntax.is_comment_line(stripped):
                first = index
        if first is None:
            return []
        line = lines[first]
        return [
            diagnostic_from_spec(
                LINT_JS_STRICT_MODE,
                line=first + 1,
                snippet=line,
                replacement=f"'use strict';\n{line.strip()}",
            )
        ]
