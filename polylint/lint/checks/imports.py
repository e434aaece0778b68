"""Python import layout checks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_PYTHON_IMPORT_PLACEMENT,
    LINT_PYTHON_MULTIPLE_IMPORTS,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import continuation_flags
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, leading_preamble, split_line_comment

_PYTHON_SYNTAX = LiteralSyntax(quotes="\"'", triple_quotes=True, line_comment="#", block_comments=False)
IMPORT_LINE_RE = re.compile(r"^(?:import|from)\s+\S")


@dataclass(frozen=True, slots=True)
class ImportPlacementRule:
    """Module-level imports that follow other module code.

    The fix is a relocation: the replacement is the line itself and the fixer
    hoists every module-level import below the preamble.
    """

    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_IMPORT_PLACEMENT.code
    name: str = "pythonImportPlacement"
    category: str = LINT_PYTHON_IMPORT_PLACEMENT.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        continued = continuation_flags(lines, self.syntax)
        seen_code = False
        for index in range(leading_preamble(lines), len(lines)):
            line = lines[index]
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or continued[index]:
                continue
            if IMPORT_LINE_RE.match(line) is None:
                seen_code = True
                continue
            if seen_code:
                diagnostics.append(
                    diagnostic_from_spec(LINT_PYTHON_IMPORT_PLACEMENT, line=index + 1, snippet=line, replacement=line)
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class MultipleImportsRule:
    syntax: LiteralSyntax = _PYTHON_SYNTAX
    code: str = LINT_PYTHON_MULTIPLE_IMPORTS.code
    name: str = "pythonMultipleImports"
    category: str = LINT_PYTHON_MULTIPLE_IMPORTS.category
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for index, line in enumerate(lines):
            code, comment = split_line_comment(line, self.syntax)
            match = re.match(r"^import\s+(.+)$", code.strip())
            if match is None or "," not in match.group(1) or "(" in match.group(1):
                continue
            modules = [name.strip() for name in match.group(1).split(",") if name.strip()]
            if len(modules) < 2:
                continue
            split = [f"import {module}" for module in modules]
            if comment:
                split[0] = f"{split[0]}  {comment.strip()}"
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_PYTHON_MULTIPLE_IMPORTS,
                    line=index + 1,
                    snippet=line,
                    replacement="\n".join(split),
                )
            )
        return diagnostics
