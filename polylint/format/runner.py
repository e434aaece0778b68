"""Format runner: lint, apply fixes, optionally re-lint the result."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from polylint.config import LintOptions
from polylint.diagnostics import Diagnostic, fixable
from polylint.format.fixer import apply_fixes
from polylint.pipeline.results import FormatRunResult

if TYPE_CHECKING:
    from polylint.analysis import Analyzer


def run_format(
    text: str,
    analyzer: Analyzer,
    diagnostics: Sequence[Diagnostic] | None = None,
    options: LintOptions | None = None,
) -> FormatRunResult:
    """Apply fixes from `diagnostics`, or from a fresh lint run when none are given."""
    resolved_options = options if options is not None else LintOptions()
    planned = list(diagnostics) if diagnostics is not None else analyzer.analyze(text, resolved_options)
    profile = analyzer.profile
    fix_result = apply_fixes(
        text,
        fixable(planned),
        indent_unit=profile.indent_unit,
        relocatable=profile.relocatable_line,
        syntax=profile.syntax,
    )

    if resolved_options.verify_fixes:
        remaining = analyzer.analyze(fix_result.text, resolved_options)
    else:
        remaining = [diagnostic for diagnostic in planned if not diagnostic.has_fix]

    return FormatRunResult(
        language=analyzer.id,
        formatted_text=fix_result.text,
        applied=fix_result.applied,
        diagnostics=remaining,
        changed=fix_result.text != text,
        skipped=fix_result.skipped,
    )
