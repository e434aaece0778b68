"""Public operations over the default analyzer registry."""

from __future__ import annotations

from collections.abc import Sequence
import os

from polylint.analysis import Analyzer, default_registry
from polylint.config import LintOptions
from polylint.diagnostics import Diagnostic, fixable, has_errors, sort_by_line
from polylint.format import apply_fixes as _apply_fixes
from polylint.format import run_format as _run_format
from polylint.pipeline.results import CheckRunResult, FormatRunResult, LintRunResult


def detect(text: str, file_path: str | None = None) -> str | None:
    """Return the id of the analyzer chosen for `text`, or `None`."""
    analyzer = default_registry().select(text, file_path)
    return None if analyzer is None else analyzer.id


def analyze(analyzer_id: str, text: str) -> list[Diagnostic]:
    """Run one analyzer's rules; diagnostics come in rule registration order."""
    return default_registry().get(analyzer_id).analyze(text)


def apply_fixes(analyzer_id: str, text: str, diagnostics: Sequence[Diagnostic]) -> str:
    """Apply the fixable subset of `diagnostics` and return the rewritten text."""
    profile = default_registry().get(analyzer_id).profile
    return _apply_fixes(
        text,
        fixable(diagnostics),
        indent_unit=profile.indent_unit,
        relocatable=profile.relocatable_line,
        syntax=profile.syntax,
    ).text


def supported_languages() -> list[str]:
    return default_registry().supported_languages()


def run_lint(
    text: str,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> LintRunResult:
    analyzer = _resolve_analyzer(text, analyzer_id=analyzer_id, file_path=file_path)
    if analyzer is None:
        return LintRunResult(language=None, diagnostics=[])
    return analyzer.lint(text, options)


def run_format(
    text: str,
    diagnostics: Sequence[Diagnostic] | None = None,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> FormatRunResult:
    analyzer = _resolve_analyzer(text, analyzer_id=analyzer_id, file_path=file_path)
    if analyzer is None:
        if diagnostics:
            raise ValueError("Diagnostics were passed but no analyzer matched; pass analyzer_id")
        return FormatRunResult(language=None, formatted_text=text, applied=[], diagnostics=[], changed=False)
    return _run_format(text, analyzer, diagnostics=diagnostics, options=options)


def run_check(
    text: str,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> CheckRunResult:
    """Lint and summarize: diagnostics sorted by line, error flag, fixable count."""
    lint_result = run_lint(text, analyzer_id=analyzer_id, file_path=file_path, options=options)
    diagnostics = sort_by_line(lint_result.diagnostics)
    return CheckRunResult(
        language=lint_result.language,
        diagnostics=diagnostics,
        has_errors=has_errors(diagnostics),
        fixable_count=len(fixable(diagnostics)),
    )


def _resolve_analyzer(
    text: str,
    *,
    analyzer_id: str | None,
    file_path: str | None,
) -> Analyzer | None:
    registry = default_registry()
    if analyzer_id is None:
        return registry.select(text, file_path)
    analyzer = registry.get(analyzer_id)
    extension = os.path.splitext(file_path)[1] if file_path else ""
    if extension and not analyzer.can_handle(text, extension):
        raise ValueError(f"Analyzer {analyzer.id!r} does not handle {file_path!r}; pass either analyzer_id or file_path")
    return analyzer
