"""Run-result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from polylint.config import LintOptions
from polylint.pipeline.results import CheckRunResult, FormatRunResult, LintRunResult

if TYPE_CHECKING:
    from polylint.diagnostics import Diagnostic


def detect(text: str, file_path: str | None = None) -> str | None:
    from polylint.pipeline.entrypoints import detect as _detect

    return _detect(text, file_path)


def analyze(analyzer_id: str, text: str) -> list[Diagnostic]:
    from polylint.pipeline.entrypoints import analyze as _analyze

    return _analyze(analyzer_id, text)


def apply_fixes(analyzer_id: str, text: str, diagnostics: Sequence[Diagnostic]) -> str:
    from polylint.pipeline.entrypoints import apply_fixes as _apply_fixes

    return _apply_fixes(analyzer_id, text, diagnostics)


def supported_languages() -> list[str]:
    from polylint.pipeline.entrypoints import supported_languages as _supported_languages

    return _supported_languages()


def run_lint(
    text: str,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> LintRunResult:
    from polylint.pipeline.entrypoints import run_lint as _run_lint

    return _run_lint(text, analyzer_id=analyzer_id, file_path=file_path, options=options)


def run_format(
    text: str,
    diagnostics: Sequence[Diagnostic] | None = None,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> FormatRunResult:
    from polylint.pipeline.entrypoints import run_format as _run_format

    return _run_format(
        text,
        diagnostics,
        analyzer_id=analyzer_id,
        file_path=file_path,
        options=options,
    )


def run_check(
    text: str,
    *,
    analyzer_id: str | None = None,
    file_path: str | None = None,
    options: LintOptions | None = None,
) -> CheckRunResult:
    from polylint.pipeline.entrypoints import run_check as _run_check

    return _run_check(text, analyzer_id=analyzer_id, file_path=file_path, options=options)


__all__ = [
    "CheckRunResult",
    "FormatRunResult",
    "LintRunResult",
    "analyze",
    "apply_fixes",
    "detect",
    "run_check",
    "run_format",
    "run_lint",
    "supported_languages",
]
