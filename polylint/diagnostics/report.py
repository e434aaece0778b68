"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from polylint.diagnostics.codes import DiagnosticSpec
from polylint.diagnostics.diagnostic import Diagnostic


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    *,
    line: int,
    snippet: str = "",
    replacement: str | None = None,
    message: str | None = None,
    hint: str | None = None,
    **fields: object,
) -> Diagnostic:
    """Build a diagnostic from a code spec, filling message/hint placeholders from `fields`.

    `message` and `hint` override the templates for rules that report several
    variants under one code.
    """
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message.format(**fields),
        line=line,
        category=spec.category,
        suggestion=hint if hint is not None else spec.hint.format(**fields),
        original_snippet=snippet,
        replacement=replacement,
        severity=spec.severity,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_by_line(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    # sorted() is stable: ties keep rule registration order.
    return sorted(diagnostics, key=lambda diagnostic: diagnostic.line)


def fixable(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return [d for d in diagnostics if d.has_fix]


def count_by_category(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    return dict(Counter(d.category for d in diagnostics))
