"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from polylint.diagnostics import Diagnostic

if TYPE_CHECKING:
    from polylint.format.fixer import SkippedFix


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Result of running one analyzer's rules over a text.

    `language` is `None` when no analyzer matched the input.
    """

    language: str | None
    diagnostics: list[Diagnostic]
    rule_count: int = 0


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of applying fixes to a text."""

    language: str | None
    formatted_text: str
    applied: list[Diagnostic]
    diagnostics: list[Diagnostic]
    changed: bool
    skipped: list[SkippedFix] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Result of a lint run summarized for reporting."""

    language: str | None
    diagnostics: list[Diagnostic]
    has_errors: bool
    fixable_count: int
