"""Language analyzer: one profile plus its ordered rule set."""

from __future__ import annotations

from dataclasses import dataclass

from polylint.config import LintOptions
from polylint.diagnostics import Diagnostic
from polylint.languages.profile import LanguageProfile
from polylint.lint.rules import LintRule
from polylint.lint.runner import run_lint
from polylint.pipeline.results import LintRunResult


@dataclass(frozen=True, slots=True)
class Analyzer:
    """Stateless composition of a `LanguageProfile` and the rules run for it."""

    profile: LanguageProfile
    rules: tuple[LintRule, ...]

    @property
    def id(self) -> str:
        return self.profile.id

    @property
    def display_name(self) -> str:
        return self.profile.display_name

    def can_handle(self, text: str, extension: str = "") -> bool:
        """With an extension, extension membership decides; otherwise content signals do."""
        if extension:
            return self.profile.handles_extension(extension)
        return self.profile.signals.matches(text)

    def analyze(self, text: str, options: LintOptions | None = None) -> list[Diagnostic]:
        return self.lint(text, options).diagnostics

    def lint(self, text: str, options: LintOptions | None = None) -> LintRunResult:
        return run_lint(text, self, options)
