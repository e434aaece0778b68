"""Code-quality checks: duplicated lines and unmanaged resources."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import re

from polylint.diagnostics import (
    LINT_QUALITY_DUPLICATE_LINES,
    LINT_RESOURCE_LIFECYCLE,
    Diagnostic,
    diagnostic_from_spec,
)
from polylint.lint.checks._scan import previous_code_index
from polylint.lint.rules import LintConfidence, LintDomain
from polylint.text import LiteralSyntax, code_mask, leading_whitespace


@dataclass(frozen=True, slots=True)
class DuplicateLinesRule:
    """Runs of identical consecutive lines are reported once, at the first line of the run."""

    syntax: LiteralSyntax = LiteralSyntax()
    min_run: int = 3
    code: str = LINT_QUALITY_DUPLICATE_LINES.code
    name: str = "qualityDuplicateLines"
    category: str = LINT_QUALITY_DUPLICATE_LINES.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        index = 0
        while index < len(lines):
            stripped = lines[index].strip()
            end = index + 1
            while end < len(lines) and lines[end].strip() == stripped:
                end += 1
            run_length = end - index
            if run_length >= self.min_run and self._counts(stripped):
                diagnostics.append(
                    diagnostic_from_spec(
                        LINT_QUALITY_DUPLICATE_LINES,
                        line=index + 1,
                        snippet=lines[index],
                        count=run_length,
                    )
                )
            index = end
        return diagnostics

    def _counts(self, stripped: str) -> bool:
        return bool(stripped) and not self.syntax.is_comment_line(stripped)


@dataclass(frozen=True, slots=True)
class ResourceLifecycleRule:
    """Acquired resources need a release call or a managed scope within `window` lines.

    `acquire` patterns capture the resource type in a `resource` group.
    `managed` patterns on the acquisition line mark the resource as
    auto-released; with `managed_header_above`, the code line right above is
    searched too (a `try (` header whose resources start on the next line).
    When `fix_prefix` is set, a declaration line is fixed by prefixing it
    (`using ` turns a C# local into a using declaration).
    """

    acquire: tuple[str, ...]
    managed: tuple[str, ...]
    managed_description: str
    release: str = r"\.(close|Close|Dispose)\s*\("
    managed_header_above: bool = False
    skip: str | None = None
    fix_prefix: str | None = None
    window: int = 10
    syntax: LiteralSyntax = LiteralSyntax()
    code: str = LINT_RESOURCE_LIFECYCLE.code
    name: str = "resourceLifecycle"
    category: str = LINT_RESOURCE_LIFECYCLE.category
    domain: LintDomain = "heuristic"
    confidence: LintConfidence = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        acquire = tuple(re.compile(pattern) for pattern in self.acquire)
        managed = tuple(re.compile(pattern) for pattern in self.managed)
        release = re.compile(self.release)
        skip = re.compile(self.skip) if self.skip is not None else None
        for index, line in enumerate(lines):
            code = code_mask(line, self.syntax)
            match = next((m for pattern in acquire if (m := pattern.search(code)) is not None), None)
            if match is None:
                continue
            if self._is_managed(lines, index, code, managed):
                continue
            if skip is not None and skip.search(line):
                continue
            window = lines[index : index + 1 + self.window]
            if any(release.search(code_mask(candidate, self.syntax)) for candidate in window):
                continue
            diagnostics.append(
                diagnostic_from_spec(
                    LINT_RESOURCE_LIFECYCLE,
                    line=index + 1,
                    snippet=line,
                    replacement=self._fix(line, code),
                    resource=match.group("resource"),
                    managed=self.managed_description,
                )
            )
        return diagnostics

    def _is_managed(
        self,
        lines: Sequence[str],
        index: int,
        code: str,
        managed: tuple[re.Pattern[str], ...],
    ) -> bool:
        scopes = [code]
        above = previous_code_index(lines, index - 1) if index > 0 else None
        if self.managed_header_above and above is not None:
            scopes.append(code_mask(lines[above], self.syntax))
        return any(pattern.search(scope) for pattern in managed for scope in scopes)

    def _fix(self, line: str, code: str) -> str | None:
        if self.fix_prefix is None or not code.rstrip().endswith(";") or "=" not in code:
            return None
        return leading_whitespace(line) + self.fix_prefix + line.lstrip()
