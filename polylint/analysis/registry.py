"""Analyzer registry and language detection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from functools import lru_cache
import logging
import os

from polylint.analysis.analyzer import Analyzer
from polylint.languages import LANGUAGE_MODULES
from polylint.lint.rules import validate_lint_rules

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES: tuple[str, ...] = ("C#", "C++", "Java", "Python", "JavaScript", "HTML")


class AnalyzerRegistry:
    """Ordered, read-only set of analyzers.

    Order is detection priority: when several analyzers could claim a text,
    the earlier one wins.
    """

    __slots__ = ("_analyzers",)

    def __init__(self, analyzers: Iterable[Analyzer]) -> None:
        ordered = tuple(analyzers)
        seen: set[str] = set()
        for analyzer in ordered:
            if analyzer.id in seen:
                raise ValueError(f"Duplicate analyzer id: {analyzer.id}")
            seen.add(analyzer.id)
            validate_lint_rules(analyzer.rules)
        self._analyzers = ordered

    @property
    def analyzers(self) -> tuple[Analyzer, ...]:
        return self._analyzers

    def __iter__(self) -> Iterator[Analyzer]:
        return iter(self._analyzers)

    def __len__(self) -> int:
        return len(self._analyzers)

    def select(self, text: str, file_path: str | None = None) -> Analyzer | None:
        """Pick an analyzer by file extension first, then by content signals."""
        extension = os.path.splitext(file_path)[1] if file_path else ""
        if extension:
            for analyzer in self._analyzers:
                if analyzer.can_handle(text, extension):
                    logger.debug("Selected %s by extension %s", analyzer.id, extension)
                    return analyzer
        for analyzer in self._analyzers:
            if analyzer.can_handle(text):
                logger.debug("Selected %s by content", analyzer.id)
                return analyzer
        logger.debug("No analyzer matched (extension=%r)", extension)
        return None

    def get(self, analyzer_id: str) -> Analyzer:
        """Look up an analyzer by id or display name, ignoring case."""
        wanted = analyzer_id.casefold()
        for analyzer in self._analyzers:
            if wanted in (analyzer.id.casefold(), analyzer.display_name.casefold()):
                return analyzer
        known = ", ".join(analyzer.id for analyzer in self._analyzers)
        raise ValueError(f"Unknown analyzer id: {analyzer_id!r} (known: {known})")

    def supported_languages(self) -> list[str]:
        names = {analyzer.display_name for analyzer in self._analyzers}
        listed = [name for name in SUPPORTED_LANGUAGES if name in names]
        return listed + sorted(names.difference(listed))


def build_analyzers() -> tuple[Analyzer, ...]:
    return tuple(Analyzer(module.PROFILE, module.build_rules()) for module in LANGUAGE_MODULES)


@lru_cache(maxsize=1)
def default_registry() -> AnalyzerRegistry:
    return AnalyzerRegistry(build_analyzers())
