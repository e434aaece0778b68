"""Per-language profile data: extensions, keywords, literal syntax and content signals."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import TypeAlias

from polylint.text import LiteralSyntax

Signal: TypeAlias = "str | re.Pattern[str] | tuple[Signal, ...]"


def signal_matches(signal: Signal, text: str) -> bool:
    """A substring, a compiled pattern, or a tuple of signals that must all match."""
    if isinstance(signal, str):
        return signal in text
    if isinstance(signal, re.Pattern):
        return signal.search(text) is not None
    return all(signal_matches(part, text) for part in signal)


@dataclass(frozen=True, slots=True)
class ContentSignals:
    """Content sniffing: any positive signal and no negative signal."""

    positive: tuple[Signal, ...]
    negative: tuple[Signal, ...] = ()

    def matches(self, text: str) -> bool:
        if not text.strip():
            return False
        if not any(signal_matches(signal, text) for signal in self.positive):
            return False
        return not any(signal_matches(signal, text) for signal in self.negative)


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    id: str
    display_name: str
    extensions: frozenset[str]
    keywords: frozenset[str]
    signals: ContentSignals
    indent_unit: int = 4
    terminator: str | None = ";"
    line_comment: str | None = "//"
    block_comments: bool = True
    quotes: str = "\"'"
    triple_quotes: bool = False
    # Lines the fixer may hoist to the top of the file (after the preamble).
    relocatable_line: str | None = None

    @property
    def syntax(self) -> LiteralSyntax:
        return LiteralSyntax(
            quotes=self.quotes,
            triple_quotes=self.triple_quotes,
            line_comment=self.line_comment,
            block_comments=self.block_comments,
        )

    def handles_extension(self, extension: str) -> bool:
        normalized = extension.lower()
        if normalized and not normalized.startswith("."):
            normalized = f".{normalized}"
        return normalized in self.extensions
