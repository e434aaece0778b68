"""Indentation arithmetic used when fixes replace whole lines."""

from __future__ import annotations

from collections.abc import Sequence

from polylint.text import leading_whitespace


def indent_width(whitespace: str, unit: int) -> int:
    """Column width of `whitespace`, with tabs expanded to `unit` columns."""
    return len(whitespace.expandtabs(unit))


def nearest_indent(width: int, unit: int) -> int:
    """Round `width` to the nearest multiple of `unit` (halfway rounds up)."""
    return (width + unit // 2) // unit * unit


def next_indent(width: int, unit: int) -> int:
    """Width one level deeper than `width`.

    An aligned width moves by one unit. An unaligned width moves to the next
    multiple of `unit`.
    """
    if width % unit == 0:
        return width + unit
    return (width // unit + 1) * unit


def reindent_line(original: str, replacement: str, unit: int, own_indent: bool) -> str:
    """Indent a single-line replacement for the line it replaces.

    With `own_indent` the replacement's indentation wins, normalized to the
    nearest multiple of `unit`. Otherwise a replacement without leading
    whitespace inherits the original line's indentation.
    """
    whitespace = leading_whitespace(replacement)
    body = replacement[len(whitespace) :]
    if own_indent:
        return " " * nearest_indent(indent_width(whitespace, unit), unit) + body
    if whitespace:
        return replacement
    return leading_whitespace(original) + body


def reindent_block(original: str, replacement_lines: Sequence[str], unit: int) -> list[str]:
    """Indent the lines of a multi-line replacement relative to `original`.

    Unindented lines take the original indentation. Indented lines are nested:
    they go one level below the original, keeping any depth beyond one unit.
    """
    base = leading_whitespace(original)
    nested = next_indent(indent_width(base, unit), unit)
    block: list[str] = []
    for line in replacement_lines:
        if not line.strip():
            block.append("")
            continue
        whitespace = leading_whitespace(line)
        body = line[len(whitespace) :]
        if not whitespace:
            block.append(base + body)
            continue
        extra = max(indent_width(whitespace, unit) - unit, 0)
        block.append(" " * (nested + extra) + body)
    return block


__all__ = [
    "indent_width",
    "leading_whitespace",
    "nearest_indent",
    "next_indent",
    "reindent_block",
    "reindent_line",
]
