"""Small line-scanning helpers shared by the check families."""

from __future__ import annotations

from collections.abc import Sequence
import re

from polylint.text import LiteralSyntax, code_mask

CONTROL_KEYWORD_RE = re.compile(r"^(?:else\s+)?(if|for|foreach|while|switch)\b")


def next_code_index(lines: Sequence[str], start: int) -> int | None:
    """Index of the first non-blank line at or after `start`."""
    for index in range(start, len(lines)):
        if lines[index].strip():
            return index
    return None


def previous_code_index(lines: Sequence[str], start: int) -> int | None:
    for index in range(start, -1, -1):
        if lines[index].strip():
            return index
    return None


def bracket_balance(masked: str) -> int:
    """Open minus closed parentheses and square brackets in an already masked line."""
    return masked.count("(") + masked.count("[") - masked.count(")") - masked.count("]")


def matching_paren(text: str, open_index: int) -> int | None:
    depth = 0
    for index in range(open_index, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    return None


def continuation_flags(lines: Sequence[str], syntax: LiteralSyntax) -> list[bool]:
    """For each line, whether it starts inside an unclosed bracket or after a backslash continuation."""
    flags: list[bool] = []
    depth = 0
    backslash = False
    for line in lines:
        flags.append(depth > 0 or backslash)
        masked = code_mask(line, syntax)
        depth = max(depth + bracket_balance(masked), 0)
        backslash = masked.endswith("\\")
    return flags


def brace_depth_scan(
    lines: Sequence[str],
    start: int,
    syntax: LiteralSyntax,
    *,
    window: int = 200,
) -> tuple[list[tuple[int, int]], int | None]:
    """Walk a braced scope beginning at `start`.

    Returns `(index, depth_before_line)` pairs for every line until the scope
    closes, plus the index of the closing line (or `None` if the scope never
    closes within the window). The opening brace may sit on `start` or on the
    next code line.
    """
    visited: list[tuple[int, int]] = []
    depth = 0
    opened = False
    for index in range(start, min(len(lines), start + window)):
        masked = code_mask(lines[index], syntax)
        visited.append((index, depth))
        for char in masked:
            if char == "{":
                depth += 1
                opened = True
            elif char == "}":
                depth -= 1
                if opened and depth == 0:
                    return visited, index
        if not opened and index > start and masked.strip():
            return visited, None
    return visited, None
