"""Single-line string literal classification.

Every helper walks one line left to right and tracks quote state. A backslash
escapes the next character, and a literal left open at the end of the line
simply ends there: multi-line strings are not tracked.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

MASK = "\x00"


@dataclass(frozen=True, slots=True)
class LiteralSyntax:
    """Quote and comment markers for one language."""

    quotes: str = "\"'"
    triple_quotes: bool = False
    line_comment: str | None = "//"
    block_comments: bool = True

    def is_comment_line(self, stripped: str) -> bool:
        """Whether a stripped line is a whole-line comment or a block comment continuation."""
        if self.line_comment is not None and stripped.startswith(self.line_comment):
            return True
        if not self.block_comments:
            return False
        return stripped.startswith(("/*", "*/", "* ")) or stripped == "*"


def scan_line(line: str, syntax: LiteralSyntax) -> tuple[list[tuple[int, int]], int | None]:
    """Return literal spans `[start, end)` (quotes included) and the comment start, if any."""
    spans: list[tuple[int, int]] = []
    index = 0
    length = len(line)
    comment = syntax.line_comment
    while index < length:
        char = line[index]
        if comment is not None and line.startswith(comment, index):
            return spans, index
        if char not in syntax.quotes:
            index += 1
            continue
        delimiter = char
        if syntax.triple_quotes and line.startswith(char * 3, index):
            delimiter = char * 3
        start = index
        index += len(delimiter)
        while index < length:
            if line[index] == "\\":
                index += 2
                continue
            if line.startswith(delimiter, index):
                index += len(delimiter)
                break
            index += 1
        else:
            index = length
        spans.append((start, min(index, length)))
    return spans, None


def literal_spans(line: str, syntax: LiteralSyntax) -> list[tuple[int, int]]:
    return scan_line(line, syntax)[0]


def is_inside_literal(line: str, position: int, syntax: LiteralSyntax) -> bool:
    return any(start <= position < end for start, end in literal_spans(line, syntax))


def mask_literals(line: str, syntax: LiteralSyntax) -> str:
    """Blank literal interiors with NUL characters, keeping the quotes and the line length."""
    chars = list(line)
    for start, end in literal_spans(line, syntax):
        for position in range(start + 1, end - 1):
            chars[position] = MASK
        # Unterminated literal: nothing closes it, mask through the end.
        if end == len(line) and not _is_closed(line, start, end, syntax):
            for position in range(start + 1, end):
                chars[position] = MASK
    return "".join(chars)


def split_line_comment(line: str, syntax: LiteralSyntax) -> tuple[str, str]:
    """Split `line` into code and trailing comment, ignoring comment markers inside literals."""
    _, comment_start = scan_line(line, syntax)
    if comment_start is None:
        return line, ""
    return line[:comment_start], line[comment_start:]


def code_mask(line: str, syntax: LiteralSyntax) -> str:
    """Masked code part of `line` with the trailing comment and trailing whitespace removed."""
    code, _ = split_line_comment(line, syntax)
    return mask_literals(code, syntax).rstrip()


def replace_word(line: str, word: str, new: str, syntax: LiteralSyntax) -> str:
    """Replace whole-word occurrences of `word` outside string literals."""
    masked = mask_literals(line, syntax)
    pattern = re.compile(rf"(?<![\w$]){re.escape(word)}(?![\w$])")
    pieces: list[str] = []
    cursor = 0
    for match in pattern.finditer(masked):
        pieces.append(line[cursor : match.start()])
        pieces.append(new)
        cursor = match.end()
    pieces.append(line[cursor:])
    return "".join(pieces)


def _is_closed(line: str, start: int, end: int, syntax: LiteralSyntax) -> bool:
    delimiter = line[start]
    if syntax.triple_quotes and line.startswith(delimiter * 3, start):
        delimiter *= 3
    if end - start < 2 * len(delimiter):
        return False
    if not line.endswith(delimiter, 0, end):
        return False
    # The closing quote must not be escaped.
    backslashes = 0
    position = end - len(delimiter) - 1
    while position > start and line[position] == "\\":
        backslashes += 1
        position -= 1
    return backslashes % 2 == 0
