from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLines:
    """
    Source text split into lines, remembering how to put it back together.

    Invariants:
    - `lines` never contain `\\n` or a trailing `\\r`
    - a single trailing newline is a terminator, not an extra empty line
    """

    lines: tuple[str, ...]
    newline: str = "\n"
    trailing_newline: bool = False

    @staticmethod
    def from_text(text: str) -> "SourceLines":
        """Split `text` on newlines, recording the newline style."""
        if not text:
            return SourceLines(lines=())
        newline = "\r\n" if "\r\n" in text else "\n"
        parts = text.split("\n")
        trailing_newline = text.endswith("\n")
        if trailing_newline:
            parts.pop()
        lines = tuple(part[:-1] if part.endswith("\r") else part for part in parts)
        return SourceLines(lines=lines, newline=newline, trailing_newline=trailing_newline)

    def render(self, lines: list[str] | tuple[str, ...] | None = None) -> str:
        """Join `lines` (defaults to the original lines) with the recorded newline style."""
        body = self.lines if lines is None else lines
        if not body:
            return ""
        text = self.newline.join(body)
        if self.trailing_newline:
            text += self.newline
        return text

    def __len__(self) -> int:
        return len(self.lines)


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(" \t"))]


def leading_preamble(lines: Sequence[str], comment: str = "#") -> int:
    """Number of leading lines that are blank, comments or a module docstring."""
    index = 0
    docstring_seen = False
    while index < len(lines):
        stripped = lines[index].strip()
        if not stripped or stripped.startswith(comment):
            index += 1
            continue
        quote = stripped[:3]
        if docstring_seen or quote not in ('"""', "'''"):
            break
        docstring_seen = True
        # A one-line docstring closes on the same line.
        if len(stripped) >= 6 and stripped.endswith(quote):
            index += 1
            continue
        index += 1
        while index < len(lines) and quote not in lines[index]:
            index += 1
        index += 1
    return min(index, len(lines))
