"""Line-edit model and the buffer editor that applies it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from polylint.format.indentation import reindent_block, reindent_line


class EditOp(StrEnum):
    REPLACE = "replace"
    DELETE = "delete"
    INSERT_BLOCK = "insert_block"


@dataclass(frozen=True, slots=True)
class LineEdit:
    """One edit against a 0-based line index.

    `own_indent` on a `replace` marks the text's indentation as authoritative.
    On an `insert_block` it marks the lines as already indented.
    """

    index: int
    op: EditOp
    text: str = ""
    own_indent: bool = False

    @staticmethod
    def replace(index: int, text: str, *, own_indent: bool = False) -> "LineEdit":
        return LineEdit(index=index, op=EditOp.REPLACE, text=text, own_indent=own_indent)

    @staticmethod
    def delete(index: int) -> "LineEdit":
        return LineEdit(index=index, op=EditOp.DELETE)

    @staticmethod
    def insert_block(index: int, text: str, *, own_indent: bool = False) -> "LineEdit":
        return LineEdit(index=index, op=EditOp.INSERT_BLOCK, text=text, own_indent=own_indent)


class BufferEditor:
    """Mutable line buffer that applies `LineEdit`s one at a time.

    Edits must be applied in descending index order so that the indices of
    pending edits stay valid; `ordered` produces that order.
    """

    __slots__ = ("indent_unit", "lines")

    def __init__(self, lines: Iterable[str], indent_unit: int = 4) -> None:
        self.lines = list(lines)
        self.indent_unit = indent_unit

    def apply(self, edit: LineEdit) -> None:
        if not 0 <= edit.index < len(self.lines):
            raise IndexError(f"Line {edit.index + 1} is out of range for a {len(self.lines)}-line buffer")
        if edit.op == EditOp.DELETE:
            del self.lines[edit.index]
            return
        original = self.lines[edit.index]
        if edit.op == EditOp.REPLACE:
            self.lines[edit.index] = reindent_line(original, edit.text, self.indent_unit, edit.own_indent)
            return
        block = [line.rstrip("\r") for line in edit.text.split("\n")]
        if not edit.own_indent:
            block = reindent_block(original, block, self.indent_unit)
        self.lines[edit.index : edit.index + 1] = block

    @staticmethod
    def ordered(edits: Iterable[LineEdit]) -> list[LineEdit]:
        """Edits in descending index order; edits on the same index keep their order."""
        return sorted(edits, key=lambda edit: edit.index, reverse=True)
