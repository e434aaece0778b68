import pytest

from polylint.format import BufferEditor, EditOp, LineEdit
from polylint.format.indentation import (
    indent_width,
    nearest_indent,
    next_indent,
    reindent_block,
    reindent_line,
)


def test_indent_width_expands_tabs() -> None:
    assert indent_width("\t  ", 4) == 6
    assert indent_width("", 4) == 0


@pytest.mark.parametrize(("width", "expected"), [(0, 0), (2, 4), (5, 4), (6, 8), (8, 8)])
def test_nearest_indent_rounds_halfway_up(width: int, expected: int) -> None:
    assert nearest_indent(width, 4) == expected


@pytest.mark.parametrize(("width", "expected"), [(0, 4), (4, 8), (6, 8)])
def test_next_indent_moves_one_level(width: int, expected: int) -> None:
    assert next_indent(width, 4) == expected


@pytest.mark.parametrize(
    ("original", "replacement", "own_indent", "expected"),
    [
        ("    x=1", "x = 1", False, "    x = 1"),
        ("    x=1", "  x = 1", False, "  x = 1"),
        ("   x = 1", "     x = 1", True, "    x = 1"),
        ("        x = 1", "x = 1", True, "x = 1"),
    ],
    ids=["inherits", "keeps_own", "authoritative_normalized", "authoritative_dedent"],
)
def test_reindent_line(original: str, replacement: str, own_indent: bool, expected: str) -> None:
    assert reindent_line(original, replacement, 4, own_indent) == expected


def test_reindent_block_nests_indented_lines_below_original() -> None:
    block = reindent_block("  a", ["b", "    c", "        d", ""], 4)

    assert block == ["  b", "    c", "        d", ""]


def test_buffer_editor_applies_each_operation() -> None:
    editor = BufferEditor(["if (x)", "    y=1;", "    z;", "done();"])

    editor.apply(LineEdit.replace(1, "y = 1;"))
    editor.apply(LineEdit.delete(2))
    editor.apply(LineEdit.insert_block(0, "if (x)\n{"))

    assert editor.lines == ["if (x)", "{", "    y = 1;", "done();"]


def test_buffer_editor_keeps_preindented_block() -> None:
    editor = BufferEditor(["    old"])

    editor.apply(LineEdit.insert_block(0, "a\r\n  b", own_indent=True))

    assert editor.lines == ["a", "  b"]


def test_buffer_editor_rejects_out_of_range_edit() -> None:
    editor = BufferEditor(["only"])

    try:
        editor.apply(LineEdit.delete(3))
    except IndexError as exc:
        assert str(exc) == "Line 4 is out of range for a 1-line buffer"
    else:
        raise AssertionError("Expected an out-of-range edit to fail")
    assert editor.lines == ["only"]


def test_ordered_sorts_descending_and_keeps_ties_stable() -> None:
    first = LineEdit.replace(2, "a")
    second = LineEdit.replace(2, "b")
    edits = [LineEdit.delete(0), first, LineEdit.insert_block(5, "x"), second]

    ordered = BufferEditor.ordered(edits)

    assert [edit.index for edit in ordered] == [5, 2, 2, 0]
    assert ordered[1] is first
    assert ordered[2] is second
    assert ordered[0].op == EditOp.INSERT_BLOCK
