import pytest

from polylint.text import (
    Convention,
    LiteralSyntax,
    SourceLines,
    convert,
    is_inside_literal,
    leading_preamble,
    mask_literals,
    matches_convention,
    replace_word,
    split_line_comment,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    to_upper_snake_case,
)
from polylint.text.literals import MASK

C_SYNTAX = LiteralSyntax()
PYTHON_SYNTAX = LiteralSyntax(triple_quotes=True, line_comment="#", block_comments=False)


def test_source_lines_round_trip_keeps_newline_style() -> None:
    source = SourceLines.from_text("a\r\nb\r\n")

    assert source.lines == ("a", "b")
    assert source.newline == "\r\n"
    assert source.render() == "a\r\nb\r\n"
    assert source.render(["c"]) == "c\r\n"


def test_source_lines_without_trailing_newline() -> None:
    source = SourceLines.from_text("a\n\nb")

    assert source.lines == ("a", "", "b")
    assert source.render() == "a\n\nb"
    assert SourceLines.from_text("").lines == ()


def test_mask_literals_keeps_quotes_and_length() -> None:
    masked = mask_literals('x = "a+b" + 1', C_SYNTAX)

    assert masked == f'x = "{MASK * 3}" + 1'
    assert len(masked) == len('x = "a+b" + 1')


def test_mask_literals_masks_unterminated_literal_to_end_of_line() -> None:
    assert mask_literals('x = "abc', C_SYNTAX) == f'x = "{MASK * 3}'


def test_split_line_comment_ignores_markers_inside_literals() -> None:
    assert split_line_comment('url = "http://x" // note', C_SYNTAX) == ('url = "http://x" ', "// note")
    assert split_line_comment("value = '#' # tag", PYTHON_SYNTAX) == ("value = '#' ", "# tag")


def test_is_inside_literal() -> None:
    line = 'print("a == b")'

    assert is_inside_literal(line, line.index("=="), C_SYNTAX)
    assert not is_inside_literal(line, 0, C_SYNTAX)


def test_replace_word_is_substring_safe() -> None:
    assert replace_word("if value_if: if", "if", "if_", PYTHON_SYNTAX) == "if_ value_if: if_"
    assert replace_word('print("class") class', "class", "class_", PYTHON_SYNTAX) == 'print("class") class_'


def test_leading_preamble_covers_shebang_and_docstring() -> None:
    lines = ["#!/usr/bin/env python", '"""Doc."""', "import os"]

    assert leading_preamble(lines) == 2
    assert leading_preamble(['"""Doc', "more", '"""', "", "x = 1"]) == 4


def test_split_words_on_case_transitions() -> None:
    assert split_words("parseHTTPResponse2") == ["parse", "HTTP", "Response2"]
    assert split_words("max_value") == ["max", "value"]


@pytest.mark.parametrize(
    ("name", "converter", "expected"),
    [
        ("myVariableName", to_snake_case, "my_variable_name"),
        ("my_class", to_pascal_case, "MyClass"),
        ("GetValue", to_camel_case, "getValue"),
        ("maxSize", to_upper_snake_case, "MAX_SIZE"),
    ],
)
def test_case_converters(name: str, converter, expected: str) -> None:
    assert converter(name) == expected


def test_conversion_keeps_leading_underscores() -> None:
    assert convert("_privateThing", Convention.SNAKE) == "_private_thing"


def test_convention_predicates() -> None:
    assert matches_convention("HTTPServer", Convention.PASCAL)
    assert matches_convention("getValue", Convention.CAMEL)
    assert not matches_convention("get_value", Convention.CAMEL)
    assert matches_convention("MAX_SIZE", Convention.UPPER_SNAKE)
