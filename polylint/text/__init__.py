"""Line splitting, literal masking and identifier casing."""

from polylint.text.casing import (
    Convention,
    convert,
    is_camel_case,
    is_pascal_case,
    is_snake_case,
    is_upper_snake_case,
    matches_convention,
    split_words,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
    to_upper_snake_case,
)
from polylint.text.lines import SourceLines, leading_preamble, leading_whitespace
from polylint.text.literals import (
    LiteralSyntax,
    code_mask,
    is_inside_literal,
    literal_spans,
    mask_literals,
    replace_word,
    split_line_comment,
)

__all__ = [
    "Convention",
    "LiteralSyntax",
    "SourceLines",
    "code_mask",
    "convert",
    "is_camel_case",
    "is_inside_literal",
    "is_pascal_case",
    "is_snake_case",
    "is_upper_snake_case",
    "leading_preamble",
    "leading_whitespace",
    "literal_spans",
    "mask_literals",
    "matches_convention",
    "replace_word",
    "split_line_comment",
    "split_words",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_upper_snake_case",
]
