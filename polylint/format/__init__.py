"""Line edits, indentation handling and fix application."""

from polylint.format.edits import BufferEditor, EditOp, LineEdit
from polylint.format.fixer import (
    AUTHORITATIVE_INDENT_CATEGORIES,
    FixResult,
    SkippedFix,
    apply_fixes,
    compose_replacements,
    is_indent_authoritative,
    relocation_order,
    remap_lines,
)
from polylint.format.indentation import (
    indent_width,
    nearest_indent,
    next_indent,
    reindent_block,
    reindent_line,
)
from polylint.format.runner import run_format

__all__ = [
    "AUTHORITATIVE_INDENT_CATEGORIES",
    "BufferEditor",
    "EditOp",
    "FixResult",
    "LineEdit",
    "SkippedFix",
    "apply_fixes",
    "compose_replacements",
    "indent_width",
    "is_indent_authoritative",
    "nearest_indent",
    "next_indent",
    "reindent_block",
    "reindent_line",
    "relocation_order",
    "remap_lines",
    "run_format",
]
