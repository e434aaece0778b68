"""Diagnostics."""

from polylint.diagnostics.codes import (
    LINT_CSHARP_NULL_COMPARISON,
    LINT_CSHARP_REDUNDANT_EQUALS,
    LINT_CSHARP_VAR_USAGE,
    LINT_FORMAT_BRACE_PLACEMENT,
    LINT_FORMAT_BRACE_SAME_LINE,
    LINT_FORMAT_COMMA_SPACING,
    LINT_FORMAT_EMPTY_LINE,
    LINT_FORMAT_INDENTATION,
    LINT_FORMAT_INDENTATION_CONSISTENCY,
    LINT_FORMAT_OPERATOR_SPACING,
    LINT_HTML_ATTRIBUTE_QUOTES,
    LINT_HTML_DOCUMENT_STRUCTURE,
    LINT_HTML_EMPTY_ELEMENT,
    LINT_HTML_IMAGE_DIMENSIONS,
    LINT_HTML_REQUIRED_ATTRIBUTE,
    LINT_HTML_TABLE_STRUCTURE,
    LINT_HTML_TAG_CASE,
    LINT_HTML_TAG_CLOSING,
    LINT_HTML_TAG_SPELLING,
    LINT_JS_STRICT_EQUALITY,
    LINT_JS_STRICT_MODE,
    LINT_JS_VAR_DECLARATION,
    LINT_NAMING_CONVENTION,
    LINT_NAMING_KEYWORD_COLLISION,
    LINT_PRACTICE_SWITCH_DEFAULT,
    LINT_PYTHON_EMPTY_IF,
    LINT_PYTHON_EXPECTED_INDENTED_BLOCK,
    LINT_PYTHON_IMPORT_PLACEMENT,
    LINT_PYTHON_MISSING_COLON,
    LINT_PYTHON_MISSING_CONDITION,
    LINT_PYTHON_MULTIPLE_IMPORTS,
    LINT_PYTHON_NONE_COMPARISON,
    LINT_QUALITY_DUPLICATE_LINES,
    LINT_RESOURCE_LIFECYCLE,
    LINT_SYNTAX_CONTROL_STRUCTURE,
    LINT_SYNTAX_EXTRA_TERMINATOR,
    LINT_SYNTAX_MISSING_TERMINATOR,
    LINT_SYNTAX_TRY_HANDLER,
    RELOCATE_TO_TOP_CODES,
    DiagnosticSpec,
)
from polylint.diagnostics.diagnostic import Diagnostic, Severity
from polylint.diagnostics.report import (
    collect_diagnostics,
    count_by_category,
    diagnostic_from_spec,
    fixable,
    has_errors,
    sort_by_line,
)

__all__ = [
    "LINT_CSHARP_NULL_COMPARISON",
    "LINT_CSHARP_REDUNDANT_EQUALS",
    "LINT_CSHARP_VAR_USAGE",
    "LINT_FORMAT_BRACE_PLACEMENT",
    "LINT_FORMAT_BRACE_SAME_LINE",
    "LINT_FORMAT_COMMA_SPACING",
    "LINT_FORMAT_EMPTY_LINE",
    "LINT_FORMAT_INDENTATION",
    "LINT_FORMAT_INDENTATION_CONSISTENCY",
    "LINT_FORMAT_OPERATOR_SPACING",
    "LINT_HTML_ATTRIBUTE_QUOTES",
    "LINT_HTML_DOCUMENT_STRUCTURE",
    "LINT_HTML_EMPTY_ELEMENT",
    "LINT_HTML_IMAGE_DIMENSIONS",
    "LINT_HTML_REQUIRED_ATTRIBUTE",
    "LINT_HTML_TABLE_STRUCTURE",
    "LINT_HTML_TAG_CASE",
    "LINT_HTML_TAG_CLOSING",
    "LINT_HTML_TAG_SPELLING",
    "LINT_JS_STRICT_EQUALITY",
    "LINT_JS_STRICT_MODE",
    "LINT_JS_VAR_DECLARATION",
    "LINT_NAMING_CONVENTION",
    "LINT_NAMING_KEYWORD_COLLISION",
    "LINT_PRACTICE_SWITCH_DEFAULT",
    "LINT_PYTHON_EMPTY_IF",
    "LINT_PYTHON_EXPECTED_INDENTED_BLOCK",
    "LINT_PYTHON_IMPORT_PLACEMENT",
    "LINT_PYTHON_MISSING_COLON",
    "LINT_PYTHON_MISSING_CONDITION",
    "LINT_PYTHON_MULTIPLE_IMPORTS",
    "LINT_PYTHON_NONE_COMPARISON",
    "LINT_QUALITY_DUPLICATE_LINES",
    "LINT_RESOURCE_LIFECYCLE",
    "LINT_SYNTAX_CONTROL_STRUCTURE",
    "LINT_SYNTAX_EXTRA_TERMINATOR",
    "LINT_SYNTAX_MISSING_TERMINATOR",
    "LINT_SYNTAX_TRY_HANDLER",
    "RELOCATE_TO_TOP_CODES",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "count_by_category",
    "diagnostic_from_spec",
    "fixable",
    "has_errors",
    "sort_by_line",
]
