"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from polylint.diagnostics.diagnostic import Severity


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str
    severity: Severity = "warning"
    category: str = "Formatting"


LINT_FORMAT_EMPTY_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_EMPTY_LINE",
    message="Empty line detected",
    hint="Remove empty line",
    severity="info",
    category="Formatting",
)

LINT_FORMAT_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_INDENTATION",
    message="Indent must be multiple of {unit} spaces (got {width})",
    hint="Use {unit} spaces per indentation level",
    severity="warning",
    category="Formatting",
)

LINT_FORMAT_INDENTATION_CONSISTENCY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_INDENTATION_CONSISTENCY",
    message="Inconsistent indentation: expected {expected} spaces, got {width}",
    hint="Indent nested blocks by {unit} spaces",
    severity="warning",
    category="Formatting",
)

LINT_FORMAT_OPERATOR_SPACING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_OPERATOR_SPACING",
    message="Missing spaces around operator '{operator}'",
    hint="Add spaces around operators",
    severity="warning",
    category="Formatting",
)

LINT_FORMAT_COMMA_SPACING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_COMMA_SPACING",
    message="Missing space after comma",
    hint="Add a space after each comma",
    severity="warning",
    category="Formatting",
)

LINT_FORMAT_BRACE_PLACEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_BRACE_PLACEMENT",
    message="Opening brace should be on its own line",
    hint="Move the opening brace to the next line",
    severity="warning",
    category="Formatting",
)

LINT_FORMAT_BRACE_SAME_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_FORMAT_BRACE_SAME_LINE",
    message="Opening brace should be on the same line as its statement",
    hint="Move the opening brace to the end of the previous line",
    severity="warning",
    category="Formatting",
)

LINT_SYNTAX_MISSING_TERMINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_MISSING_TERMINATOR",
    message="Missing semicolon at end of statement",
    hint="Add ';' at the end of the statement",
    severity="error",
    category="Syntax",
)

LINT_SYNTAX_EXTRA_TERMINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_EXTRA_TERMINATOR",
    message="Unnecessary semicolon after control structure",
    hint="Remove the semicolon after the condition",
    severity="error",
    category="Syntax",
)

LINT_SYNTAX_CONTROL_STRUCTURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_CONTROL_STRUCTURE",
    message="Control structure missing parentheses or braces",
    hint="Add parentheses around the condition and braces around the body",
    severity="error",
    category="Syntax",
)

LINT_SYNTAX_TRY_HANDLER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_SYNTAX_TRY_HANDLER",
    message="try block without catch or finally",
    hint="Add catch or finally block",
    severity="error",
    category="Syntax",
)

LINT_PRACTICE_SWITCH_DEFAULT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PRACTICE_SWITCH_DEFAULT",
    message="switch statement missing default case",
    hint="Add default case",
    severity="warning",
    category="Best Practice",
)

LINT_QUALITY_DUPLICATE_LINES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_QUALITY_DUPLICATE_LINES",
    message="Found {count} duplicate lines of code",
    hint="Extract repeated code into a function or loop",
    severity="warning",
    category="Code Quality",
)

LINT_NAMING_KEYWORD_COLLISION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_NAMING_KEYWORD_COLLISION",
    message="Identifier '{name}' conflicts with {language} keyword",
    hint="Rename '{name}' to '{name}_'",
    severity="error",
    category="Naming",
)

LINT_NAMING_CONVENTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_NAMING_CONVENTION",
    message="{kind} name '{name}' should use {convention}",
    hint="Rename to '{fixed}'",
    severity="warning",
    category="Naming",
)

LINT_RESOURCE_LIFECYCLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_RESOURCE_LIFECYCLE",
    message="Resource '{resource}' is opened but never closed",
    hint="Release the resource explicitly or use {managed}",
    severity="warning",
    category="Resource Management",
)

LINT_PYTHON_NONE_COMPARISON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_NONE_COMPARISON",
    message="Comparison to None should use '{operator}'",
    hint="Use 'is None' or 'is not None'",
    severity="warning",
    category="Best Practice",
)

LINT_PYTHON_MISSING_COLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_MISSING_COLON",
    message="Missing colon after '{keyword}' statement",
    hint="Add ':' at the end of the line",
    severity="error",
    category="Syntax",
)

LINT_PYTHON_EXPECTED_INDENTED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_EXPECTED_INDENTED_BLOCK",
    message="Expected an indented block",
    hint="Indent the block body by {unit} spaces",
    severity="error",
    category="Indentation",
)

LINT_PYTHON_MISSING_CONDITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_MISSING_CONDITION",
    message="'{keyword}' statement is missing a condition",
    hint="Add a condition before ':'",
    severity="error",
    category="Syntax",
)

LINT_PYTHON_EMPTY_IF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_EMPTY_IF",
    message="Empty if statement body",
    hint="Add logic to the if body or remove the statement",
    severity="warning",
    category="Code Quality",
)

LINT_PYTHON_IMPORT_PLACEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_IMPORT_PLACEMENT",
    message="Import should be at the top of the file",
    hint="Move imports to the beginning of the file",
    severity="warning",
    category="PEP8",
)

LINT_PYTHON_MULTIPLE_IMPORTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_PYTHON_MULTIPLE_IMPORTS",
    message="Multiple imports on one line",
    hint="Put each import on a separate line",
    severity="warning",
    category="PEP8",
)

LINT_CSHARP_VAR_USAGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_CSHARP_VAR_USAGE",
    message="Use 'var' when the type is obvious from the initializer",
    hint="Replace '{type}' with 'var'",
    severity="info",
    category="Code Style",
)

LINT_CSHARP_NULL_COMPARISON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_CSHARP_NULL_COMPARISON",
    message="Use '{operator}' for null checks",
    hint="Replace the equality operator with a pattern match",
    severity="info",
    category="Null Safety",
)

LINT_CSHARP_REDUNDANT_EQUALS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_CSHARP_REDUNDANT_EQUALS",
    message="Too many '=' characters in condition",
    hint="Use '==' for comparison",
    severity="error",
    category="Syntax",
)

LINT_JS_STRICT_EQUALITY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_JS_STRICT_EQUALITY",
    message="Use '{strict}' instead of '{loose}'",
    hint="Strict comparison avoids implicit type coercion",
    severity="warning",
    category="Type Safety",
)

LINT_JS_VAR_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_JS_VAR_DECLARATION",
    message="Use 'let' or 'const' instead of 'var'",
    hint="Replace 'var' with 'let' or 'const'",
    severity="warning",
    category="Modern JS",
)

LINT_JS_STRICT_MODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_JS_STRICT_MODE",
    message="Missing 'use strict' directive",
    hint="Add 'use strict'; at the beginning of the file",
    severity="info",
    category="Best Practice",
)

LINT_HTML_DOCUMENT_STRUCTURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_DOCUMENT_STRUCTURE",
    message="Missing {element}",
    hint="Add {element}",
    severity="warning",
    category="Structure",
)

LINT_HTML_TAG_CLOSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_TAG_CLOSING",
    message="Unclosed <{tag}> tag",
    hint="Add closing </{tag}> tag",
    severity="error",
    category="Syntax",
)

LINT_HTML_TAG_CASE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_TAG_CASE",
    message="HTML {kind} should be lowercase: '{name}'",
    hint="Convert {kind} to lowercase",
    severity="warning",
    category="Formatting",
)

LINT_HTML_ATTRIBUTE_QUOTES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_ATTRIBUTE_QUOTES",
    message="Attribute '{attribute}' {problem}",
    hint="Use double quotes for HTML attributes",
    severity="warning",
    category="Validation",
)

LINT_HTML_EMPTY_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_EMPTY_ELEMENT",
    message="Empty {tag} tag without content",
    hint="Remove empty tag or add content",
    severity="info",
    category="Code Quality",
)

LINT_HTML_IMAGE_DIMENSIONS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_IMAGE_DIMENSIONS",
    message="Image missing {missing}",
    hint="Add width and height attributes to prevent layout shifts",
    severity="info",
    category="Performance",
)

LINT_HTML_TAG_SPELLING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_TAG_SPELLING",
    message="Unknown or misspelled tag '{tag}'",
    hint="Did you mean: {suggestion}?",
    severity="warning",
    category="Validation",
)

LINT_HTML_REQUIRED_ATTRIBUTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_REQUIRED_ATTRIBUTE",
    message="<{tag}> missing required attribute '{attribute}'",
    hint='Add {attribute}="" attribute',
    severity="warning",
    category="Validation",
)

LINT_HTML_TABLE_STRUCTURE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LINT_HTML_TABLE_STRUCTURE",
    message="{problem}",
    hint="{hint}",
    severity="warning",
    category="Structure",
)

RELOCATE_TO_TOP_CODES: Final[frozenset[str]] = frozenset({LINT_PYTHON_IMPORT_PLACEMENT.code})
