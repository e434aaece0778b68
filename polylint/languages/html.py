"""HTML profile and rule set."""

from __future__ import annotations

import re

from polylint.languages.profile import ContentSignals, LanguageProfile
from polylint.lint.checks import (
    AttributeQuotesRule,
    DocumentStructureRule,
    EmptyElementRule,
    EmptyLineRule,
    ImageDimensionsRule,
    IndentationRule,
    RequiredAttributesRule,
    TableStructureRule,
    TagCaseRule,
    TagClosingRule,
    TagSpellingRule,
)
from polylint.lint.rules import LintRule

_KNOWN_TAGS = (
    "html|head|body|title|div|span|p|a|ul|ol|li|table|thead|tbody|tr|td|th|form|label|button"
    "|section|article|nav|header|footer|main|h[1-6]|script|style|select|option|textarea"
)
_CLOSING_TAG_RE = re.compile(rf"</(?:{_KNOWN_TAGS})\s*>", re.IGNORECASE)
# Single-line element with text content only; the bounded body keeps the scan linear.
_PAIRED_TAG_RE = re.compile(r"<([A-Za-z][\w-]*)(?=[\s>])[^<>\n]{0,200}>[^<\n]{0,200}</\1>")

PROFILE = LanguageProfile(
    id="html",
    display_name="HTML",
    extensions=frozenset({".html", ".htm"}),
    keywords=frozenset(),
    signals=ContentSignals(
        positive=(
            re.compile(r"<!DOCTYPE", re.IGNORECASE),
            "<html",
            "<head",
            "<body",
            "<div",
            "<p>",
            _CLOSING_TAG_RE,
            _PAIRED_TAG_RE,
        ),
        negative=("<?xml", "<?php", "<%", "public class", "using ", "def ", "function "),
    ),
    terminator=None,
    line_comment=None,
    block_comments=False,
    quotes="",
)


def build_rules() -> tuple[LintRule, ...]:
    return (
        EmptyLineRule(),
        DocumentStructureRule(),
        TagClosingRule(),
        TagCaseRule(),
        AttributeQuotesRule(),
        IndentationRule(PROFILE.indent_unit, syntax=PROFILE.syntax, continuations=False),
        EmptyElementRule(),
        ImageDimensionsRule(),
        TagSpellingRule(),
        TableStructureRule(),
        RequiredAttributesRule(),
    )
