"""Python profile and rule set (PEP 8 flavored)."""

from __future__ import annotations

import keyword
import re

from polylint.languages.profile import ContentSignals, LanguageProfile
from polylint.lint.checks import (
    BlockMode,
    CommaSpacingRule,
    DuplicateLinesRule,
    EmptyIfRule,
    EmptyLineRule,
    ExpectedIndentedBlockRule,
    ImportPlacementRule,
    IndentationRule,
    KeywordCollisionRule,
    MissingColonRule,
    MissingConditionRule,
    MultipleImportsRule,
    NamingConventionRule,
    NamingTarget,
    NoneComparisonRule,
    OperatorSpacingRule,
    OperatorTable,
    ResourceLifecycleRule,
    TryHandlerRule,
)
from polylint.lint.checks.imports import IMPORT_LINE_RE
from polylint.lint.rules import LintRule
from polylint.text import Convention

KEYWORDS = frozenset(keyword.kwlist)

PROFILE = LanguageProfile(
    id="python",
    display_name="Python",
    extensions=frozenset({".py"}),
    keywords=KEYWORDS,
    signals=ContentSignals(
        positive=(
            "def ",
            "import ",
            "print(",
            "if __name__",
            re.compile(r"\A#!.*\n"),
            re.compile(r"^\s*(?:for|while|class)\b[^\n]*:\s*$", re.MULTILINE),
        ),
        negative=(
            "public class",
            "#include",
            "std::",
            "function ",
            "console.",
            "System.out",
            "import java.",
            re.compile(r"^\s*import\s[^\n]*\bfrom\s+['\"]", re.MULTILINE),
        ),
    ),
    terminator=None,
    line_comment="#",
    block_comments=False,
    triple_quotes=True,
    relocatable_line=IMPORT_LINE_RE.pattern,
)

OPERATORS = OperatorTable(
    binary=(
        "**=", "//=", ">>=", "<<=", "==", "!=", "<=", ">=", "->", ":=",
        "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "**", "//", "<<", ">>",
        "=", "+", "-", "*", "/", "%", "<", ">",
    ),
    opaque=(),
    control_keywords=("if", "elif", "while"),
)


def build_rules() -> tuple[LintRule, ...]:
    syntax = PROFILE.syntax
    unit = PROFILE.indent_unit
    return (
        OperatorSpacingRule(
            OPERATORS,
            syntax=syntax,
            generics=False,
            keyword_arguments=True,
            skip_prefixes=("import ", "from ", "@"),
        ),
        CommaSpacingRule(syntax=syntax, generics=False, skip_prefixes=("import ",)),
        NoneComparisonRule(syntax=syntax),
        IndentationRule(unit, syntax=syntax),
        EmptyLineRule(),
        KeywordCollisionRule(
            language=PROFILE.display_name,
            keywords=KEYWORDS,
            declarations=(
                r"^\s*(?P<name>[A-Za-z_]\w*)\s*=(?!=)",
                r"^\s*(?:async\s+)?def\s+(?P<name>[A-Za-z_]\w*)",
                r"^\s*class\s+(?P<name>[A-Za-z_]\w*)",
            ),
            parameter_lists=(r"^\s*(?:async\s+)?def\s+\w+\s*\((?P<params>[^)]*)\)",),
            parameter_pick="first",
            syntax=syntax,
        ),
        MissingColonRule(syntax=syntax),
        ExpectedIndentedBlockRule(unit, syntax=syntax),
        MissingConditionRule(syntax=syntax),
        DuplicateLinesRule(syntax=syntax),
        EmptyIfRule(unit, syntax=syntax),
        TryHandlerRule(BlockMode.INDENT, syntax=syntax, handlers=("except", "finally"), unit=unit),
        ImportPlacementRule(syntax=syntax),
        MultipleImportsRule(syntax=syntax),
        NamingConventionRule(
            targets=(
                NamingTarget(
                    "Class",
                    r"^\s*class\s+(?P<name>[A-Za-z_]\w*)",
                    (Convention.PASCAL,),
                    Convention.PASCAL,
                ),
                NamingTarget(
                    "Function",
                    r"^\s*(?:async\s+)?def\s+(?P<name>[A-Za-z_]\w*)",
                    (Convention.SNAKE,),
                    Convention.SNAKE,
                    skip=r"^__\w+__$",
                ),
                NamingTarget(
                    "Constant",
                    r"^(?P<name>[A-Z][A-Z0-9]*_[A-Za-z0-9_]*)\s*=(?!=)",
                    (Convention.UPPER_SNAKE,),
                    Convention.UPPER_SNAKE,
                ),
                # PascalCase assignments are type aliases.
                NamingTarget(
                    "Variable",
                    r"^\s*(?P<name>[A-Za-z_]\w*)\s*(?::[^=]+)?=(?!=)",
                    (Convention.SNAKE, Convention.UPPER_SNAKE, Convention.PASCAL),
                    Convention.SNAKE,
                    skip=r"^__\w+__$",
                ),
            ),
            keywords=KEYWORDS,
            syntax=syntax,
        ),
        ResourceLifecycleRule(
            acquire=(r"(?<![\w.])(?P<resource>open)\s*\(",),
            managed=(r"^\s*(?:async\s+)?with\b",),
            managed_description="a with statement",
            release=r"\.close\s*\(",
            syntax=syntax,
        ),
    )
