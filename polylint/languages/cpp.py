"""C++ profile and rule set."""

from __future__ import annotations

import re

from polylint.languages.profile import ContentSignals, LanguageProfile
from polylint.lint.checks import (
    BraceOwnLineRule,
    BraceStyle,
    CommaSpacingRule,
    ControlStructureRule,
    DuplicateLinesRule,
    EmptyLineRule,
    ExtraTerminatorRule,
    IndentationConsistencyRule,
    KeywordCollisionRule,
    OperatorSpacingRule,
    OperatorTable,
    ResourceLifecycleRule,
    SwitchDefaultRule,
    TerminatorRule,
    TryHandlerRule,
)
from polylint.lint.rules import LintRule

KEYWORDS = frozenset(
    {
        "alignas", "alignof", "and", "and_eq", "asm", "auto", "bitand", "bitor", "bool", "break",
        "case", "catch", "char", "char16_t", "char32_t", "class", "compl", "const", "constexpr",
        "const_cast", "continue", "decltype", "default", "delete", "do", "double", "dynamic_cast",
        "else", "enum", "explicit", "export", "extern", "false", "float", "for", "friend", "goto",
        "if", "inline", "int", "long", "mutable", "namespace", "new", "noexcept", "not", "not_eq",
        "nullptr", "operator", "or", "or_eq", "private", "protected", "public", "register",
        "reinterpret_cast", "return", "short", "signed", "sizeof", "static", "static_assert",
        "static_cast", "struct", "switch", "template", "this", "thread_local", "throw", "true",
        "try", "typedef", "typeid", "typename", "union", "unsigned", "using", "virtual", "void",
        "volatile", "wchar_t", "while", "xor", "xor_eq",
    }
)

PROFILE = LanguageProfile(
    id="cpp",
    display_name="C++",
    extensions=frozenset({".cpp", ".h", ".hpp", ".cc", ".cxx"}),
    keywords=KEYWORDS,
    signals=ContentSignals(
        positive=(
            "#include",
            "std::",
            "namespace ",
            re.compile(r"\bcout\b"),
            re.compile(r"\bcin\b"),
            (re.compile(r"\bnew\b"), re.compile(r"\bdelete\b")),
        ),
    ),
)

OPERATORS = OperatorTable(
    binary=(
        "<<=", ">>=", "==", "!=", "<=", ">=", "&&", "||",
        "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>",
        "=", "+", "-", "*", "/", "%", "<", ">",
    ),
    opaque=("++", "--", "->", "::"),
)

_TYPES = "int|char|float|double|bool|void|long|short|unsigned|signed|auto|size_t|string|std::string"


def build_rules() -> tuple[LintRule, ...]:
    syntax = PROFILE.syntax
    return (
        TerminatorRule(syntax=syntax, directive_prefixes=("using ", "typedef ")),
        ExtraTerminatorRule(syntax=syntax),
        CommaSpacingRule(syntax=syntax, skip_prefixes=("#",)),
        OperatorSpacingRule(OPERATORS, syntax=syntax, skip_prefixes=("#",)),
        IndentationConsistencyRule(PROFILE.indent_unit, syntax=syntax),
        EmptyLineRule(),
        BraceOwnLineRule(syntax=syntax, exempt_prefixes=("namespace",)),
        KeywordCollisionRule(
            language=PROFILE.display_name,
            keywords=KEYWORDS,
            declarations=(
                rf"\b(?:{_TYPES})\s*[*&]?\s+(?P<name>[A-Za-z_]\w*)\s*(?=[=;,(){{\[])",
                r"^\s*(?:class|struct|union|enum)\s+(?P<name>[A-Za-z_]\w*)",
            ),
            parameter_lists=(
                r"^\s*(?:[\w:<>*&]+\s+)*(?P<type>[\w:<>*&]+)\s+[*&]?[A-Za-z_][\w:]*\s*\((?P<params>[^)]*)\)",
            ),
            syntax=syntax,
        ),
        ControlStructureRule(BraceStyle.OWN_LINE, syntax=syntax, unit=PROFILE.indent_unit),
        TryHandlerRule(syntax=syntax, handlers=("catch",)),
        SwitchDefaultRule(syntax=syntax),
        DuplicateLinesRule(syntax=syntax),
        ResourceLifecycleRule(
            acquire=(r"\b(?:std::)?(?P<resource>[io]?fstream)\s+\w+\s*[({]",),
            managed=(),
            managed_description="a scoped stream object",
            syntax=syntax,
        ),
    )
