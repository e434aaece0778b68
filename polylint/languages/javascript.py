"""JavaScript/TypeScript profile and rule set (braces on the statement line)."""

from __future__ import annotations

from polylint.languages.profile import ContentSignals, LanguageProfile
from polylint.lint.checks import (
    BraceSameLineRule,
    BraceStyle,
    ControlStructureRule,
    DuplicateLinesRule,
    EmptyLineRule,
    IndentationRule,
    KeywordCollisionRule,
    NamingConventionRule,
    NamingTarget,
    OperatorSpacingRule,
    OperatorTable,
    StrictEqualityRule,
    StrictModeRule,
    SwitchDefaultRule,
    TerminatorRule,
    TryHandlerRule,
    VarDeclarationRule,
)
from polylint.lint.rules import LintRule
from polylint.text import Convention

KEYWORDS = frozenset(
    {
        "abstract", "arguments", "await", "boolean", "break", "byte", "case", "catch",
        "char", "class", "const", "continue", "debugger", "default", "delete", "do",
        "double", "else", "enum", "eval", "export", "extends", "false", "final",
        "finally", "float", "for", "function", "goto", "if", "implements", "import",
        "in", "instanceof", "int", "interface", "let", "long", "native", "new",
        "null", "package", "private", "protected", "public", "return", "short",
        "static", "super", "switch", "synchronized", "this", "throw", "throws",
        "transient", "true", "try", "typeof", "var", "void", "volatile", "while",
        "with", "yield",
    }
)

PROFILE = LanguageProfile(
    id="javascript",
    display_name="JavaScript",
    extensions=frozenset({".js", ".jsx", ".ts", ".tsx"}),
    keywords=KEYWORDS,
    signals=ContentSignals(
        positive=(
            "function",
            "=>",
            "const ",
            "let ",
            "console.log",
            "document.",
            "window.",
            "addEventListener",
            "import ",
            "export ",
        ),
    ),
    quotes="\"'`",
)

OPERATORS = OperatorTable(
    binary=(
        ">>>=", "===", "!==", "**=", "<<=", ">>=", "&&=", "||=", "??=", ">>>",
        "==", "!=", "<=", ">=", "&&", "||", "??", "=>", "**",
        "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>",
        "=", "+", "-", "*", "/", "%", "<", ">",
    ),
)


def build_rules() -> tuple[LintRule, ...]:
    syntax = PROFILE.syntax
    return (
        VarDeclarationRule(syntax=syntax),
        EmptyLineRule(),
        TerminatorRule(syntax=syntax, directive_prefixes=("import ",), exempt_prefixes=("#!", "@")),
        StrictEqualityRule(syntax=syntax),
        OperatorSpacingRule(OPERATORS, syntax=syntax, skip_prefixes=("#!",)),
        IndentationRule(PROFILE.indent_unit, syntax=syntax),
        BraceSameLineRule(syntax=syntax),
        KeywordCollisionRule(
            language=PROFILE.display_name,
            keywords=KEYWORDS,
            declarations=(
                r"\b(?:var|let|const)\s+(?P<name>[A-Za-z_$][\w$]*)",
                r"\bfunction\s*\*?\s+(?P<name>[A-Za-z_$][\w$]*)",
                r"\bclass\s+(?P<name>[A-Za-z_$][\w$]*)",
            ),
            parameter_lists=(r"\bfunction\b[^(]*\((?P<params>[^)]*)\)",),
            parameter_pick="first",
            syntax=syntax,
        ),
        ControlStructureRule(BraceStyle.SAME_LINE, syntax=syntax, unit=PROFILE.indent_unit),
        TryHandlerRule(syntax=syntax),
        SwitchDefaultRule(syntax=syntax),
        DuplicateLinesRule(syntax=syntax),
        NamingConventionRule(
            targets=(
                NamingTarget(
                    "Class",
                    r"\bclass\s+(?P<name>[A-Za-z_$][\w$]*)",
                    (Convention.PASCAL,),
                    Convention.PASCAL,
                    skip=r"\$",
                ),
                NamingTarget(
                    "Function",
                    r"\bfunction\s*\*?\s+(?P<name>[A-Za-z_$][\w$]*)\s*\(",
                    (Convention.CAMEL, Convention.PASCAL),
                    Convention.CAMEL,
                    skip=r"\$",
                ),
            ),
            keywords=KEYWORDS,
            syntax=syntax,
        ),
        StrictModeRule(syntax=syntax),
    )
