"""Java profile and rule set."""

from __future__ import annotations

from polylint.languages.profile import ContentSignals, LanguageProfile
from polylint.lint.checks import (
    BraceOwnLineRule,
    BraceStyle,
    ControlStructureRule,
    DuplicateLinesRule,
    EmptyLineRule,
    ExtraTerminatorRule,
    IndentationRule,
    KeywordCollisionRule,
    NamingConventionRule,
    NamingTarget,
    OperatorSpacingRule,
    OperatorTable,
    ResourceLifecycleRule,
    SwitchDefaultRule,
    TerminatorRule,
    TryHandlerRule,
)
from polylint.lint.rules import LintRule
from polylint.text import Convention

KEYWORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char", "class",
        "const", "continue", "default", "do", "double", "else", "enum", "extends", "final",
        "finally", "float", "for", "goto", "if", "implements", "import", "instanceof", "int",
        "interface", "long", "native", "new", "package", "private", "protected", "public",
        "return", "short", "static", "strictfp", "super", "switch", "synchronized", "this",
        "throw", "throws", "transient", "try", "void", "volatile", "while",
    }
)

PROFILE = LanguageProfile(
    id="java",
    display_name="Java",
    extensions=frozenset({".java"}),
    keywords=KEYWORDS,
    signals=ContentSignals(
        positive=("public class", "import java.", "System.out.print", "public static void main"),
    ),
)

OPERATORS = OperatorTable(
    binary=(
        ">>>=", "<<=", ">>=", ">>>", "==", "!=", "<=", ">=", "&&", "||", "->",
        "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>",
        "=", "+", "-", "*", "/", "%", "<", ">",
    ),
    opaque=("++", "--", "::"),
)

_PRIMITIVES = "byte|short|int|long|float|double|boolean|char|String|var"
_MODIFIERS = "public|private|protected|static|final|abstract|synchronized|native|default|strictfp"


def build_rules() -> tuple[LintRule, ...]:
    syntax = PROFILE.syntax
    return (
        TerminatorRule(syntax=syntax, directive_prefixes=("import ", "package "), exempt_prefixes=("@",)),
        ExtraTerminatorRule(syntax=syntax),
        OperatorSpacingRule(OPERATORS, syntax=syntax, skip_prefixes=("import ", "package ", "@")),
        IndentationRule(PROFILE.indent_unit, syntax=syntax),
        EmptyLineRule(),
        BraceOwnLineRule(syntax=syntax, lambda_arrows=("->",)),
        KeywordCollisionRule(
            language=PROFILE.display_name,
            keywords=KEYWORDS,
            declarations=(
                rf"\b(?:{_PRIMITIVES})\s+(?P<name>[A-Za-z_]\w*)\s*(?=[=;,)])",
                r"\b(?:class|interface|enum|record)\s+(?P<name>[A-Za-z_]\w*)",
            ),
            parameter_lists=(
                r"^\s*(?:\w+\s+)*(?P<type>[\w<>\[\],?]+)\s+[A-Za-z_]\w*\s*\((?P<params>[^)]*)\)",
            ),
            syntax=syntax,
        ),
        ControlStructureRule(BraceStyle.OWN_LINE, syntax=syntax, unit=PROFILE.indent_unit),
        TryHandlerRule(syntax=syntax, allow_resource_try=True),
        SwitchDefaultRule(syntax=syntax),
        NamingConventionRule(
            targets=(
                NamingTarget(
                    "Constant",
                    r"\b(?:static\s+final|final\s+static)\s+[\w<>,\[\]]+\s+(?P<name>[A-Za-z_]\w*)\s*=",
                    (Convention.UPPER_SNAKE,),
                    Convention.UPPER_SNAKE,
                ),
                NamingTarget(
                    "Class",
                    r"\b(?:class|interface|enum|record)\s+(?P<name>[A-Za-z_]\w*)",
                    (Convention.PASCAL,),
                    Convention.PASCAL,
                ),
                NamingTarget(
                    "Method",
                    rf"^\s*(?:(?:{_MODIFIERS})\s+)*(?:<[^>]*>\s+)?(?P<type>[A-Za-z_][\w<>,\[\]?]*)\s+(?P<name>[A-Za-z_]\w*)\s*\(",
                    (Convention.CAMEL,),
                    Convention.CAMEL,
                ),
            ),
            keywords=KEYWORDS,
            syntax=syntax,
        ),
        DuplicateLinesRule(syntax=syntax),
        ResourceLifecycleRule(
            acquire=(
                r"\bnew\s+(?P<resource>FileInputStream|FileOutputStream|FileReader|FileWriter"
                r"|BufferedReader|BufferedWriter|PrintWriter|Scanner|Socket)\s*\(",
                r"\bDriverManager\.(?P<resource>getConnection)\s*\(",
            ),
            managed=(r"^\s*try\s*\(",),
            managed_description="try-with-resources",
            managed_header_above=True,
            syntax=syntax,
        ),
    )
