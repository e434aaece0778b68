"""C# profile and rule set (Microsoft style: braces on their own line)."""

from __future__ import annotations

import re

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
    NullComparisonRule,
    OperatorSpacingRule,
    OperatorTable,
    RedundantEqualsRule,
    ResourceLifecycleRule,
    SwitchDefaultRule,
    TerminatorRule,
    TryHandlerRule,
    VarUsageRule,
)
from polylint.lint.rules import LintRule
from polylint.text import Convention

KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch", "char", "checked",
        "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
        "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for",
        "foreach", "goto", "if", "implicit", "in", "int", "interface", "internal", "is", "lock",
        "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
        "private", "protected", "public", "readonly", "ref", "return", "sbyte", "sealed", "short",
        "sizeof", "stackalloc", "static", "string", "struct", "switch", "this", "throw", "true",
        "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using", "virtual",
        "void", "volatile", "while",
    }
)

_USING_DIRECTIVE = re.compile(r"^\s*using\s+[\w.]+\s*;", re.MULTILINE)

PROFILE = LanguageProfile(
    id="csharp",
    display_name="C#",
    extensions=frozenset({".cs"}),
    keywords=KEYWORDS,
    signals=ContentSignals(
        positive=((_USING_DIRECTIVE, "namespace "), (_USING_DIRECTIVE, "class ")),
        negative=("#include", "import java."),
    ),
)

OPERATORS = OperatorTable(
    binary=(
        "??=", "<<=", ">>=", "==", "!=", "<=", ">=", "&&", "||", "??", "=>",
        "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<", ">>",
        "=", "+", "-", "*", "/", "%", "<", ">",
    ),
)

_PRIMITIVES = "bool|byte|sbyte|char|decimal|double|float|int|uint|long|ulong|short|ushort|string|object"
_MODIFIERS = "public|private|protected|internal|static|virtual|override|sealed|async|extern|new|partial|abstract|unsafe"


def build_rules() -> tuple[LintRule, ...]:
    syntax = PROFILE.syntax
    return (
        OperatorSpacingRule(OPERATORS, syntax=syntax, skip_prefixes=("#",)),
        TerminatorRule(syntax=syntax, directive_prefixes=("using ",)),
        ExtraTerminatorRule(syntax=syntax),
        ControlStructureRule(BraceStyle.OWN_LINE, syntax=syntax, unit=PROFILE.indent_unit),
        IndentationRule(PROFILE.indent_unit, syntax=syntax),
        EmptyLineRule(),
        NamingConventionRule(
            targets=(
                NamingTarget(
                    "Class",
                    r"\b(?:class|struct|interface|enum|record)\s+(?P<name>[A-Za-z_]\w*)",
                    (Convention.PASCAL,),
                    Convention.PASCAL,
                ),
                NamingTarget(
                    "Method",
                    rf"^\s*(?:(?:{_MODIFIERS})\s+)*(?P<type>[A-Za-z_][\w<>,\[\]?]*)\s+(?P<name>[A-Za-z_]\w*)\s*\(",
                    (Convention.PASCAL,),
                    Convention.PASCAL,
                ),
            ),
            keywords=KEYWORDS,
            syntax=syntax,
        ),
        VarUsageRule(syntax=syntax),
        BraceOwnLineRule(syntax=syntax),
        NullComparisonRule(syntax=syntax),
        KeywordCollisionRule(
            language=PROFILE.display_name,
            keywords=KEYWORDS,
            declarations=(
                rf"\b(?:var|{_PRIMITIVES})\s+(?P<name>[A-Za-z_]\w*)\s*(?=[=;,{{)])",
                r"\b(?:class|struct|interface|enum)\s+(?P<name>[A-Za-z_]\w*)",
                rf"\b(?:void|{_PRIMITIVES}|Task(?:<\w+>)?)\s+(?P<name>[A-Za-z_]\w*)\s*\(",
            ),
            parameter_lists=(
                r"^\s*(?:\w+\s+)*(?P<type>[\w<>\[\],?]+)\s+[A-Za-z_]\w*\s*\((?P<params>[^)]*)\)",
            ),
            syntax=syntax,
        ),
        RedundantEqualsRule(syntax=syntax),
        TryHandlerRule(syntax=syntax),
        SwitchDefaultRule(syntax=syntax),
        DuplicateLinesRule(syntax=syntax),
        ResourceLifecycleRule(
            acquire=(
                r"\bnew\s+(?P<resource>FileStream|StreamReader|StreamWriter|BinaryReader|BinaryWriter"
                r"|SqlConnection|SqlCommand|MemoryStream|HttpClient)\s*\(",
            ),
            managed=(r"^\s*using\b", r"\busing\s*\("),
            managed_description="a using statement",
            fix_prefix="using ",
            syntax=syntax,
        ),
    )
