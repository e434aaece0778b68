from polylint.diagnostics import Diagnostic
from polylint.languages import cpp, csharp, javascript, python
from polylint.lint.checks import (
    BraceSameLineRule,
    ControlStructureRule,
    DuplicateLinesRule,
    EmptyLineRule,
    ExtraTerminatorRule,
    IndentationConsistencyRule,
    IndentationRule,
    NullComparisonRule,
    OperatorSpacingRule,
    StrictEqualityRule,
    StrictModeRule,
    SwitchDefaultRule,
    TerminatorRule,
    TryHandlerRule,
    VarDeclarationRule,
    VarUsageRule,
)


def _codes(diagnostics: list[Diagnostic]) -> list[str]:
    return [diagnostic.code for diagnostic in diagnostics]


def _rule_named(rules: tuple, name: str):
    return next(rule for rule in rules if rule.name == name)


def test_operator_spacing_ignores_operators_inside_string_literals() -> None:
    rule = OperatorSpacingRule(csharp.OPERATORS, syntax=csharp.PROFILE.syntax)

    assert rule.run(['var s = "a+b==c";']) == []


def test_operator_spacing_rebuilds_whole_line() -> None:
    rule = OperatorSpacingRule(csharp.OPERATORS, syntax=csharp.PROFILE.syntax)

    diagnostics = rule.run(["x=a+b;"])

    assert len(diagnostics) == 1
    assert diagnostics[0].replacement == "x = a + b;"
    assert diagnostics[0].message == "Missing spaces around operator '='"


def test_operator_spacing_adds_space_after_control_keyword() -> None:
    rule = OperatorSpacingRule(csharp.OPERATORS, syntax=csharp.PROFILE.syntax)

    diagnostics = rule.run(["if(x==1){"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["if (x == 1){"]


def test_operator_spacing_leaves_unary_minus_alone() -> None:
    rule = OperatorSpacingRule(csharp.OPERATORS, syntax=csharp.PROFILE.syntax)

    assert rule.run(["return -1;", "x = -y;"]) == []


def test_empty_line_rule_flags_blank_lines_for_deletion() -> None:
    diagnostics = EmptyLineRule().run(["a", "", "   ", "b"])

    assert [diagnostic.line for diagnostic in diagnostics] == [2, 3]
    assert all(diagnostic.is_deletion for diagnostic in diagnostics)


def test_indentation_rule_rounds_down_to_unit() -> None:
    diagnostics = IndentationRule(4).run(["   x = 1;", "    y = 2;"])

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 1
    assert diagnostics[0].replacement == "x = 1;"


def test_indentation_consistency_follows_braces() -> None:
    diagnostics = IndentationConsistencyRule(4).run(["int main() {", "  return 0;", "}"])

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 2
    assert diagnostics[0].replacement == "    return 0;"


def test_brace_same_line_emits_linked_pair() -> None:
    diagnostics = BraceSameLineRule().run(["function run()", "{", "}"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [
        (1, "function run() {"),
        (2, ""),
    ]


def test_terminator_rule_appends_semicolon() -> None:
    diagnostics = TerminatorRule().run(["int total = 5", "if (total > 1)", "{", "}"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [(1, "int total = 5;")]


def test_terminator_rule_keeps_trailing_comment() -> None:
    diagnostics = TerminatorRule().run(["count++ // bump"])

    assert diagnostics[0].replacement == "count++; // bump"


def test_extra_terminator_after_control_header() -> None:
    diagnostics = ExtraTerminatorRule().run(["if (x > 0);", "while (running);"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["if (x > 0)", "while (running)"]


def test_extra_terminator_allows_do_while() -> None:
    assert ExtraTerminatorRule().run(["do", "{", "}", "while (running);"]) == []


def test_control_structure_adds_missing_parentheses() -> None:
    diagnostics = ControlStructureRule().run(["if x > 0", "{", "}"])

    assert len(diagnostics) == 1
    assert diagnostics[0].replacement == "if (x > 0)"


def test_control_structure_adds_body_skeleton() -> None:
    diagnostics = ControlStructureRule().run(["while (ready)"])

    assert diagnostics[0].replacement == "while (ready)\n{\n    // code\n}"


def test_control_structure_with_unbraced_nested_body_is_suggestion_only() -> None:
    diagnostics = ControlStructureRule().run(["if (ready)", "    go();", "done();"])

    assert _codes(diagnostics) == ["LINT_SYNTAX_CONTROL_STRUCTURE"]
    assert diagnostics[0].replacement is None
    assert diagnostics[0].suggestion == (
        "Wrap the statement on line 2 in braces; a body on another line is not fixed automatically"
    )


def test_try_without_handler_has_no_fix() -> None:
    diagnostics = TryHandlerRule().run(["try", "{", "    Run();", "}"])

    assert _codes(diagnostics) == ["LINT_SYNTAX_TRY_HANDLER"]
    assert diagnostics[0].replacement is None


def test_try_with_catch_is_accepted() -> None:
    assert TryHandlerRule().run(["try", "{", "    Run();", "}", "catch (Exception e)", "{", "}"]) == []


def test_switch_without_default() -> None:
    lines = ["switch (x)", "{", "    case 1:", "        break;", "}"]

    diagnostics = SwitchDefaultRule().run(lines)

    assert [diagnostic.line for diagnostic in diagnostics] == [1]
    assert diagnostics[0].replacement is None


def test_switch_with_default() -> None:
    lines = ["switch (x)", "{", "    case 1:", "        break;", "    default:", "        break;", "}"]

    assert SwitchDefaultRule().run(lines) == []


def test_null_comparison_uses_pattern_matching() -> None:
    diagnostics = NullComparisonRule().run(["if (value == null)", 'log("x == null");'])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["if (value is null)"]


def test_var_usage_keeps_indent() -> None:
    diagnostics = VarUsageRule().run(["    int count = 0;", "    int other;"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["    var count = 0;"]


def test_strict_equality_reports_each_operator_separately() -> None:
    diagnostics = StrictEqualityRule().run(["if (a != b && c == d) {"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == [
        "if (a != b && c === d) {",
        "if (a !== b && c == d) {",
    ]


def test_var_declaration_skips_string_contents() -> None:
    diagnostics = VarDeclarationRule().run(['var name = "var";'])

    assert diagnostics[0].replacement == 'let name = "var";'


def test_strict_mode_inserted_above_first_statement() -> None:
    diagnostics = StrictModeRule().run(["// header", "function main() {", "}"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [
        (2, "'use strict';\nfunction main() {")
    ]


def test_strict_mode_not_required_for_modules() -> None:
    assert StrictModeRule().run(["import x from 'y';", "x();"]) == []


def test_duplicate_lines_reported_once_without_fix() -> None:
    diagnostics = DuplicateLinesRule().run(["x = 1", "x = 1", "x = 1"])

    assert len(diagnostics) == 1
    assert diagnostics[0].line == 1
    assert diagnostics[0].replacement is None


def test_duplicate_lines_include_punctuation_runs() -> None:
    diagnostics = DuplicateLinesRule().run(["foo(", "    );", "    );", "    );", "}", "}", "}"])

    assert [diagnostic.line for diagnostic in diagnostics] == [2, 5]


def test_csharp_keyword_collision_rename_is_substring_safe() -> None:
    rule = _rule_named(csharp.build_rules(), "namingKeywordCollision")

    diagnostics = rule.run(["int class = classCount;"])

    assert len(diagnostics) == 1
    assert diagnostics[0].replacement == "int class_ = classCount;"


def test_python_keyword_collision() -> None:
    rule = _rule_named(python.build_rules(), "namingKeywordCollision")

    diagnostics = rule.run(["class = 5", "classes = 6"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [(1, "class_ = 5")]


def test_naming_convention_fixes_declaring_line() -> None:
    csharp_naming = _rule_named(csharp.build_rules(), "namingConvention")
    python_naming = _rule_named(python.build_rules(), "namingConvention")

    assert [d.replacement for d in csharp_naming.run(["class my_widget"])] == ["class MyWidget"]
    assert [d.replacement for d in python_naming.run(["def getValue():"])] == ["def get_value():"]
    assert [d.replacement for d in python_naming.run(["myValue = 3"])] == ["my_value = 3"]
    assert python_naming.run(["def __init__(self):", "MAX_SIZE = 3"]) == []


def test_resource_lifecycle_csharp_fix_adds_using() -> None:
    rule = _rule_named(csharp.build_rules(), "resourceLifecycle")

    diagnostics = rule.run(["    var reader = new StreamReader(path);", "    Console.WriteLine(reader.ReadLine());"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["    using var reader = new StreamReader(path);"]


def test_resource_lifecycle_accepts_release_and_managed_scope() -> None:
    rule = _rule_named(python.build_rules(), "resourceLifecycle")

    assert rule.run(["with open('x') as handle:", "    handle.read()"]) == []
    assert rule.run(["handle = open('x')", "handle.close()"]) == []
    unmanaged = rule.run(["handle = open('x')", "data = handle.read()"])
    assert [diagnostic.line for diagnostic in unmanaged] == [1]
    assert unmanaged[0].replacement is None


def test_cpp_stream_without_scope() -> None:
    rule = _rule_named(cpp.build_rules(), "resourceLifecycle")

    diagnostics = rule.run(["std::ifstream input(path);", "input >> value;"])

    assert _codes(diagnostics) == ["LINT_RESOURCE_LIFECYCLE"]


def test_javascript_rule_names_are_unique() -> None:
    names = [rule.name for rule in javascript.build_rules()]

    assert len(names) == len(set(names))
