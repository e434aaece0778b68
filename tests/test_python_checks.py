from polylint.lint.checks import (
    EmptyIfRule,
    ExpectedIndentedBlockRule,
    ImportPlacementRule,
    MissingColonRule,
    MissingConditionRule,
    MultipleImportsRule,
    NoneComparisonRule,
)
from tests._shared_cases import PYTHON_MODULE


def test_missing_colon_keeps_trailing_comment() -> None:
    diagnostics = MissingColonRule().run(["if x > 1", "def run()  # go", "else:"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [
        (1, "if x > 1:"),
        (2, "def run():  # go"),
    ]
    assert diagnostics[0].message == "Missing colon after 'if' statement"


def test_missing_colon_skips_bare_condition_keyword() -> None:
    assert MissingColonRule().run(["while"]) == []


def test_missing_colon_skips_continued_headers() -> None:
    lines = ["if (ready and", "        waiting):", "    go()"]

    assert MissingColonRule().run(lines) == []


def test_missing_condition_inserts_placeholder() -> None:
    diagnostics = MissingConditionRule().run(["if:", "    pass", "while", "    pass"])

    assert [diagnostic.replacement for diagnostic in diagnostics] == ["if condition:", "while condition:"]
    assert diagnostics[0].message == "'if' statement is missing a condition"


def test_missing_condition_reports_for_without_in() -> None:
    diagnostics = MissingConditionRule().run(["for item:", "    pass"])

    assert len(diagnostics) == 1
    assert diagnostics[0].message == "Invalid for loop syntax: expected 'for item in iterable:'"
    assert diagnostics[0].replacement is None


def test_expected_indented_block_indents_body() -> None:
    diagnostics = ExpectedIndentedBlockRule().run(["def run():", "return 1"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [(2, "    return 1")]


def test_expected_indented_block_adds_pass_at_end_of_file() -> None:
    diagnostics = ExpectedIndentedBlockRule().run(["class Empty:", "# nothing yet"])

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [
        (1, "class Empty:\n    pass")
    ]


def test_empty_if_reports_pass_only_body() -> None:
    lines = ["if ready:", "    pass", "if done:", "    # later", "    ...", "if busy:", "    wait()"]

    diagnostics = EmptyIfRule().run(lines)

    assert [diagnostic.line for diagnostic in diagnostics] == [1, 3]


def test_none_comparison_uses_identity() -> None:
    diagnostics = NoneComparisonRule().run(["if value != None:", "label = 'x == None'"])

    assert len(diagnostics) == 1
    assert diagnostics[0].replacement == "if value is not None:"
    assert diagnostics[0].message == "Comparison to None should use 'is not None'"


def test_import_placement_reports_late_imports_as_relocations() -> None:
    lines = PYTHON_MODULE.splitlines()

    diagnostics = ImportPlacementRule().run(lines)

    assert [(diagnostic.line, diagnostic.replacement) for diagnostic in diagnostics] == [(5, "import sys")]


def test_import_placement_ignores_nested_imports() -> None:
    lines = ["import os", "", "def load():", "    import json", "    return json"]

    assert ImportPlacementRule().run(lines) == []


def test_multiple_imports_split_onto_separate_lines() -> None:
    diagnostics = MultipleImportsRule().run(["import os, sys  # both", "from a import b, c"])

    assert len(diagnostics) == 1
    assert diagnostics[0].replacement == "import os  # both\nimport sys"
