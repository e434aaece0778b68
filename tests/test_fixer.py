import logging

import pytest

from polylint.config import LintOptions
from polylint.diagnostics import LINT_PYTHON_IMPORT_PLACEMENT, Diagnostic
from polylint.format import apply_fixes, compose_replacements, relocation_order, remap_lines
from polylint.languages import python
from polylint.pipeline import analyze, run_format
from polylint.pipeline import apply_fixes as apply_pipeline_fixes


def _diagnostic(
    line: int,
    replacement: str | None,
    *,
    category: str = "Formatting",
    code: str = "LINT_FORMAT_OPERATOR_SPACING",
) -> Diagnostic:
    return Diagnostic(
        code=code,
        message="test finding",
        line=line,
        category=category,
        suggestion="",
        replacement=replacement,
    )


def _relocation(line: int, text: str) -> Diagnostic:
    return _diagnostic(line, text, category="Style", code=LINT_PYTHON_IMPORT_PLACEMENT.code)


def _numbered(count: int) -> list[str]:
    return [f"line{number}" for number in range(1, count + 1)]


def test_fixes_from_two_rules_on_one_line_are_merged() -> None:
    text = "if(x==1){\n"

    diagnostics = analyze("csharp", text)
    fixed = apply_pipeline_fixes("csharp", text, diagnostics)

    assert len(diagnostics) == 2
    assert fixed == "if (x == 1)\n{\n"


def test_compose_replacements_merges_disjoint_edits() -> None:
    merged, rejected = compose_replacements("if (a==b) {", ["if (a===b) {", "if (a == b) {"])

    assert merged == "if (a === b) {"
    assert rejected == []


def test_compose_replacements_absorbs_spacing_around_padded_rewrite() -> None:
    merged, rejected = compose_replacements("y = a!=None", ["y = a != None", "y = a is not None"])

    assert merged == "y = a is not None"
    assert rejected == []


@pytest.mark.parametrize(
    ("language", "text", "expected"),
    [
        ("python", "if x==None:\n    print(x)\n", "if x is None:"),
        ("python", "if x!=None:\n    print(x)\n", "if x is not None:"),
        ("csharp", "if (x==null)\n{\n    return;\n}\n", "if (x is null)"),
        ("csharp", "if (x!=null)\n{\n    return;\n}\n", "if (x is not null)"),
    ],
    ids=["python-eq", "python-ne", "csharp-eq", "csharp-ne"],
)
def test_spacing_and_comparison_fixes_compose_on_one_line(language: str, text: str, expected: str) -> None:
    result = run_format(text, analyzer_id=language, options=LintOptions(verify_fixes=False))

    assert result.formatted_text.splitlines()[0] == expected
    assert len(result.applied) == 2
    assert result.skipped == []


def test_compose_replacements_rejects_overlapping_edit() -> None:
    assert compose_replacements("x = 1", ["x = 2", "x = 3"]) == ("x = 2", [1])


def test_compose_replacements_dedupes_identical_edits() -> None:
    assert compose_replacements("a=b", ["a = b", "a = b"]) == ("a = b", [])


def test_overlapping_fix_is_skipped_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    first = _diagnostic(1, "x = 2")
    second = _diagnostic(1, "x = 3")

    with caplog.at_level(logging.WARNING, logger="polylint.format.fixer"):
        result = apply_fixes("x = 1\n", [first, second])

    assert result.text == "x = 2\n"
    assert result.applied == [first]
    assert [(skipped.diagnostic, skipped.reason) for skipped in result.skipped] == [
        (second, "overlaps an earlier fix on the same line")
    ]
    assert "overlaps an earlier fix" in caplog.text


def test_deletion_and_merged_line_fixes_use_original_line_numbers() -> None:
    lines = _numbered(12)
    lines[4] = "    total=count+1"
    lines[9] = "    unused();"
    diagnostics = [
        _diagnostic(10, ""),
        _diagnostic(5, "    total = count + 1"),
        _diagnostic(5, "    total=count+1;", category="Syntax", code="LINT_SYNTAX_MISSING_TERMINATOR"),
    ]

    result = apply_fixes("\n".join(lines) + "\n", diagnostics)

    fixed = result.text.splitlines()
    assert len(fixed) == 11
    assert fixed[4] == "    total = count + 1;"
    assert "    unused();" not in fixed
    assert fixed[9] == "line11"
    assert len(result.applied) == 3
    assert result.skipped == []


def test_deletions_are_applied_bottom_up() -> None:
    lines = _numbered(12)
    diagnostics = [_diagnostic(3, ""), _diagnostic(7, ""), _diagnostic(11, "")]

    result = apply_fixes("\n".join(lines), diagnostics)

    assert result.text.split("\n") == [line for line in lines if line not in ("line3", "line7", "line11")]
    assert result.changed_lines == 3


def test_multi_line_insert_does_not_shift_later_fixes() -> None:
    diagnostics = [_diagnostic(1, "if (a)\n{"), _diagnostic(3, "c = 1;", category="Syntax")]

    result = apply_fixes("if (a)\nb;\nc=1;\n", diagnostics)

    assert result.text == "if (a)\n{\nb;\nc = 1;\n"


def test_single_replacement_indentation_rules() -> None:
    diagnostics = [
        _diagnostic(1, "   x = 1;", category="Indentation", code="LINT_FORMAT_INDENTATION"),
        _diagnostic(2, "y = 2;", category="Syntax", code="LINT_SYNTAX_MISSING_TERMINATOR"),
    ]

    result = apply_fixes("      x = 1;\n    y=2;\n", diagnostics)

    assert result.text == "    x = 1;\n    y = 2;\n"


def test_deletion_supersedes_other_fixes_on_its_line() -> None:
    deletion = _diagnostic(1, "")
    rewrite = _diagnostic(1, "a = 1")

    result = apply_fixes("a=1\nb\n", [rewrite, deletion])

    assert result.text == "b\n"
    assert result.applied == [deletion]
    assert [(skipped.diagnostic, skipped.reason) for skipped in result.skipped] == [
        (rewrite, "superseded by a deletion on the same line")
    ]


def test_out_of_range_fix_is_skipped() -> None:
    stray = _diagnostic(99, "x")

    result = apply_fixes("a\nb\n", [stray])

    assert result.text == "a\nb\n"
    assert result.applied == []
    assert len(result.skipped) == 1
    assert result.skipped[0].diagnostic == stray
    assert "out of range" in result.skipped[0].reason


def test_unfixable_diagnostics_are_ignored() -> None:
    result = apply_fixes("a\n", [_diagnostic(1, None)])

    assert result.text == "a\n"
    assert result.applied == []
    assert result.skipped == []


def test_relocation_hoists_imports_and_remaps_other_fixes() -> None:
    lines = ['"""Module docstring."""', "import os", "", "value=os.getcwd()", "import sys", "print(value, sys.argv)"]
    diagnostics = [_relocation(5, "import sys"), _diagnostic(4, "value = os.getcwd()")]

    result = apply_fixes(
        "\n".join(lines) + "\n",
        diagnostics,
        relocatable=python.PROFILE.relocatable_line,
        syntax=python.PROFILE.syntax,
    )

    assert result.text.splitlines() == [
        '"""Module docstring."""',
        "import os",
        "import sys",
        "",
        "value = os.getcwd()",
        "print(value, sys.argv)",
    ]
    assert len(result.applied) == 2


def test_relocation_moves_parenthesized_import_as_a_unit() -> None:
    lines = ["x = 1", "from a import (", "    b,", "    c,", ")", "y = 2"]

    order = relocation_order(lines, python.PROFILE.relocatable_line, python.PROFILE.syntax)

    assert order == [1, 2, 3, 4, 0, 5]


def test_remap_lines_follows_permutation() -> None:
    diagnostics = [_diagnostic(1, "x"), _diagnostic(3, "y")]

    remapped = remap_lines(diagnostics, [2, 0, 1])

    assert [diagnostic.line for diagnostic in remapped] == [2, 1]


def test_relocation_without_pattern_is_skipped() -> None:
    relocation = _relocation(2, "import os")

    result = apply_fixes("x = 1\nimport os\n", [relocation])

    assert result.text == "x = 1\nimport os\n"
    assert [(skipped.diagnostic, skipped.reason) for skipped in result.skipped] == [
        (relocation, "no relocation pattern given")
    ]
