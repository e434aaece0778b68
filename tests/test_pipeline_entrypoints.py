from collections.abc import Sequence
from dataclasses import dataclass
import logging

import pytest

from polylint.config import LintOptions
from polylint.diagnostics import Diagnostic, collect_diagnostics, count_by_category, sort_by_line
from polylint.lint.checks import EmptyLineRule
from polylint.lint.runner import run_rules
from polylint.pipeline import analyze, run_check, run_format, run_lint
from tests._shared_cases import DETECTION_CASES, PYTHON_MODULE, SourceCase, case_id

_KNOWN_CASES = tuple(case for case in DETECTION_CASES if case.language is not None)


@dataclass(frozen=True, slots=True)
class _BrokenRule:
    code: str = "LINT_TEST_BROKEN"
    name: str = "testBroken"
    category: str = "Testing"
    domain: str = "heuristic"
    confidence: str = "heuristic"

    def run(self, lines: Sequence[str]) -> list[Diagnostic]:
        raise RuntimeError("rule exploded")


def test_run_check_sorts_and_summarizes() -> None:
    result = run_check("x=1\n\ny=2\n", analyzer_id="python")

    assert result.language == "python"
    assert [diagnostic.line for diagnostic in result.diagnostics] == [1, 2, 3]
    assert [diagnostic.code for diagnostic in result.diagnostics] == [
        "LINT_FORMAT_OPERATOR_SPACING",
        "LINT_FORMAT_EMPTY_LINE",
        "LINT_FORMAT_OPERATOR_SPACING",
    ]
    assert result.has_errors is False
    assert result.fixable_count == 3


def test_run_check_flags_errors() -> None:
    result = run_check("int count = 0\n", analyzer_id="csharp")

    assert result.has_errors is True
    assert "LINT_SYNTAX_MISSING_TERMINATOR" in [diagnostic.code for diagnostic in result.diagnostics]


def test_run_check_selects_analyzer_by_file_path() -> None:
    assert run_check("def main():\n    pass\n", file_path="script.js").language == "javascript"


def test_run_lint_returns_empty_result_for_unknown_text() -> None:
    result = run_lint("hello world\n")

    assert result.language is None
    assert result.diagnostics == []


def test_run_lint_honors_ignored_codes() -> None:
    text = "x=1\n\ny=2\n"

    full = run_lint(text, analyzer_id="python")
    filtered = run_lint(text, analyzer_id="python", options=LintOptions(ignore=frozenset({"LINT_FORMAT_EMPTY_LINE"})))

    assert "LINT_FORMAT_EMPTY_LINE" not in [diagnostic.code for diagnostic in filtered.diagnostics]
    assert len(filtered.diagnostics) == len(full.diagnostics) - 1
    assert filtered.rule_count == full.rule_count - 1


@pytest.mark.parametrize("case", _KNOWN_CASES, ids=case_id)
def test_parallel_run_matches_sequential_run(case: SourceCase) -> None:
    assert case.language is not None
    sequential = run_lint(case.source, analyzer_id=case.language)
    parallel = run_lint(case.source, analyzer_id=case.language, options=LintOptions(parallel=True, max_workers=4))

    assert parallel.diagnostics == sequential.diagnostics


def test_failing_rule_is_dropped_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="polylint.lint.runner"):
        diagnostics = run_rules(["", "x"], [_BrokenRule(), EmptyLineRule()])

    assert [diagnostic.code for diagnostic in diagnostics] == ["LINT_FORMAT_EMPTY_LINE"]
    assert "Lint rule testBroken failed" in caplog.text


def test_run_format_merges_fixes_without_verification() -> None:
    result = run_format("if(x==1){\n", analyzer_id="csharp", options=LintOptions(verify_fixes=False))

    assert result.language == "csharp"
    assert result.formatted_text == "if (x == 1)\n{\n"
    assert result.changed is True
    assert len(result.applied) == 2
    assert result.diagnostics == []
    assert result.skipped == []


def test_run_format_relocates_python_imports() -> None:
    result = run_format(PYTHON_MODULE, file_path="module.py", options=LintOptions(verify_fixes=False))

    assert result.formatted_text.splitlines() == [
        '"""Module docstring."""',
        "import os",
        "import sys",
        "value = os.getcwd()",
        "print(value, sys.argv)",
    ]


def test_run_format_without_analyzer() -> None:
    unchanged = run_format("hello world\n")

    assert unchanged.language is None
    assert unchanged.formatted_text == "hello world\n"
    assert unchanged.changed is False

    stray = analyze("python", "x=1\n")
    try:
        run_format("hello world\n", stray)
    except ValueError as exc:
        assert "no analyzer matched" in str(exc)
    else:
        raise AssertionError("Expected diagnostics without an analyzer to fail")


def test_analyzer_id_must_handle_file_path() -> None:
    try:
        run_lint("x = 1\n", analyzer_id="python", file_path="main.js")
    except ValueError as exc:
        assert "does not handle 'main.js'" in str(exc)
    else:
        raise AssertionError("Expected a mismatched analyzer_id and file_path to fail")


def test_analyze_rejects_unknown_analyzer() -> None:
    try:
        analyze("cobol", "x")
    except ValueError as exc:
        assert "Unknown analyzer id" in str(exc)
    else:
        raise AssertionError("Expected an unknown analyzer id to fail")


def test_report_helpers_sort_and_count() -> None:
    diagnostics = analyze("python", "x=1\n\ny=2\n")
    spacing_first, empty, spacing_last = sort_by_line(collect_diagnostics(diagnostics[2:], diagnostics[:2]))

    assert (spacing_first.line, empty.line, spacing_last.line) == (1, 2, 3)
    assert count_by_category(diagnostics) == {"Formatting": 3}
