from dataclasses import replace

import pytest

from polylint.analysis import SUPPORTED_LANGUAGES, Analyzer, AnalyzerRegistry, build_analyzers, default_registry
from polylint.languages import csharp, python
from polylint.lint.checks import EmptyLineRule
from polylint.pipeline import detect, supported_languages
from tests._shared_cases import DETECTION_CASES, EXTENSION_CASES, SourceCase, case_id


@pytest.mark.parametrize("case", DETECTION_CASES, ids=case_id)
def test_detect_by_content(case: SourceCase) -> None:
    assert detect(case.source) == case.language


@pytest.mark.parametrize("case", EXTENSION_CASES, ids=case_id)
def test_detect_prefers_extension(case: SourceCase) -> None:
    assert detect(case.source, case.file_path) == case.language


@pytest.mark.parametrize("case", DETECTION_CASES, ids=case_id)
def test_detection_is_deterministic(case: SourceCase) -> None:
    first = detect(case.source)

    assert all(detect(case.source) == first for _ in range(3))


def test_registry_is_cached_and_ordered() -> None:
    registry = default_registry()

    assert default_registry() is registry
    assert [analyzer.id for analyzer in registry] == ["csharp", "html", "python", "java", "cpp", "javascript"]
    assert len(registry) == 6


@pytest.mark.parametrize("name", ["python", "PYTHON", "Python", "c#", "C++", "javascript"])
def test_registry_get_by_id_or_display_name(name: str) -> None:
    analyzer = default_registry().get(name)

    assert name.casefold() in (analyzer.id.casefold(), analyzer.display_name.casefold())


def test_registry_get_rejects_unknown_id() -> None:
    try:
        default_registry().get("cobol")
    except ValueError as exc:
        assert "Unknown analyzer id: 'cobol'" in str(exc)
    else:
        raise AssertionError("Expected unknown analyzer id to fail")


def test_registry_rejects_duplicate_ids() -> None:
    analyzers = build_analyzers()

    try:
        AnalyzerRegistry((*analyzers, analyzers[0]))
    except ValueError as exc:
        assert str(exc) == "Duplicate analyzer id: csharp"
    else:
        raise AssertionError("Expected duplicate analyzer ids to fail")


def test_registry_validates_rule_codes() -> None:
    broken = Analyzer(python.PROFILE, (replace(EmptyLineRule(), code="BAD_CODE"),))

    try:
        AnalyzerRegistry([broken])
    except ValueError as exc:
        assert "expected `LINT_` prefix" in str(exc)
    else:
        raise AssertionError("Expected a rule without a LINT_ code to fail")


def test_registry_validates_rule_names_are_unique() -> None:
    rules = csharp.build_rules()
    broken = Analyzer(csharp.PROFILE, (*rules, rules[0]))

    try:
        AnalyzerRegistry([broken])
    except ValueError as exc:
        assert "registered twice" in str(exc)
    else:
        raise AssertionError("Expected a duplicated rule to fail")


def test_analyzer_can_handle_uses_extension_before_content() -> None:
    analyzer = default_registry().get("python")

    assert analyzer.can_handle("def main():\n    pass\n")
    assert analyzer.can_handle("", ".py")
    assert not analyzer.can_handle("def main():\n    pass\n", ".js")


def test_supported_languages_lists_display_names_in_order() -> None:
    assert supported_languages() == list(SUPPORTED_LANGUAGES)
