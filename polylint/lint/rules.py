"""Lint rule contract and rule-set validation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, Protocol, TypeAlias

from polylint.diagnostics import Diagnostic

LintDomain: TypeAlias = Literal["style", "correctness", "heuristic"]
LintConfidence: TypeAlias = Literal["policy", "heuristic"]


class LintRule(Protocol):
    """Line-oriented lint rule contract.

    A rule is a pure function over the full line array. It must not keep state
    between calls and must not assume any other rule ran before it.
    """

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def category(self) -> str: ...

    @property
    def domain(self) -> LintDomain: ...

    @property
    def confidence(self) -> LintConfidence: ...

    def run(self, lines: Sequence[str]) -> list[Diagnostic]: ...


def validate_lint_rules(rules: Sequence[LintRule]) -> None:
    allowed_domains = {"style", "correctness", "heuristic"}
    allowed_confidence = {"policy", "heuristic"}
    seen_names: set[str] = set()
    for rule in rules:
        if rule.domain not in allowed_domains:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid domain `{rule.domain}`; expected style/correctness/heuristic."
            )
        if rule.confidence not in allowed_confidence:
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid confidence `{rule.confidence}`; expected policy/heuristic."
            )
        if not rule.code.startswith("LINT_"):
            raise ValueError(
                f"Lint rule `{rule.name}` has invalid code `{rule.code}`; expected `LINT_` prefix."
            )
        if rule.name in seen_names:
            raise ValueError(f"Lint rule `{rule.name}` is registered twice in the same rule set.")
        seen_names.add(rule.name)
