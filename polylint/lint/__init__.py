"""Lint rule contract, check families and the lint runner."""

from polylint.lint.rules import LintConfidence, LintDomain, LintRule, validate_lint_rules
from polylint.lint.runner import active_rules, run_lint, run_rules

__all__ = [
    "LintConfidence",
    "LintDomain",
    "LintRule",
    "active_rules",
    "run_lint",
    "run_rules",
    "validate_lint_rules",
]
