"""Lint runner over a language analyzer's ordered rule set."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
import logging
from typing import TYPE_CHECKING

from polylint.config import LintOptions
from polylint.diagnostics import Diagnostic, collect_diagnostics
from polylint.lint.rules import LintRule
from polylint.pipeline.results import LintRunResult
from polylint.text import SourceLines

if TYPE_CHECKING:
    from polylint.analysis import Analyzer

logger = logging.getLogger(__name__)


def run_lint(
    text: str,
    analyzer: Analyzer,
    options: LintOptions | None = None,
) -> LintRunResult:
    """Run every active rule of `analyzer` over one split of `text`."""
    resolved_options = options if options is not None else LintOptions()
    source = SourceLines.from_text(text)
    rules = active_rules(analyzer.rules, resolved_options)
    diagnostics = run_rules(
        source.lines,
        rules,
        parallel=resolved_options.parallel,
        max_workers=resolved_options.max_workers,
    )
    return LintRunResult(
        language=analyzer.id,
        diagnostics=diagnostics,
        rule_count=len(rules),
    )


def active_rules(rules: Sequence[LintRule], options: LintOptions) -> tuple[LintRule, ...]:
    return tuple(rule for rule in rules if rule.code not in options.ignore)


def run_rules(
    lines: Sequence[str],
    rules: Sequence[LintRule],
    *,
    parallel: bool = False,
    max_workers: int | None = None,
) -> list[Diagnostic]:
    """Run `rules` and concatenate their findings in registration order.

    With `parallel`, rules run on a thread pool; `Executor.map` yields results
    in submission order, so the merge order does not depend on completion order.
    """
    if parallel and len(rules) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            groups = list(executor.map(lambda rule: _run_guarded(rule, lines), rules))
    else:
        groups = [_run_guarded(rule, lines) for rule in rules]
    return collect_diagnostics(*groups)


def _run_guarded(rule: LintRule, lines: Sequence[str]) -> list[Diagnostic]:
    try:
        return rule.run(lines)
    except Exception:
        logger.exception("Lint rule %s failed; its diagnostics are dropped", rule.name)
        return []
