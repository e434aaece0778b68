"""Lint run presets and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class OptionsPreset(StrEnum):
    """Named option bundles for common runs."""

    DEFAULT = "default"
    FAST = "fast"


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Flags controlling how rules are run and how fixes are checked."""

    parallel: bool = False
    max_workers: int | None = None
    ignore: frozenset[str] = frozenset()
    verify_fixes: bool = True

    @staticmethod
    def for_preset(preset: OptionsPreset) -> "LintOptions":
        if preset == OptionsPreset.FAST:
            return LintOptions(parallel=True, verify_fixes=False)

        return LintOptions()
