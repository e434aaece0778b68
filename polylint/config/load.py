"""Load `LintOptions` from the `[tool.polylint]` table of a `pyproject.toml`."""

from __future__ import annotations

from pathlib import Path
import tomllib
from typing import Any

from polylint.config.options import LintOptions, OptionsPreset

_KEYS = frozenset({"preset", "parallel", "max-workers", "ignore", "verify-fixes"})


def load_options(path: str | Path) -> LintOptions:
    """Read options from `path`; a file without a `[tool.polylint]` table yields the defaults."""
    with Path(path).open("rb") as handle:
        document = tomllib.load(handle)
    table = document.get("tool", {}).get("polylint", {})
    if not isinstance(table, dict):
        raise ValueError("`[tool.polylint]` must be a table")
    return options_from_mapping(table)


def options_from_mapping(table: dict[str, Any]) -> LintOptions:
    unknown = sorted(set(table) - _KEYS)
    if unknown:
        raise ValueError(f"Unknown polylint option(s): {', '.join(unknown)}")

    base = LintOptions()
    if "preset" in table:
        preset = table["preset"]
        if not isinstance(preset, str) or preset not in {member.value for member in OptionsPreset}:
            raise ValueError(f"Invalid preset `{preset}`; expected one of {'/'.join(OptionsPreset)}")
        base = LintOptions.for_preset(OptionsPreset(preset))

    parallel = _bool(table, "parallel", base.parallel)
    verify_fixes = _bool(table, "verify-fixes", base.verify_fixes)

    max_workers = table.get("max-workers", base.max_workers)
    # bool is an int subclass; `max-workers = true` is still a type error.
    if max_workers is not None and (isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1):
        raise ValueError(f"`max-workers` must be a positive integer, got {max_workers!r}")

    ignore = table.get("ignore", sorted(base.ignore))
    if not isinstance(ignore, list) or not all(isinstance(code, str) for code in ignore):
        raise ValueError("`ignore` must be a list of rule codes")
    bad_codes = [code for code in ignore if not code.startswith("LINT_")]
    if bad_codes:
        raise ValueError(f"`ignore` entries must be lint codes with a `LINT_` prefix: {', '.join(bad_codes)}")

    return LintOptions(
        parallel=parallel,
        max_workers=max_workers,
        ignore=frozenset(ignore),
        verify_fixes=verify_fixes,
    )


def _bool(table: dict[str, Any], key: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"`{key}` must be a boolean, got {value!r}")
    return value
