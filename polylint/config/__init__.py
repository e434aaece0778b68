"""Run configuration: options, presets and `pyproject.toml` loading."""

from polylint.config.load import load_options, options_from_mapping
from polylint.config.options import LintOptions, OptionsPreset

__all__ = [
    "LintOptions",
    "OptionsPreset",
    "load_options",
    "options_from_mapping",
]
