#!/usr/bin/env python3
"""Lint source files and optionally write the fixed text back."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from polylint.config import LintOptions, load_options
from polylint.diagnostics import Diagnostic, count_by_category, has_errors
from polylint.pipeline import run_check, run_format


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    line = f"{path}:{diagnostic.line}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.suggestion:
        line += f" ({diagnostic.suggestion})"
    return line


def _lint_path(path: Path, *, language: str | None, options: LintOptions, fix: bool) -> list[Diagnostic] | None:
    text = path.read_text(encoding="utf-8")
    if fix:
        formatted = run_format(text, analyzer_id=language, file_path=str(path), options=options)
        if formatted.changed:
            path.write_text(formatted.formatted_text, encoding="utf-8")
            print(f"{path}: applied {len(formatted.applied)} fix(es), skipped {len(formatted.skipped)}")
        text = formatted.formatted_text

    result = run_check(text, analyzer_id=language, file_path=str(path), options=options)
    if result.language is None:
        print(f"{path}: language not detected, skipped")
        return None
    for diagnostic in result.diagnostics:
        print(format_diagnostic(path, diagnostic))
    return result.diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Lint C#, C++, Java, Python, JavaScript and HTML files")
    parser.add_argument("paths", type=Path, nargs="+", help="Files to lint")
    parser.add_argument("--language", default=None, help="Analyzer id or display name (default: detect)")
    parser.add_argument("--config", type=Path, default=None, help="pyproject.toml with a [tool.polylint] table")
    parser.add_argument("--fix", action="store_true", help="Write fixes back to the files")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar shown for several files",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    options = load_options(args.config) if args.config is not None else LintOptions()
    paths: list[Path] = args.paths
    missing = [path for path in paths if not path.is_file()]
    if missing:
        raise SystemExit(f"Not a file: {missing[0]}")

    show_progress = len(paths) > 1 and not args.no_progress
    iterator = tqdm(paths, desc="lint", unit="file") if show_progress else paths
    found: list[Diagnostic] = []
    for path in iterator:
        diagnostics = _lint_path(path, language=args.language, options=options, fix=args.fix)
        if diagnostics is not None:
            found.extend(diagnostics)

    print(f"{len(found)} diagnostic(s) in {len(paths)} file(s)")
    if args.verbose:
        for category, count in sorted(count_by_category(found).items()):
            print(f"  {category}: {count}")
    return 1 if has_errors(found) else 0


if __name__ == "__main__":
    raise SystemExit(main())
