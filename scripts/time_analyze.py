#!/usr/bin/env python3
"""Quick perf benchmark for analysis throughput."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from polylint.analysis import default_registry
from polylint.config import LintOptions, OptionsPreset


def _collect_source_files(root: Path) -> list[Path]:
    registry = default_registry()
    files = sorted(path for path in root.rglob("*") if path.is_file())
    return [
        path
        for path in files
        if any(analyzer.profile.handles_extension(path.suffix) for analyzer in registry)
    ]


def _run_once(
    sources: list[tuple[Path, str]],
    *,
    label: str,
    options: LintOptions,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    registry = default_registry()
    start = time.perf_counter()
    total_lines = 0
    total_diagnostics = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for path, text in iterator:
        analyzer = registry.select(text, str(path))
        if analyzer is None:
            continue
        total_lines += text.count("\n") + 1
        total_diagnostics += len(analyzer.analyze(text, options))
    duration = time.perf_counter() - start
    return duration, len(sources), total_lines, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark analysis throughput")
    parser.add_argument("root", type=Path, help="Directory of source files to analyze")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--preset",
        choices=[preset.value for preset in OptionsPreset],
        default=OptionsPreset.DEFAULT.value,
        help="Options preset (default: default; 'fast' runs rules in parallel)",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide per-run progress bars")
    parser.add_argument("--profile", action="store_true", help="Print cProfile hotspots for the measured runs")
    parser.add_argument("--profile-top", type=int, default=30, help="cProfile rows to print")
    parser.add_argument("--profile-sort", default="tottime", help="cProfile sort key, e.g. tottime or cumulative")
    parser.add_argument("--limit-files", type=int, default=0, help="Analyze at most N files (0 = no limit)")
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_source_files(root)
    if not files:
        raise SystemExit(f"No supported source files found under {root}")
    if args.limit_files > 0:
        files = files[: args.limit_files]

    sources = [(path, path.read_text(encoding="utf-8", errors="replace")) for path in files]
    options = LintOptions.for_preset(OptionsPreset(args.preset))
    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    for index in range(warmups):
        _run_once(sources, label=f"warmup {index + 1}/{warmups}", options=options, show_progress=show_progress)

    profiler = cProfile.Profile() if args.profile else None
    if profiler is not None:
        profiler.enable()
    timings: list[float] = []
    files_count = lines_count = diagnostics_count = 0
    for index in range(runs):
        duration, files_count, lines_count, diagnostics_count = _run_once(
            sources,
            label=f"run {index + 1}/{runs}",
            options=options,
            show_progress=show_progress,
        )
        timings.append(duration)
    if profiler is not None:
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())

    mean = statistics.mean(timings)
    print(f"Dataset: {root} ({files_count} files, {lines_count} lines, {diagnostics_count} diagnostics)")
    print(f"Runs: {runs} (warmups={warmups}, preset={args.preset})")
    print(f"Best / median / worst: {min(timings):.4f}s / {statistics.median(timings):.4f}s / {max(timings):.4f}s")
    print(f"Lines/s (mean): {lines_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
