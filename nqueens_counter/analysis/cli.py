"""Command-line interface for the N-Queens counting sweep.

This module wires together configuration loading, the sequential sweep,
CSV export and chart generation. It isolates I/O, argument parsing and
progress reporting from the core search so that the rest of the codebase
remains easy to test programmatically.
"""
from __future__ import annotations

import argparse
import tempfile
from pathlib import Path
from time import perf_counter
from typing import Dict, List, Optional

from . import settings
from .experiments import run_sweep
from .reporting import save_raw_times_to_csv, save_sweep_to_csv
from .stats import SweepResults, estimate_growth_rate
from config_manager import ConfigManager
from nqueens_counter.exceptions import BoardError


# ------------- Utils --------------------------------------------------------

def parse_size_filters(size_args: Optional[List[str]]) -> Optional[List[int]]:
    """Normalize ``--sizes`` inputs into a sorted list of unique board sizes.

    Accepts repeated flags (``-n 4 -n 8``), comma-separated lists
    (``-n 4,5,6``) and inclusive ranges (``-n 4-10``). Returns ``None`` when
    no filter is provided so that callers fall back to the configured sizes.
    """
    if not size_args:
        return None
    selected: List[int] = []
    for entry in size_args:
        for token in entry.split(","):
            token = token.strip()
            if not token:
                continue
            try:
                if "-" in token[1:]:
                    low, high = (int(part) for part in token.split("-", 1))
                    if low > high:
                        raise ValueError(token)
                    selected.extend(range(low, high + 1))
                else:
                    selected.append(int(token))
            except ValueError as exc:
                raise ValueError(f"Invalid board size '{token}'.") from exc
    return sorted(set(selected)) or None


def apply_configuration(config_path: str) -> ConfigManager:
    """Load configuration and copy its values into ``settings`` in place."""
    config_mgr = ConfigManager(config_path)

    experiment_settings = config_mgr.get_experiment_settings()
    if experiment_settings:
        settings.N_VALUES = [int(n) for n in experiment_settings.get("N_values", settings.N_VALUES)]
        settings.RUNS_PER_SIZE = int(experiment_settings.get("runs_per_size", settings.RUNS_PER_SIZE))
        settings.OUT_DIR = experiment_settings.get("output_dir", settings.OUT_DIR)
        settings.RUN_TAG = experiment_settings.get("run_tag", settings.RUN_TAG)
        settings.DATE_IN_FILENAMES = bool(
            experiment_settings.get("date_in_filenames", settings.DATE_IN_FILENAMES)
        )

    reference = config_mgr.get_reference_counts()
    if reference:
        settings.REFERENCE_SOLUTIONS = reference

    return config_mgr


def _print_summary(results: SweepResults, n_values: List[int]) -> None:
    print("\n" + "=" * 60)
    print(f"{'N':>4} {'placements':>14} {'solutions':>12} {'mean time [s]':>15}")
    print("-" * 60)
    for n in n_values:
        entry = results[n]
        print(f"{n:>4} {entry['placements']:>14} {entry['solutions']:>12} {entry['time']['mean']:>15.6f}")
    growth = estimate_growth_rate(n_values, [results[n]["placements"] for n in n_values])
    if growth is not None:
        print(f"Placement growth factor per extra queen: {growth:.3f}")
    print("=" * 60)


# ------------- Pipeline -----------------------------------------------------

def run_pipeline(
    n_values: List[int],
    runs: int,
    out_dir: str,
    validate: bool = False,
    plots: bool = True,
    reference: Optional[Dict[int, int]] = None,
) -> SweepResults:
    """Sweep ``n_values``, export CSVs and (optionally) charts into ``out_dir``."""
    start_total = perf_counter()
    large = [n for n in n_values if n > settings.MAX_SIZE_WARNING]
    if large:
        print(f"Warning: N={large} may take a very long time (exhaustive search).")

    print(f"Sweeping N = {n_values} with {runs} run(s) per size")
    results = run_sweep(n_values, runs=runs, validate=validate, reference=reference)

    _print_summary(results, n_values)
    save_sweep_to_csv(results, n_values, out_dir)
    save_raw_times_to_csv(results, n_values, out_dir)
    if plots:
        from .plots import plot_sweep  # local import to avoid loading matplotlib if unused

        plot_sweep(results, n_values, out_dir)

    total_time = perf_counter() - start_total
    print(f"\nSweep completed in {total_time:.1f}s")
    return results


# ------------- Quick regression -------------------------------------------

def run_quick_regression_tests() -> None:
    """Execute a fast, deterministic smoke test for N=1..8.

    Verifies that solution counts match the reference table, that N=4 needs
    exactly 38 placements, and that the CSV export produces a non-empty file.
    """
    print("Running quick regression tests (N=1..8)...")
    n_values = list(range(1, 9))
    results = run_sweep(n_values, runs=2, validate=True, progress_label="Quick regression")

    if results[4]["placements"] != 38:
        raise AssertionError(f"N=4 required {results[4]['placements']} placements, expected 38.")

    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(save_sweep_to_csv(results, n_values, tmpdir))
        if not csv_path.exists() or csv_path.stat().st_size == 0:
            raise AssertionError("Sweep CSV was not generated successfully during quick tests.")

    print("Quick regression tests passed.")


# ------------- CLI wiring --------------------------------------------------

def build_arg_parser():
    """Construct the argument parser for the analysis entry point."""
    parser = argparse.ArgumentParser(description="Sweep N-Queens sizes and report placement/solution counts.")
    parser.add_argument(
        "--sizes",
        "-n",
        action="append",
        help="Board sizes to sweep (comma-separated, ranges like 4-10, or multiple flags). Default: from config.",
    )
    parser.add_argument("--runs", "-r", type=int, help="Timed runs per size (default: from config).")
    parser.add_argument("--out-dir", "-o", help="Output directory for CSV files and charts (default: from config).")
    parser.add_argument("--tag", help="Run tag appended to output filenames.")
    parser.add_argument("--config", default="config.json", help="Path to configuration file (default: config.json).")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation.")
    parser.add_argument("--quick-test", action="store_true", help="Run quick regression tests (N=1..8) and exit.")
    parser.add_argument("--validate", action="store_true", help="Check determinism and reference solution counts.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point: parse arguments and run the sweep pipeline."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.quick_test:
        run_quick_regression_tests()
        return

    try:
        apply_configuration(args.config)
        n_values = parse_size_filters(args.sizes) or settings.N_VALUES
    except FileNotFoundError as exc:
        print(f"Configuration file not found: {exc}")
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        raise SystemExit(1) from exc

    if args.tag:
        settings.RUN_TAG = args.tag
    runs = args.runs if args.runs is not None else settings.RUNS_PER_SIZE
    out_dir = args.out_dir or settings.OUT_DIR

    try:
        run_pipeline(n_values, runs, out_dir, validate=args.validate, plots=not args.no_plots)
    except KeyboardInterrupt:
        print("\nExecution interrupted by user.")
        raise SystemExit(130) from None
    except BoardError as exc:
        print(f"Execution error: {exc}")
        raise SystemExit(1) from exc
    except AssertionError as exc:
        print(f"Validation failed: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
