"""Sweep runner: solve a list of board sizes and collect counts and timings.

Each size is solved ``runs`` times in sequence. The counts are deterministic,
so repeated runs only contribute wall-clock samples; with ``validate`` the
runner also asserts that repeats agree, that known sizes match their
reference solution counts, and that the placement lower bound holds.

Outputs are structured dictionaries suitable for CSV export and plotting.
"""
from __future__ import annotations

from time import perf_counter
from typing import Dict, List, Optional, Tuple

from . import settings
from .stats import ProgressPrinter, SweepEntry, SweepResults, compute_detailed_statistics
from nqueens_counter.search import solve


def run_timed_solve(size: int) -> Tuple[int, int, float]:
    """Solve one size and return ``(placements, solutions, elapsed_seconds)``."""
    start = perf_counter()
    placements, solutions = solve(size)
    return placements, solutions, perf_counter() - start


def validate_entry(
    size: int,
    entry: SweepEntry,
    reference: Optional[Dict[int, int]] = None,
) -> None:
    """Raise ``AssertionError`` if a sweep entry contradicts known facts."""
    reference = settings.REFERENCE_SOLUTIONS if reference is None else reference
    expected = reference.get(size)
    if expected is not None and entry["solutions"] != expected:
        raise AssertionError(
            f"N={size}: found {entry['solutions']} solutions, expected {expected}."
        )
    if entry["solutions"] > 0 and entry["placements"] < entry["solutions"] * size:
        raise AssertionError(
            f"N={size}: {entry['placements']} placements cannot produce "
            f"{entry['solutions']} solutions."
        )


def run_sweep(
    n_values: List[int],
    runs: int = 1,
    validate: bool = False,
    reference: Optional[Dict[int, int]] = None,
    progress_label: str = "Sweep",
) -> SweepResults:
    """Solve every size in ``n_values`` and aggregate the results.

    Parameters
    ----------
    n_values : list[int]
        Board sizes to solve, each >= 1.
    runs : int
        Timed repetitions per size (coerced to at least 1).
    validate : bool
        When True, check determinism, reference counts and the placement
        lower bound after each size.
    reference : dict[int, int] | None
        Expected solution counts per size; defaults to
        ``settings.REFERENCE_SOLUTIONS``.

    Returns
    -------
    SweepResults
        Mapping ``N -> SweepEntry``.
    """
    runs = max(1, runs)
    results: SweepResults = {}
    progress = ProgressPrinter(len(n_values), progress_label)

    for index, size in enumerate(n_values, start=1):
        counts = set()
        times: List[float] = []
        for _ in range(runs):
            placements, solutions, elapsed = run_timed_solve(size)
            counts.add((placements, solutions))
            times.append(elapsed)

        if validate and len(counts) != 1:
            raise AssertionError(f"N={size}: repeated runs disagree: {sorted(counts)}.")

        placements, solutions = next(iter(counts))
        entry: SweepEntry = {
            "placements": placements,
            "solutions": solutions,
            "placements_per_solution": placements / solutions if solutions else None,
            "time": compute_detailed_statistics(times),
            "raw_times": times,
        }
        if validate:
            validate_entry(size, entry, reference)

        results[size] = entry
        progress.update(
            index,
            f"N={size}: {placements} placements, {solutions} solutions, "
            f"{entry['time']['mean']:.4f}s",
        )

    return results
