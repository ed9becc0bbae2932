"""CSV export utilities for sweep outputs (aggregates and raw timings)."""
from __future__ import annotations

import csv
import os
from typing import List

from . import settings
from .stats import SweepResults, estimate_growth_rate


def _fmt(value) -> str:
    return "" if value is None else str(value)


def save_sweep_to_csv(results: SweepResults, n_values: List[int], out_dir: str) -> str:
    """Write one row of counts and timing statistics per N and return the path.

    The last row carries the estimated placement growth factor per extra
    queen under ``n = "growth"``.
    """
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"sweep_counts{settings.filename_suffix()}.csv")
    sizes = [n for n in n_values if n in results]

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([
            "n",
            "placements",
            "solutions",
            "placements_per_solution",
            "runs",
            "time_mean_seconds",
            "time_median_seconds",
            "time_std_seconds",
            "time_min_seconds",
            "time_max_seconds",
        ])
        for n in sizes:
            entry = results[n]
            timing = entry["time"]
            writer.writerow([
                n,
                entry["placements"],
                entry["solutions"],
                _fmt(entry["placements_per_solution"]),
                timing.get("count", 0),
                _fmt(timing.get("mean")),
                _fmt(timing.get("median")),
                _fmt(timing.get("std")),
                _fmt(timing.get("min")),
                _fmt(timing.get("max")),
            ])
        growth = estimate_growth_rate(sizes, [results[n]["placements"] for n in sizes])
        writer.writerow(["growth", _fmt(growth)] + [""] * 8)

    print(f"Saved sweep summary: {filename}")
    return filename


def save_raw_times_to_csv(results: SweepResults, n_values: List[int], out_dir: str) -> str:
    """Write every individual timing sample (one row per run) and return the path."""
    os.makedirs(out_dir, exist_ok=True)
    filename = os.path.join(out_dir, f"sweep_raw_times{settings.filename_suffix()}.csv")

    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["n", "run", "placements", "solutions", "time_seconds"])
        for n in n_values:
            if n not in results:
                continue
            entry = results[n]
            for run, elapsed in enumerate(entry["raw_times"], start=1):
                writer.writerow([n, run, entry["placements"], entry["solutions"], elapsed])

    print(f"Saved raw timings: {filename}")
    return filename
