"""Typed result shapes and statistics helpers for the counting sweep.

Defines ``TypedDict`` structures for sweep outputs and provides utilities to
summarize repeated timings and to estimate how fast the search effort grows
with the board size.
"""
from __future__ import annotations

import math
import statistics
from typing import Dict, List, Optional, TypedDict

import numpy as np


class StatsSummary(TypedDict, total=False):
    count: int
    mean: Optional[float]
    median: Optional[float]
    std: Optional[float]
    min: Optional[float]
    max: Optional[float]
    q25: Optional[float]
    q75: Optional[float]
    range: Optional[float]


class SweepEntry(TypedDict):
    placements: int
    solutions: int
    placements_per_solution: Optional[float]
    time: StatsSummary
    raw_times: List[float]


SweepResults = Dict[int, SweepEntry]


class ProgressPrinter:
    """Minimal, stdout-only progress reporter for long-running loops.

    Parameters
    ----------
    total : int
        Total number of steps expected. Values <= 0 are coerced to 1 to avoid
        division by zero when reporting percentages.
    label : str
        Short label printed in front of the progress counters.
    """

    def __init__(self, total: int, label: str):
        self.total = max(1, total)
        self.label = label

    def update(self, index: int, detail: str = "") -> None:
        """Print a single-line progress update to stdout."""
        percent = (index / self.total) * 100
        suffix = f" - {detail}" if detail else ""
        print(f"[{self.label}] {index}/{self.total} ({percent:.0f}%)" + suffix)


def compute_detailed_statistics(values: List[float]) -> StatsSummary:
    """Compute summary statistics for a numeric sequence.

    Returns count, mean, median, population std, min, max, 25th/75th
    percentiles and range. When ``values`` is empty every numeric field is
    ``None`` and ``count`` is 0 to keep CSV/plot generation consistent.
    """
    if not values:
        return {
            "count": 0,
            "mean": None,
            "median": None,
            "std": None,
            "min": None,
            "max": None,
            "q25": None,
            "q75": None,
            "range": None,
        }

    sorted_vals = sorted(values)
    n = len(values)

    min_val = sorted_vals[0]
    max_val = sorted_vals[-1]
    q25 = sorted_vals[n // 4] if n >= 4 else min_val
    q75 = sorted_vals[3 * n // 4] if n >= 4 else max_val

    return {
        "count": n,
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.pstdev(values) if n > 1 else 0.0,
        "min": min_val,
        "max": max_val,
        "q25": q25,
        "q75": q75,
        "range": max_val - min_val,
    }


def estimate_growth_rate(n_values: List[int], placements: List[int]) -> Optional[float]:
    """Estimate the per-size growth factor of the placement count.

    Fits ``log(placements) = a * n + b`` by least squares and returns
    ``exp(a)``, i.e. the factor by which the effort multiplies when N grows
    by one. Returns None with fewer than two usable points.
    """
    points = [(n, p) for n, p in zip(n_values, placements) if p > 0]
    if len(points) < 2 or len({n for n, _ in points}) < 2:
        return None
    xs = np.array([n for n, _ in points], dtype=float)
    ys = np.log(np.array([p for _, p in points], dtype=float))
    slope, _ = np.polyfit(xs, ys, 1)
    return float(math.exp(slope))
