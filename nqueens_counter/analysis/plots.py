"""Visualization utilities for sweep outputs.

Charts are written as PNG files into ``out_dir`` with a two-digit prefix for
stable ordering and the optional suffix from ``settings.filename_suffix()``:

- 01_placements_vs_N.png: Queen placements vs N (log scale)
    - Logical search effort; the dashed line is the log-linear trend whose
      slope gives the growth factor per extra queen.
- 02_solutions_vs_N.png: Solutions vs N (symlog scale, zero counts kept)
- 03_time_vs_N.png: Mean wall-clock time ± std vs N (log scale)
"""
from __future__ import annotations

import os
from typing import List

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from . import settings  # noqa: E402
from .stats import SweepResults, estimate_growth_rate  # noqa: E402


def sweep_to_dataframe(results: SweepResults, n_values: List[int]) -> pd.DataFrame:
    """Flatten sweep results into one row per N, ordered as ``n_values``."""
    rows = []
    for n in n_values:
        if n not in results:
            continue
        entry = results[n]
        rows.append({
            "n": n,
            "placements": entry["placements"],
            "solutions": entry["solutions"],
            "time_mean": entry["time"].get("mean"),
            "time_std": entry["time"].get("std") or 0.0,
        })
    return pd.DataFrame(rows, columns=["n", "placements", "solutions", "time_mean", "time_std"])


def _save(fig, out_dir: str, name: str) -> str:
    path = os.path.join(out_dir, f"{name}{settings.filename_suffix()}.png")
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def plot_sweep(results: SweepResults, n_values: List[int], out_dir: str) -> List[str]:
    """Render the sweep charts and return the written file paths."""
    df = sweep_to_dataframe(results, n_values)
    if df.empty:
        print("No sweep results to plot.")
        return []

    os.makedirs(out_dir, exist_ok=True)
    sns.set_theme(style="whitegrid")
    written: List[str] = []

    # 01: placements with log-linear trend
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.lineplot(data=df, x="n", y="placements", marker="o", ax=ax, label="placements")
    growth = estimate_growth_rate(df["n"].tolist(), df["placements"].tolist())
    if growth is not None:
        xs = df["n"].to_numpy(dtype=float)
        slope, intercept = np.polyfit(xs, np.log(df["placements"].to_numpy(dtype=float)), 1)
        x_trend = np.linspace(xs.min(), xs.max(), 100)
        ax.plot(x_trend, np.exp(slope * x_trend + intercept), "--", color="gray",
                label=f"trend (x{growth:.2f} per queen)")
    ax.set_yscale("log")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Queen placements")
    ax.set_title("Queen placements vs N")
    ax.legend()
    written.append(_save(fig, out_dir, "01_placements_vs_N"))

    # 02: solutions
    fig, ax = plt.subplots(figsize=(8, 5))
    sns.lineplot(data=df, x="n", y="solutions", marker="o", ax=ax)
    ax.set_yscale("symlog")
    ax.set_xlabel("N (board size)")
    ax.set_ylabel("Solutions")
    ax.set_title("Solutions vs N")
    written.append(_save(fig, out_dir, "02_solutions_vs_N"))

    # 03: time
    timed = df.dropna(subset=["time_mean"])
    timed = timed[timed["time_mean"] > 0]
    if not timed.empty:
        fig, ax = plt.subplots(figsize=(8, 5))
        ax.errorbar(timed["n"], timed["time_mean"], yerr=timed["time_std"], marker="o", capsize=3)
        ax.set_yscale("log")
        ax.set_xlabel("N (board size)")
        ax.set_ylabel("Time [s]")
        ax.set_title("Mean search time vs N")
        written.append(_save(fig, out_dir, "03_time_vs_N"))

    for path in written:
        print(f"Saved chart: {path}")
    return written
