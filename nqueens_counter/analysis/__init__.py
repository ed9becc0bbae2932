"""
Analysis package for N-Queens counting sweeps.

This package contains:
- settings: global knobs and reference counts
- stats: typed summaries, growth estimation and progress reporting
- experiments: sequential sweep runner with optional validation
- reporting: CSV exports for aggregates and raw timings
- plots: chart generation (matplotlib/seaborn)
- cli: top-level pipeline entry point and argument parser
"""

from . import settings as settings  # re-export for convenience
from .stats import (
    StatsSummary,
    SweepEntry,
    SweepResults,
    compute_detailed_statistics,
    estimate_growth_rate,
    ProgressPrinter,
)

__all__ = [
    # types
    "StatsSummary",
    "SweepEntry",
    "SweepResults",
    # utils
    "compute_detailed_statistics",
    "estimate_growth_rate",
    "ProgressPrinter",
    # settings module
    "settings",
]
