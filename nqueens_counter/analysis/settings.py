"""Global settings for the N-Queens counting sweep.

This module centralizes tunable constants used across the orchestration code.
Values can be overridden at runtime via the configuration loader in
`nqueens_counter.analysis.cli.apply_configuration`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

# Board sizes to sweep (in ascending order)
N_VALUES: List[int] = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]

# Timed repetitions per size; counts are deterministic, repeats only feed time statistics
RUNS_PER_SIZE: int = 3

# Output directory for CSV and charts
OUT_DIR: str = "results_nqueens_counter"

# Sizes above this print a warning before the sweep starts (runtime grows exponentially)
MAX_SIZE_WARNING: int = 14

# Known solution counts used by --validate
REFERENCE_SOLUTIONS: Dict[int, int] = {
    1: 1,
    2: 0,
    3: 0,
    4: 2,
    5: 10,
    6: 4,
    7: 40,
    8: 92,
    9: 352,
    10: 724,
    11: 2680,
    12: 14200,
}

# Output naming policy --------------------------------------------------------

# When True, results and plots include a datestamp suffix (e.g., _20251113-142530)
DATE_IN_FILENAMES: bool = False

# Unique run identifier used for filename stamping; set once at import time.
RUN_ID: str = datetime.now().strftime("%Y%m%d-%H%M%S")

# Optional run labeling to avoid overwriting outputs
RUN_TAG: Optional[str] = None


def filename_suffix() -> str:
    """Build the optional ``_<tag>_<run id>`` suffix shared by all artifacts."""
    parts: List[str] = []
    if RUN_TAG:
        parts.append(RUN_TAG)
    if DATE_IN_FILENAMES:
        parts.append(RUN_ID)
    return ("_" + "_".join(parts)) if parts else ""
