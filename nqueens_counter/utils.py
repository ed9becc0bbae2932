"""Helpers shared by the CLI, the analysis pipeline, and the tests.

Queen configurations are encoded as a 1D sequence where ``queens[col] = row``.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .board import Board


def conflicts(queens: Sequence[int]) -> int:
    """Count attacking queen pairs in O(N).

    Uses counters per row and per diagonal instead of comparing every pair.
    """
    row_count: Counter[int] = Counter()
    diag_up: Counter[int] = Counter()
    diag_down: Counter[int] = Counter()

    for column, row in enumerate(queens):
        row_count[row] += 1
        diag_up[column - row] += 1
        diag_down[column + row] += 1

    def _pairs(counter: Counter[int]) -> int:
        return sum(count * (count - 1) // 2 for count in counter.values() if count > 1)

    return _pairs(row_count) + _pairs(diag_up) + _pairs(diag_down)


def is_valid_solution(queens: Sequence[int]) -> bool:
    """Return True if ``queens`` is a complete, non-attacking placement."""
    n = len(queens)
    if n == 0:
        return False
    for row in queens:
        if not isinstance(row, int) or row < 0 or row >= n:
            return False
    return conflicts(queens) == 0


def board_is_consistent(board: Board) -> bool:
    """Check that the board's conflict masks match its placed queens exactly.

    Rebuilds the three masks from ``board.placed`` and compares them with the
    incrementally maintained ones. Used as instrumentation after a search
    (where every mask must be back to free) and in tests.
    """
    size = board.size
    if not 0 <= board.current_column <= size:
        return False
    column_free = [True] * size
    diag_up_free = [True] * (2 * size - 1)
    diag_down_free = [True] * (2 * size - 1)
    for column, row in enumerate(board.placed):
        column_free[row] = False
        diag_up_free[(size - 1) + (column - row)] = False
        diag_down_free[column + row] = False
    return (
        column_free == board.column_free
        and diag_up_free == board.diag_up_free
        and diag_down_free == board.diag_down_free
    )


def format_counts(size: int, placements: int, solutions: int) -> str:
    """Render the single result line printed by the command-line tool."""
    return (
        f"The {size}-Queens problem required {placements} queen placements "
        f"to find all {solutions} solutions"
    )
