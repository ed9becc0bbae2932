"""Exhaustive backtracking search counting every N-Queens solution.

The search fills columns left to right and tries rows in ascending order.
Each candidate is pruned in O(1) through the board's conflict masks; every
placement is undone on the way back up, so the board returns to its empty
state once ``search`` finishes.

Counting semantics
------------------
- ``placements`` grows by one for every queen put on the board, including
  those later backtracked.
- ``solutions`` grows by one each time the last column receives a queen.

With this row order ``solve(4)`` reports 38 placements and 2 solutions.
"""

from __future__ import annotations

import sys
from typing import Tuple

from .board import Board, create_board, destroy_board, is_row_free, place_queen, remove_queen

# Frames needed above the search itself (CLI, test runner, interpreter).
_STACK_HEADROOM = 100


def search(board: Board) -> None:
    """Explore every completion of the board's current partial placement."""
    for row in range(board.size):
        if is_row_free(board, row):
            place_queen(board, row)
            if board.current_column == board.size:
                board.solutions += 1
            else:
                search(board)
            remove_queen(board, row)


def _ensure_recursion_depth(size: int) -> int:
    """Raise the recursion limit for a board of ``size`` and return the old limit."""
    previous = sys.getrecursionlimit()
    needed = size + _STACK_HEADROOM
    if previous < needed:
        sys.setrecursionlimit(needed)
    return previous


def solve(size: int) -> Tuple[int, int]:
    """Count the placements and solutions of the ``size``-Queens problem.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 1).

    Returns
    -------
    (placements, solutions)
        Total tentative placements made and number of complete boards found.

    Raises
    ------
    InvalidSizeError
        If ``size < 1``.
    AllocationError
        If the board cannot be allocated.
    """
    board = create_board(size)
    previous_limit = _ensure_recursion_depth(board.size)
    try:
        search(board)
        return board.placements, board.solutions
    finally:
        sys.setrecursionlimit(previous_limit)
        destroy_board(board)
