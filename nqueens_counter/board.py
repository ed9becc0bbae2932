"""Board state and the constant-time placement protocol for N-Queens.

Representation
--------------
A board of size N places one queen per column, filling columns left to
right. Besides ``queens[col] = row`` the board keeps three boolean masks so
that a square can be tested in O(1) without scanning the placed queens:

- ``column_free[row]``: no queen currently sits on ``row``.
- ``diag_up_free[(N - 1) + (col - row)]``: the "/" diagonal is free.
- ``diag_down_free[col + row]``: the "\\" diagonal is free.

``True`` means free. Both diagonal masks have ``2 * N - 1`` entries; the
``N - 1`` offset maps ``col - row`` from ``[-N+1, N-1]`` to ``[0, 2N-2]``.

Contract
--------
- ``place_queen`` expects ``is_row_free`` to hold for the row; it does not
  re-check.
- ``remove_queen`` is the strict LIFO inverse of the latest ``place_queen``.
  Calling it out of order silently corrupts the masks.
"""

from __future__ import annotations

from typing import List

from .exceptions import AllocationError, InvalidSizeError


def _allocate(length: int, value, part: str) -> list:
    try:
        return [value] * length
    except (MemoryError, OverflowError) as exc:
        raise AllocationError(part) from exc


class Board:
    """Mutable state of a single N-Queens search instance.

    Parameters
    ----------
    size : int
        Board dimension N, also the number of queens to place (N >= 1).

    Raises
    ------
    InvalidSizeError
        If ``size`` is not an integer or is smaller than 1. Raised before
        anything is allocated.
    AllocationError
        If one of the backing lists cannot be allocated.
    """

    __slots__ = (
        "size",
        "queens",
        "column_free",
        "diag_up_free",
        "diag_down_free",
        "current_column",
        "placements",
        "solutions",
    )

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidSizeError(size)

        diagonals = 2 * size - 1
        self.size = size
        self.queens: List[int] = _allocate(size, 0, "chess queens")
        self.column_free: List[bool] = _allocate(size, True, "column attacks")
        self.diag_up_free: List[bool] = _allocate(diagonals, True, "diagonal up attacks")
        self.diag_down_free: List[bool] = _allocate(diagonals, True, "diagonal down attacks")
        self.current_column = 0
        self.placements = 0
        self.solutions = 0

    def __repr__(self) -> str:
        return (
            f"Board(size={self.size}, current_column={self.current_column}, "
            f"placements={self.placements}, solutions={self.solutions})"
        )

    @property
    def placed(self) -> List[int]:
        """Rows of the queens currently on the board, by column."""
        return self.queens[: self.current_column]

    @property
    def is_full(self) -> bool:
        return self.current_column == self.size


def create_board(size: int) -> Board:
    """Build an empty board with every row and diagonal marked free."""
    try:
        return Board(size)
    except AllocationError:
        raise
    except (MemoryError, OverflowError) as exc:
        raise AllocationError("chess board") from exc


def destroy_board(board: Board) -> None:
    """Release the board's backing lists.

    Python frees memory on its own; dropping the lists here only makes a
    destroyed board unusable instead of silently stale. Safe to call twice.
    """
    board.queens = []
    board.column_free = []
    board.diag_up_free = []
    board.diag_down_free = []
    board.current_column = 0


def is_row_free(board: Board, row: int) -> bool:
    """Return True if a queen can go on ``row`` of the current column."""
    column = board.current_column
    return (
        board.column_free[row]
        and board.diag_up_free[(board.size - 1) + (column - row)]
        and board.diag_down_free[column + row]
    )


def place_queen(board: Board, row: int) -> None:
    """Put a queen on ``row`` of the current column and advance one column."""
    column = board.current_column
    board.queens[column] = row
    board.column_free[row] = False
    board.diag_up_free[(board.size - 1) + (column - row)] = False
    board.diag_down_free[column + row] = False
    board.current_column = column + 1
    board.placements += 1


def remove_queen(board: Board, row: int) -> None:
    """Take back the queen placed on ``row`` in the previous column."""
    # Diagonal indices use the column the queen was placed in.
    board.current_column -= 1
    column = board.current_column
    board.diag_down_free[column + row] = True
    board.diag_up_free[(board.size - 1) + (column - row)] = True
    board.column_free[row] = True
