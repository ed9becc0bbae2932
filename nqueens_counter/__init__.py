"""Exhaustive N-Queens placement and solution counter."""

from .board import Board, create_board, destroy_board, is_row_free, place_queen, remove_queen
from .exceptions import AllocationError, BoardError, InvalidSizeError
from .search import search, solve
from .utils import board_is_consistent, conflicts, format_counts, is_valid_solution

__all__ = [
    "Board",
    "create_board",
    "destroy_board",
    "is_row_free",
    "place_queen",
    "remove_queen",
    "search",
    "solve",
    "BoardError",
    "InvalidSizeError",
    "AllocationError",
    "board_is_consistent",
    "conflicts",
    "format_counts",
    "is_valid_solution",
]
