"""Exceptions raised while constructing an N-Queens board.

Both errors are fatal for a run: they are raised at the point of detection
and surface unchanged to the caller (the CLI prints one message and exits
with a failure status). The search itself never raises.
"""
from __future__ import annotations


class BoardError(Exception):
    """Base class for board construction failures."""


class InvalidSizeError(BoardError, ValueError):
    """Raised when the requested number of queens is smaller than 1."""

    def __init__(self, size: object):
        self.size = size
        super().__init__("The number of queens must be greater than 0.")


class AllocationError(BoardError, MemoryError):
    """Raised when backing storage for a board part cannot be obtained.

    ``part`` names the storage that failed (e.g. ``"column attacks"``).
    """

    def __init__(self, part: str):
        self.part = part
        super().__init__(f"Failed to allocate memory for {part}.")
