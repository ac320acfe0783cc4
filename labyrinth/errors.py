"""Errors raised by the maze engine."""

from __future__ import annotations


class MazeError(Exception):
    """Base class for maze lifecycle and search failures."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(f"rows and cols must be at least 1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class NotGenerated(MazeError):
    """Raised when a maze is solved before it has been carved."""


class AlreadyGenerated(MazeError):
    """Raised when carving is requested on a maze that is already carved."""


class NoPathFound(MazeError):
    """Raised when the solver exhausts every branch without reaching the exit."""


__all__ = [
    "MazeError",
    "InvalidDimensions",
    "NotGenerated",
    "AlreadyGenerated",
    "NoPathFound",
]
