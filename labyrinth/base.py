"""Abstract interfaces for maze carving and solving."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Protocol, Sequence, TypeVar

from .grid import Cell, Grid

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an element, e.g. :class:`random.Random`."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class AbstractCarver(ABC):
    """Base class for algorithms that remove walls to form a perfect maze."""

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    @abstractmethod
    def carve(self, grid: Grid) -> None:
        """Remove walls from ``grid`` in place."""

    def reset(self) -> None:
        """Forget any traversal state left over from a previous carve."""


class AbstractSolver(ABC):
    """Base class for searches from the entry to the exit through open walls."""

    @abstractmethod
    def solve(self, grid: Grid) -> List[Cell]:
        """Return the cells from entry to exit, raising ``NoPathFound`` on failure."""

    @staticmethod
    def entry(grid: Grid) -> Cell:
        return grid.cell(0, 0)

    @staticmethod
    def exit(grid: Grid) -> Cell:
        return grid.cell(grid.rows - 1, grid.cols - 1)


__all__ = ["AbstractCarver", "AbstractSolver", "RandomSource"]
