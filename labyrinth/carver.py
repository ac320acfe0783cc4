"""Randomized depth-first carving."""

from __future__ import annotations

from typing import List, Optional

from .base import AbstractCarver, RandomSource
from .grid import Cell, Grid


class DepthFirstCarver(AbstractCarver):
    """Carve a perfect maze with an iterative randomized depth-first walk.

    The walk starts at (0, 0). At each step one unvisited neighbor is chosen
    uniformly at random, the wall between the two cells is removed and the
    current cell is pushed; when no unvisited neighbor remains the stack is
    popped. Walls are ignored when looking for neighbors: only visitation
    gates a move. Every cell ends up visited exactly once and the removed
    walls form a spanning tree with ``rows * cols - 1`` edges.
    """

    def __init__(self, rng: RandomSource) -> None:
        super().__init__(rng)
        self.current: Optional[Cell] = None
        self.stack: List[Cell] = []

    def reset(self) -> None:
        self.current = None
        self.stack = []

    def carve(self, grid: Grid) -> None:
        self.reset()
        self.current = grid.cell(0, 0)
        self.current.visited = True

        while True:
            candidates = self._unvisited_neighbors(grid, self.current)
            if candidates:
                chosen = self.rng.choice(candidates)
                grid.remove_wall(self.current, chosen)
                self.stack.append(self.current)
                self.current = chosen
                self.current.visited = True
            elif self.stack:
                self.current = self.stack.pop()
            else:
                break

    @staticmethod
    def _unvisited_neighbors(grid: Grid, cell: Cell) -> List[Cell]:
        return [other for _, other in grid.neighbors(cell) if not other.visited]


__all__ = ["DepthFirstCarver"]
