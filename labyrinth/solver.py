"""Backtracking depth-first solver."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .base import AbstractSolver
from .errors import NoPathFound
from .grid import Cell, Grid


class BacktrackingSolver(AbstractSolver):
    """Depth-first search from (0, 0) to (rows - 1, cols - 1) through open walls.

    Neighbors are tried in up, right, down, left order. A cell stays marked
    once entered, so a branch that failed is never explored again. The search
    keeps its own stack of ``(cell, remaining neighbors)`` frames instead of
    recursing; when the exit is reached the frames on the stack are exactly
    the path from the entry.
    """

    def solve(self, grid: Grid, *, reset: bool = True) -> List[Cell]:
        if reset:
            grid.reset_solve_visited()

        start = self.entry(grid)
        goal = self.exit(grid)

        start.solve_visited = True
        frames: List[Tuple[Cell, Iterator[Cell]]] = [
            (start, iter(grid.connected_neighbors(start)))
        ]
        while frames:
            cell, remaining = frames[-1]
            if cell is goal:
                return [frame_cell for frame_cell, _ in frames]

            # Visitation is checked when a neighbor comes up, not when the
            # frame is created, matching the recursive formulation.
            for neighbor in remaining:
                if not neighbor.solve_visited:
                    neighbor.solve_visited = True
                    frames.append((neighbor, iter(grid.connected_neighbors(neighbor))))
                    break
            else:
                frames.pop()

        raise NoPathFound(
            f"no path from {start.position} to {goal.position} in {grid.rows}x{grid.cols} maze"
        )


__all__ = ["BacktrackingSolver"]
