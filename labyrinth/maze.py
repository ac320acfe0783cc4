"""Maze composition: a grid carved once and solved on demand."""

from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .base import AbstractCarver, AbstractSolver, RandomSource
from .carver import DepthFirstCarver
from .errors import AlreadyGenerated, NoPathFound, NotGenerated
from .grid import Cell, Grid, Position
from .solver import BacktrackingSolver

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 20
DEFAULT_COLS = 20


@dataclass
class MazeRecord:
    rows: int
    cols: int
    seed: Optional[int]
    walls: List[List[List[bool]]]
    entry: Position
    exit: Position
    solution: List[Position]

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "seed": self.seed,
            "walls": [[list(flags) for flags in row] for row in self.walls],
            "entry": list(self.entry),
            "exit": list(self.exit),
            "solution": [list(position) for position in self.solution],
        }


class Maze:
    """Two-phase maze: :meth:`generate` carves the grid, :meth:`solve` walks it.

    Carving happens once. Calling :meth:`generate` again raises
    :class:`AlreadyGenerated`; call :meth:`reset` first to restore every wall
    and carve a fresh layout.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        *,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        carver: Optional[AbstractCarver] = None,
        solver: Optional[AbstractSolver] = None,
    ) -> None:
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        self._grid = Grid(rows, cols)
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)
        self._carver = carver if carver is not None else DepthFirstCarver(self._rng)
        self._solver = solver if solver is not None else BacktrackingSolver()
        self._generated = False
        self._solution: List[Cell] = []

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def entry(self) -> Position:
        return (0, 0)

    @property
    def exit(self) -> Position:
        return (self.rows - 1, self.cols - 1)

    @property
    def generated(self) -> bool:
        return self._generated

    @property
    def current(self) -> Optional[Cell]:
        return getattr(self._carver, "current", None)

    @property
    def stack(self) -> List[Cell]:
        return list(getattr(self._carver, "stack", []))

    @property
    def solution(self) -> List[Cell]:
        return list(self._solution)

    # ------------------------------------------------------------------

    def generate(self) -> Grid:
        if self._generated:
            raise AlreadyGenerated(
                f"{self.rows}x{self.cols} maze is already carved; call reset() first"
            )
        logger.debug("Carving %dx%d maze (seed=%s)", self.rows, self.cols, self.seed)
        try:
            self._carver.carve(self._grid)
        except Exception:
            # Never leave a half-carved grid for the next attempt.
            self.reset()
            raise
        self._generated = True
        logger.debug(
            "Carved %d wall pairs across %d cells",
            self._grid.removed_wall_count(),
            self._grid.visited_count(),
        )
        return self._grid

    def solve(self) -> List[Position]:
        if not self._generated:
            raise NotGenerated("generate() must run before solve()")
        self._solution = []
        try:
            cells = self._solver.solve(self._grid)
        except NoPathFound:
            logger.debug("No path found in %dx%d maze", self.rows, self.cols)
            raise
        self._solution = cells
        logger.debug("Solved %dx%d maze with a %d-cell path", self.rows, self.cols, len(cells))
        return [cell.position for cell in cells]

    def reset(self) -> None:
        """Restore every wall and clear all markers so the maze can be carved again."""

        self._grid.reset_walls()
        self._carver.reset()
        self._solution = []
        self._generated = False
        logger.debug("Reset %dx%d maze", self.rows, self.cols)

    # ------------------------------------------------------------------

    def walls(self) -> List[List[List[bool]]]:
        """Copy of the wall flags as ``[top, right, bottom, left]`` per cell."""

        return [
            [list(self._grid.cell(r, c).walls) for c in range(self.cols)]
            for r in range(self.rows)
        ]

    def to_record(self) -> MazeRecord:
        if not self._generated:
            raise NotGenerated("generate() must run before a record can be built")
        return MazeRecord(
            rows=self.rows,
            cols=self.cols,
            seed=self.seed,
            walls=self.walls(),
            entry=self.entry,
            exit=self.exit,
            solution=[cell.position for cell in self._solution],
        )


__all__ = ["Maze", "MazeRecord", "DEFAULT_ROWS", "DEFAULT_COLS"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Carve and solve a perfect maze")
    parser.add_argument("rows", type=int, nargs="?", default=DEFAULT_ROWS)
    parser.add_argument("cols", type=int, nargs="?", default=DEFAULT_COLS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-solve", action="store_true", help="Only carve the maze")
    parser.add_argument("--verbose", action="store_true", help="Log carving and solving steps")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    maze = Maze(args.rows, args.cols, seed=args.seed)
    maze.generate()
    if not args.no_solve:
        maze.solve()
    print(json.dumps(maze.to_record().to_dict(), indent=2))


if __name__ == "__main__":
    main()
