"""Check candidate paths against a carved maze."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from .errors import NotGenerated
from .grid import Direction, Position
from .maze import Maze

_STEPS = {direction.offset: direction for direction in Direction}


@dataclass
class PathEvaluationResult:
    starts_at_entry: bool
    reaches_exit: bool
    contiguous: bool
    crosses_walls: bool
    revisits: bool
    length: int
    message: str

    @property
    def is_valid(self) -> bool:
        return (
            self.starts_at_entry
            and self.reaches_exit
            and self.contiguous
            and not self.crosses_walls
            and not self.revisits
        )

    def to_dict(self) -> dict:
        return {
            "starts_at_entry": self.starts_at_entry,
            "reaches_exit": self.reaches_exit,
            "contiguous": self.contiguous,
            "crosses_walls": self.crosses_walls,
            "revisits": self.revisits,
            "length": self.length,
            "is_valid": self.is_valid,
            "message": self.message,
        }


class PathEvaluator:
    """Evaluate entry-to-exit paths by checking each step against the wall mask."""

    def __init__(self, maze: Maze) -> None:
        self._require_generated(maze)
        self.maze = maze

    @staticmethod
    def _require_generated(maze: Maze) -> None:
        if not maze.generated:
            raise NotGenerated("cannot evaluate paths on a maze that was never carved")

    def evaluate(self, candidate: Iterable[Sequence[int]]) -> PathEvaluationResult:
        # Current layout, including any re-carve after reset().
        self._require_generated(self.maze)
        walls = self.maze.grid.wall_mask()
        path: List[Position] = [(int(r), int(c)) for r, c in candidate]
        rows, cols = walls.shape[:2]

        in_bounds = all(0 <= r < rows and 0 <= c < cols for r, c in path)
        starts_at_entry = bool(path) and path[0] == self.maze.entry
        reaches_exit = bool(path) and path[-1] == self.maze.exit
        revisits = len(set(path)) != len(path)

        contiguous = True
        crosses_walls = not in_bounds
        for a, b in zip(path, path[1:]):
            direction = _STEPS.get((b[0] - a[0], b[1] - a[1]))
            if direction is None:
                contiguous = False
                continue
            if in_bounds and self._blocked(walls, a, direction):
                crosses_walls = True

        if not path:
            message = "Path is empty."
        elif crosses_walls:
            message = "Path passes through walls."
        elif not starts_at_entry:
            message = "Path does not start at the entry."
        elif not reaches_exit:
            message = "Path does not reach the exit."
        elif not contiguous:
            message = "Path is not continuous from entry to exit."
        elif revisits:
            message = "Path visits a cell more than once."
        else:
            message = "Path successfully connects entry to exit."

        return PathEvaluationResult(
            starts_at_entry=starts_at_entry,
            reaches_exit=reaches_exit,
            contiguous=contiguous,
            crosses_walls=crosses_walls,
            revisits=revisits,
            length=len(path),
            message=message,
        )

    @staticmethod
    def _blocked(walls: np.ndarray, position: Position, direction: Direction) -> bool:
        r, c = position
        return bool(walls[r, c, int(direction)])


__all__ = ["PathEvaluator", "PathEvaluationResult"]
