"""Cells and the fixed-size grid that owns them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .errors import InvalidDimensions

Position = Tuple[int, int]


class Direction(IntEnum):
    """Neighbor directions; the value doubles as the index of the wall flag."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False
    solve_visited: bool = False

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def has_wall(self, direction: Direction) -> bool:
        return self.walls[direction]

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


class Grid:
    """Row-major rows x cols container of cells with bounds-checked lookups."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise InvalidDimensions(rows, cols)
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._rows}x{self._cols} grid")
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self.size

    # ------------------------------------------------------------------

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Return the adjacent cell in ``direction`` or ``None`` past the edge."""

        dr, dc = direction.offset
        r, c = cell.row + dr, cell.col + dc
        if not self.in_bounds(r, c):
            return None
        return self._cells[r][c]

    def neighbors(self, cell: Cell) -> List[Tuple[Direction, Cell]]:
        """In-bounds neighbors in up, right, down, left order, ignoring walls."""

        result: List[Tuple[Direction, Cell]] = []
        for direction in Direction:
            other = self.neighbor(cell, direction)
            if other is not None:
                result.append((direction, other))
        return result

    def connected_neighbors(self, cell: Cell) -> List[Cell]:
        """Neighbors reachable from ``cell`` through a removed wall."""

        return [
            other
            for direction, other in self.neighbors(cell)
            if not cell.has_wall(direction)
        ]

    def direction_between(self, a: Cell, b: Cell) -> Direction:
        for direction in Direction:
            if self.neighbor(a, direction) is b:
                return direction
        raise ValueError(f"{a!r} and {b!r} are not adjacent")

    def has_wall(self, a: Cell, b: Cell) -> bool:
        return a.has_wall(self.direction_between(a, b))

    def remove_wall(self, a: Cell, b: Cell) -> None:
        """Open the wall shared by two adjacent cells on both sides."""

        direction = self.direction_between(a, b)
        a.walls[direction] = False
        b.walls[direction.opposite] = False

    # ------------------------------------------------------------------

    def removed_wall_count(self) -> int:
        # Each removed pair is seen from both cells.
        return sum(cell.walls.count(False) for cell in self) // 2

    def visited_count(self) -> int:
        return sum(1 for cell in self if cell.visited)

    def reset_walls(self) -> None:
        for cell in self:
            cell.walls = [True, True, True, True]
            cell.visited = False
            cell.solve_visited = False

    def reset_solve_visited(self) -> None:
        for cell in self:
            cell.solve_visited = False

    def wall_mask(self) -> np.ndarray:
        """Read-only ``(rows, cols, 4)`` boolean array of wall flags.

        The last axis follows :class:`Direction` order (top, right, bottom, left).
        """

        mask = np.array(
            [[cell.walls for cell in row] for row in self._cells], dtype=bool
        )
        mask.flags.writeable = False
        return mask


__all__ = ["Cell", "Direction", "Grid", "Position"]
