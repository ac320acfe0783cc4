"""Perfect-maze carving and solving toolkit."""

__all__ = [
    "AbstractCarver",
    "AbstractSolver",
    "RandomSource",
    "Cell",
    "Direction",
    "Grid",
    "DepthFirstCarver",
    "BacktrackingSolver",
    "Maze",
    "MazeRecord",
    "PathEvaluator",
    "PathEvaluationResult",
    "MazeError",
    "InvalidDimensions",
    "NotGenerated",
    "AlreadyGenerated",
    "NoPathFound",
]

from .base import AbstractCarver, AbstractSolver, RandomSource
from .grid import Cell, Direction, Grid
from .carver import DepthFirstCarver
from .solver import BacktrackingSolver
from .maze import Maze, MazeRecord
from .evaluator import PathEvaluator, PathEvaluationResult
from .errors import (
    MazeError,
    InvalidDimensions,
    NotGenerated,
    AlreadyGenerated,
    NoPathFound,
)
