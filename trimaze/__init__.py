"""Triangular maze loading, validation and hand-rule path finding."""

__all__ = [
    "MazeError",
    "MalformedMazeError",
    "CellOutOfRangeError",
    "UnenterablePositionError",
    "DegenerateMazeError",
    "WalkLimitError",
    "Border",
    "HandRule",
    "Orientation",
    "MazeGrid",
    "parse_maze",
    "load_maze",
    "is_valid",
    "find_inconsistency",
    "Inconsistency",
    "start_border",
    "boundary_cells",
    "walk",
    "trace",
    "TraceResult",
    "MazeRenderer",
]

from .base import (
    MazeError,
    MalformedMazeError,
    CellOutOfRangeError,
    UnenterablePositionError,
    DegenerateMazeError,
    WalkLimitError,
)
from .borders import Border, HandRule, Orientation
from .grid import MazeGrid
from .loader import parse_maze, load_maze
from .validator import is_valid, find_inconsistency, Inconsistency
from .entry import start_border, boundary_cells
from .walker import walk, trace, TraceResult
from .renderer import MazeRenderer
