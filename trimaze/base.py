"""Shared types and the error hierarchy for triangular maze handling."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

PathLike = Union[str, Path]
Coordinate = Tuple[int, int]


class MazeError(Exception):
    """Base class for every error raised while loading or walking a maze."""


class MalformedMazeError(MazeError, ValueError):
    """The maze text could not be read or does not match its declared size."""


class CellOutOfRangeError(MazeError, IndexError):
    """A cell outside the grid was requested."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} maze")
        self.row = row
        self.col = col


class UnenterablePositionError(MazeError):
    """The requested start cell is not an open entry on the maze boundary."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Can't enter the maze from cell on row `{row}` and column `{col}`")
        self.row = row
        self.col = col


class DegenerateMazeError(MazeError):
    """The walker reached a state it can never leave."""


class WalkLimitError(DegenerateMazeError):
    """The walk took more steps than the maze allows without looping."""


__all__ = [
    "PathLike",
    "Coordinate",
    "MazeError",
    "MalformedMazeError",
    "CellOutOfRangeError",
    "UnenterablePositionError",
    "DegenerateMazeError",
    "WalkLimitError",
]
