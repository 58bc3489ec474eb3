"""Immutable grid of triangular cells backed by a numpy byte array."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

import numpy as np

from .base import CellOutOfRangeError, PathLike
from .borders import BORDER_MASK, Border


class MazeGrid:
    """Rectangular array of cell border bytes.

    Storage is 0-indexed; ``has_border`` and ``contains`` take the 1-indexed
    coordinates used by paths and the command line.
    """

    def __init__(self, cells: np.ndarray) -> None:
        array = np.array(cells, dtype=np.uint8, copy=True)
        if array.ndim != 2 or array.shape[0] < 1 or array.shape[1] < 1:
            raise ValueError("Maze cells must be a non-empty 2D array")
        array &= BORDER_MASK
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "MazeGrid":
        data = [list(map(int, row)) for row in rows]
        if not data or any(len(row) != len(data[0]) for row in data):
            raise ValueError("Maze rows must be non-empty and of equal length")
        return cls(np.asarray(data, dtype=np.uint8))

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell bytes, shape ``(rows, cols)``."""

        return self._cells

    def cell_value(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise CellOutOfRangeError(row, col, self.rows, self.cols)
        return int(self._cells[row, col])

    def contains(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def has_border(self, row: int, col: int, border: Border) -> bool:
        if not self.contains(row, col):
            raise CellOutOfRangeError(row, col, self.rows, self.cols)
        return bool(self.cell_value(row - 1, col - 1) & border)

    def is_closed(self, row: int, col: int) -> bool:
        """True when all three borders of the 1-indexed cell are walls."""

        return self.cell_value(row - 1, col - 1) == BORDER_MASK

    # ------------------------------------------------------------------

    def to_rows(self) -> List[List[int]]:
        return [[int(value) for value in row] for row in self._cells]

    def to_text(self) -> str:
        lines = [f"{self.rows} {self.cols}"]
        lines.extend(" ".join(str(value) for value in row) for row in self.to_rows())
        return "\n".join(lines) + "\n"

    def write(self, destination: PathLike) -> Path:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_text(), encoding="utf-8")
        return path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"MazeGrid(rows={self.rows}, cols={self.cols})"


__all__ = ["MazeGrid"]
