"""Check that neighbouring cells agree on the walls they share."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .borders import Border
from .grid import MazeGrid


@dataclass(frozen=True)
class Inconsistency:
    """A shared edge that one neighbour marks as a wall and the other does not (1-indexed)."""

    row: int
    col: int
    neighbor_row: int
    neighbor_col: int
    edge: str

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "neighbor_row": self.neighbor_row,
            "neighbor_col": self.neighbor_col,
            "edge": self.edge,
        }


def _horizontal_mismatches(cells: np.ndarray) -> np.ndarray:
    # RIGHT bit of each cell against the LEFT bit of its right neighbour.
    return ((cells[:, :-1] >> 1) ^ cells[:, 1:]) & int(Border.LEFT) != 0


def _vertical_mismatches(cells: np.ndarray) -> np.ndarray:
    rows, cols = cells.shape
    r, c = np.indices((rows - 1, cols))
    has_bottom_edge = (r + c) % 2 == 1
    differs = (cells[:-1, :] ^ cells[1:, :]) & int(Border.TOP_OR_BOTTOM) != 0
    return has_bottom_edge & differs


def find_inconsistency(grid: MazeGrid) -> Optional[Inconsistency]:
    """Return the first mismatched edge in row-major order, or ``None``."""

    cells = grid.cells
    found: List[Tuple[int, int, Inconsistency]] = []

    horizontal = np.argwhere(_horizontal_mismatches(cells))
    if horizontal.size:
        r, c = (int(v) for v in horizontal[0])
        found.append((r, c, Inconsistency(r + 1, c + 1, r + 1, c + 2, "horizontal")))

    vertical = np.argwhere(_vertical_mismatches(cells))
    if vertical.size:
        r, c = (int(v) for v in vertical[0])
        found.append((r, c, Inconsistency(r + 1, c + 1, r + 2, c + 1, "vertical")))

    if not found:
        return None
    # Horizontal wins a tie on the same cell, matching a cell-by-cell scan.
    return min(found, key=lambda item: (item[0], item[1]))[2]


def is_valid(grid: MazeGrid) -> bool:
    return find_inconsistency(grid) is None


__all__ = ["Inconsistency", "find_inconsistency", "is_valid"]
