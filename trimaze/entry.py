"""Resolve which wall the walker keeps in hand when entering from the boundary."""

from __future__ import annotations

from typing import Iterator, Optional

from .base import Coordinate
from .borders import Border, HandRule
from .grid import MazeGrid


def _pick(rule: HandRule, right_hand: Border, left_hand: Border) -> Border:
    return right_hand if rule is HandRule.RIGHT_HAND else left_hand


def start_border(grid: MazeGrid, row: int, col: int, rule: HandRule) -> Optional[Border]:
    """Return the initial tracked border for an entry at ``(row, col)``.

    Coordinates are 1-indexed. ``None`` means the cell cannot be entered: it is
    outside the grid, not on the boundary, or its outward edge is a wall.
    The side cases are tried before the top and bottom cases, so a corner with
    a closed side can still be entered through its horizontal edge.
    """

    if not grid.contains(row, col):
        return None

    odd_row = row % 2 != 0

    if col == 1 and not grid.has_border(row, col, Border.LEFT):
        if odd_row:
            return _pick(rule, Border.RIGHT, Border.TOP_OR_BOTTOM)
        return _pick(rule, Border.TOP_OR_BOTTOM, Border.RIGHT)

    if col == grid.cols and not grid.has_border(row, col, Border.RIGHT):
        if odd_row == (grid.cols % 2 != 0):
            return _pick(rule, Border.TOP_OR_BOTTOM, Border.LEFT)
        return _pick(rule, Border.LEFT, Border.TOP_OR_BOTTOM)

    if row == 1 and (row + col) % 2 == 0 and not grid.has_border(row, col, Border.TOP_OR_BOTTOM):
        return _pick(rule, Border.LEFT, Border.RIGHT)

    if row == grid.rows and (row + col) % 2 != 0 and not grid.has_border(row, col, Border.TOP_OR_BOTTOM):
        return _pick(rule, Border.RIGHT, Border.LEFT)

    return None


def boundary_cells(grid: MazeGrid) -> Iterator[Coordinate]:
    """Yield each 1-indexed boundary cell once, in row-major order."""

    for row in range(1, grid.rows + 1):
        for col in range(1, grid.cols + 1):
            if row in (1, grid.rows) or col in (1, grid.cols):
                yield row, col


__all__ = ["start_border", "boundary_cells"]
