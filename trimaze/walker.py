"""Hand-on-the-wall traversal of a triangular maze."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from .base import Coordinate, DegenerateMazeError, UnenterablePositionError, WalkLimitError
from .borders import Border, HandRule, flip_border, rotate_border, row_step
from .entry import start_border
from .grid import MazeGrid

logger = logging.getLogger(__name__)


@dataclass
class TraceResult:
    row: int
    col: int
    rule: HandRule
    start_border: Border
    path: List[Coordinate]

    @property
    def exit_cell(self) -> Coordinate:
        return self.path[-1]

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "rule": self.rule.value,
            "start_border": self.start_border.name,
            "path": [list(cell) for cell in self.path],
        }


def step_limit(grid: MazeGrid) -> int:
    """Upper bound on the cells a non-looping walk can emit."""

    # One state per (cell, entry edge) pair plus the entry from outside.
    return 3 * grid.rows * grid.cols + 1


def _open_border(grid: MazeGrid, row: int, col: int, border: Border, rule: HandRule) -> Border:
    if grid.is_closed(row, col):
        raise DegenerateMazeError(f"Cell ({row}, {col}) has no open edge")
    while grid.has_border(row, col, border):
        border = rotate_border(row, col, border, rule)
    return border


def walk(
    grid: MazeGrid,
    row: int,
    col: int,
    border: Border,
    rule: HandRule,
    *,
    max_steps: Optional[int] = None,
) -> Iterator[Coordinate]:
    """Yield the 1-indexed cells visited until the walker leaves the grid.

    ``border`` is the wall initially in hand, usually from :func:`start_border`.
    Raises :class:`WalkLimitError` once more than ``max_steps`` cells (default
    :func:`step_limit`) would be emitted.
    """

    limit = step_limit(grid) if max_steps is None else max_steps
    emitted = 0
    while True:
        if emitted >= limit:
            raise WalkLimitError(f"Walk from the maze boundary did not exit within {limit} steps")
        emitted += 1
        yield row, col

        border = _open_border(grid, row, col, border, rule)
        if border is Border.TOP_OR_BOTTOM:
            row += row_step(row, col)
        elif border is Border.LEFT:
            col -= 1
        else:
            col += 1

        if not grid.contains(row, col):
            logger.debug("Walker left the maze after %d cells", emitted)
            return

        border = rotate_border(row, col, flip_border(border), rule)


def trace(
    grid: MazeGrid,
    row: int,
    col: int,
    rule: HandRule,
    *,
    max_steps: Optional[int] = None,
) -> TraceResult:
    """Resolve the entry at ``(row, col)`` and walk until the walker exits."""

    border = start_border(grid, row, col, rule)
    if border is None:
        raise UnenterablePositionError(row, col)
    logger.debug("Entering (%d, %d) with %s in hand (%s)", row, col, border.name, rule.value)
    path = list(walk(grid, row, col, border, rule, max_steps=max_steps))
    return TraceResult(row=row, col=col, rule=rule, start_border=border, path=path)


__all__ = ["TraceResult", "step_limit", "walk", "trace"]
