"""Parse the textual maze format into a :class:`MazeGrid`.

The first line declares ``rows cols``. Every following line contributes one
row: each character between ``0`` and ``7`` is a cell value, anything else is
ignored. Lines without any such character are skipped.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from .base import MalformedMazeError, PathLike
from .grid import MazeGrid

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"^\s*(\d+)\s+(\d+)")
_CELL_DIGITS = frozenset("01234567")


def _parse_header(line: str) -> tuple:
    match = _HEADER.match(line)
    if match is None:
        raise MalformedMazeError(f"Expected '<rows> <cols>' on the first line, got {line.strip()!r}")
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows < 1 or cols < 1:
        raise MalformedMazeError(f"Maze dimensions must be positive, got {rows}x{cols}")
    return rows, cols


def parse_maze(text: str) -> MazeGrid:
    """Build a grid from maze text, raising :class:`MalformedMazeError` on any mismatch."""

    lines = text.splitlines()
    if not lines:
        raise MalformedMazeError("Maze text is empty")
    rows, cols = _parse_header(lines[0])

    data: List[List[int]] = []
    for line_number, line in enumerate(lines[1:], start=2):
        values = [int(char) for char in line if char in _CELL_DIGITS]
        if not values:
            continue
        if len(values) != cols:
            raise MalformedMazeError(
                f"Line {line_number} has {len(values)} cells, expected {cols}"
            )
        data.append(values)

    if len(data) != rows:
        raise MalformedMazeError(f"Maze declares {rows} rows but {len(data)} were given")

    logger.debug("Parsed %dx%d maze", rows, cols)
    return MazeGrid.from_rows(data)


def load_maze(path: PathLike) -> MazeGrid:
    """Read and parse a maze file."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedMazeError(f"Cannot read maze file {source}: {exc}") from exc
    return parse_maze(text)


__all__ = ["parse_maze", "load_maze"]
