"""Border flags, hand rules and the orientation geometry of triangular cells.

Each cell stores its walls in the three low bits of a byte. Bit 2 names the
horizontal edge of the triangle, which is the top edge for cells whose
1-indexed ``row + col`` is even (the triangle points down) and the bottom
edge otherwise (the triangle points up).
"""

from __future__ import annotations

import enum

BORDER_MASK = 0b111


class Border(enum.IntFlag):
    LEFT = 0b001
    RIGHT = 0b010
    TOP_OR_BOTTOM = 0b100


class HandRule(enum.Enum):
    LEFT_HAND = "left"
    RIGHT_HAND = "right"


class Orientation(enum.Enum):
    POINTS_DOWN = "down"
    POINTS_UP = "up"


def orientation(row: int, col: int) -> Orientation:
    """Return the orientation of a cell; valid for 0- and 1-indexed coordinates alike."""

    return Orientation.POINTS_DOWN if (row + col) % 2 == 0 else Orientation.POINTS_UP


def _turns_forward(row: int, col: int, rule: HandRule) -> bool:
    points_down = orientation(row, col) is Orientation.POINTS_DOWN
    return points_down if rule is HandRule.RIGHT_HAND else not points_down


def rotate_border(row: int, col: int, border: Border, rule: HandRule) -> Border:
    """Move the tracked border one edge around the cell in the hand-rule direction."""

    if _turns_forward(row, col, rule):
        # LEFT -> RIGHT -> TOP_OR_BOTTOM -> LEFT
        return Border.LEFT if border is Border.TOP_OR_BOTTOM else Border(border << 1)
    # RIGHT -> LEFT -> TOP_OR_BOTTOM -> RIGHT
    return Border.TOP_OR_BOTTOM if border is Border.LEFT else Border(border >> 1)


def flip_border(border: Border) -> Border:
    """Return the same edge as seen from the neighbouring cell."""

    if border is Border.LEFT:
        return Border.RIGHT
    if border is Border.RIGHT:
        return Border.LEFT
    return border


def row_step(row: int, col: int) -> int:
    """Row offset of the neighbour sharing the horizontal edge of a cell."""

    return -1 if orientation(row, col) is Orientation.POINTS_DOWN else 1


__all__ = [
    "BORDER_MASK",
    "Border",
    "HandRule",
    "Orientation",
    "orientation",
    "rotate_border",
    "flip_border",
    "row_step",
]
