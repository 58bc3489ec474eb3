"""Draw triangular mazes and traced paths with Pillow."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .base import Coordinate, PathLike
from .borders import Border, Orientation, orientation
from .grid import MazeGrid

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

BACKGROUND_COLOR = (255, 255, 255)
CELL_COLOR = (245, 245, 235)
CLOSED_CELL_COLOR = (160, 160, 160)
WALL_COLOR = (0, 0, 0)
PATH_COLOR = (220, 30, 30)
START_COLOR = (40, 180, 80)


class MazeRenderer:
    """Render a :class:`MazeGrid` as a strip of alternating triangles per row."""

    def __init__(
        self,
        *,
        cell_size: int = 48,
        line_width: int = 3,
        margin: Optional[int] = None,
        path_width: Optional[int] = None,
    ) -> None:
        if cell_size < 4:
            raise ValueError("cell_size must be at least 4 pixels")
        if line_width < 1:
            raise ValueError("line_width must be positive")
        self.cell_size = cell_size
        self.cell_height = cell_size * math.sqrt(3) / 2
        self.line_width = line_width
        self.margin = margin if margin is not None else cell_size // 2
        self.path_width = path_width if path_width is not None else max(2, cell_size // 8)

    # ------------------------------------------------------------------

    def canvas_size(self, grid: MazeGrid) -> Tuple[int, int]:
        width = 2 * self.margin + (grid.cols + 1) * self.cell_size / 2
        height = 2 * self.margin + grid.rows * self.cell_height
        return int(math.ceil(width)), int(math.ceil(height))

    def cell_vertices(self, row: int, col: int) -> List[Point]:
        """Corners of the 1-indexed cell: left and right end of the flat edge, then the apex."""

        x0 = self.margin + (col - 1) * self.cell_size / 2
        y0 = self.margin + (row - 1) * self.cell_height
        x1 = x0 + self.cell_size
        xm = x0 + self.cell_size / 2
        y1 = y0 + self.cell_height
        if orientation(row, col) is Orientation.POINTS_DOWN:
            return [(x0, y0), (x1, y0), (xm, y1)]
        return [(x0, y1), (x1, y1), (xm, y0)]

    def cell_center(self, row: int, col: int) -> Point:
        vertices = self.cell_vertices(row, col)
        return (
            sum(x for x, _ in vertices) / 3,
            sum(y for _, y in vertices) / 3,
        )

    def edge_segments(self, row: int, col: int) -> Dict[Border, Tuple[Point, Point]]:
        flat_left, flat_right, apex = self.cell_vertices(row, col)
        return {
            Border.LEFT: (flat_left, apex),
            Border.RIGHT: (flat_right, apex),
            Border.TOP_OR_BOTTOM: (flat_left, flat_right),
        }

    # ------------------------------------------------------------------

    def render(self, grid: MazeGrid, path: Optional[Sequence[Coordinate]] = None) -> Image.Image:
        canvas = Image.new("RGB", self.canvas_size(grid), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(canvas)

        for row in range(1, grid.rows + 1):
            for col in range(1, grid.cols + 1):
                fill = CLOSED_CELL_COLOR if grid.is_closed(row, col) else CELL_COLOR
                draw.polygon(self.cell_vertices(row, col), fill=fill)

        for row in range(1, grid.rows + 1):
            for col in range(1, grid.cols + 1):
                for border, segment in self.edge_segments(row, col).items():
                    if grid.has_border(row, col, border):
                        draw.line(segment, fill=WALL_COLOR, width=self.line_width)

        if path:
            self._draw_path(draw, path)
        return canvas

    def save(
        self,
        grid: MazeGrid,
        destination: PathLike,
        path: Optional[Sequence[Coordinate]] = None,
    ) -> Path:
        target = Path(destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, path).save(target)
        logger.info("Saved maze image to %s", target)
        return target

    def _draw_path(self, draw: ImageDraw.ImageDraw, path: Sequence[Coordinate]) -> None:
        points = [self.cell_center(row, col) for row, col in path]
        if len(points) >= 2:
            draw.line(points, fill=PATH_COLOR, width=self.path_width, joint="curve")
        radius = self.path_width
        for (x, y), color in ((points[-1], PATH_COLOR), (points[0], START_COLOR)):
            draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)


__all__ = ["MazeRenderer"]
