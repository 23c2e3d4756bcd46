"""Solid tree border around the finished forest."""

import numpy as np
import structlog

from .grid import Cell, ForestGrid, Point

logger = structlog.get_logger()


def expand_border(grid: ForestGrid, border_size: int) -> ForestGrid:
    """
    Return a new grid with ``border_size`` rows/columns of trees on every side.

    The existing cells are copied into the centre.
    """
    cells = np.full(
        (grid.height + border_size * 2, grid.width + border_size * 2),
        int(Cell.TREE),
        dtype=np.uint8,
    )
    cells[border_size:border_size + grid.height, border_size:border_size + grid.width] = grid.cells

    bordered = ForestGrid.from_array(cells)
    logger.info(
        "Border added",
        border_size=border_size,
        width=bordered.width,
        height=bordered.height,
    )
    return bordered


def translate_point(point: Point, border_size: int) -> Point:
    """Move an interior point into bordered coordinates."""
    return Point(point.x + border_size, point.y + border_size)
