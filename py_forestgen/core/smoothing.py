"""
Cellular automaton smoothing.

Each step counts tree neighbours over the previous grid and writes the
result into a new one, so no cell sees a neighbour that was already updated.
"""

import numpy as np
import structlog
from scipy import ndimage

from .grid import Cell, ForestGrid

logger = structlog.get_logger()

# A cell with more tree neighbours than this becomes a tree
TREE_THRESHOLD = 4

# A cell with fewer tree neighbours than this becomes open
OPEN_THRESHOLD = 3

# 8-neighbourhood, centre excluded
NEIGHBOUR_KERNEL = np.array(
    [[1, 1, 1],
     [1, 0, 1],
     [1, 1, 1]],
    dtype=np.uint8,
)


def count_tree_neighbours(grid: ForestGrid) -> np.ndarray:
    """
    Count tree cells around every cell.

    Neighbours outside the grid count as trees.

    Returns:
        Array of shape (height, width) with counts 0-8
    """
    trees = (grid.cells == Cell.TREE).astype(np.uint8)
    return ndimage.convolve(trees, NEIGHBOUR_KERNEL, mode="constant", cval=1)


def smooth_step(grid: ForestGrid) -> ForestGrid:
    """
    Apply one automaton iteration and return a new grid.

    More than 4 tree neighbours makes a tree, fewer than 3 makes an open
    cell, 3 or 4 leaves the cell as it was.
    """
    counts = count_tree_neighbours(grid)
    cells = grid.cells.copy()
    cells[counts > TREE_THRESHOLD] = Cell.TREE
    cells[counts < OPEN_THRESHOLD] = Cell.OPEN
    smoothed = ForestGrid.from_array(cells)
    logger.debug("Smoothing step", trees=smoothed.count(Cell.TREE))
    return smoothed

