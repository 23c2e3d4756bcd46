"""Initial forest population."""

import structlog

from .alea_prng import AleaPRNG
from .grid import Cell, ForestGrid

logger = structlog.get_logger()


def populate_forest(grid: ForestGrid, fill_percent: int, prng: AleaPRNG) -> None:
    """
    Fill the grid with a random tree/open pattern.

    Edge cells are always trees. Every other cell draws once and becomes a
    tree when the draw in [0, 100) falls below ``fill_percent``. Cells are
    visited column by column (x outer, y inner).

    Args:
        grid: Grid to fill in place
        fill_percent: Tree probability in percent, 0-100
        prng: Run PRNG
    """
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.is_edge(x, y):
                grid.set(x, y, Cell.TREE)
            elif prng.next_int(0, 100) < fill_percent:
                grid.set(x, y, Cell.TREE)
            else:
                grid.set(x, y, Cell.OPEN)

    logger.info(
        "Forest populated",
        width=grid.width,
        height=grid.height,
        fill_percent=fill_percent,
        trees=grid.count(Cell.TREE),
    )
