"""Start and end point placement."""

from typing import NamedTuple

import structlog

from .alea_prng import AleaPRNG
from .grid import ForestGrid, Point

logger = structlog.get_logger()

# Radius of the clearing carved around each checkpoint
CHECKPOINT_CLEAR_RADIUS = 3

# Distance kept between the end point and the outer edge
END_POINT_INSET = 2

EDGE_LEFT, EDGE_RIGHT, EDGE_TOP, EDGE_BOTTOM = range(4)


class Checkpoints(NamedTuple):
    """Start and end of the level."""
    start: Point
    end: Point


def pick_start_point(width: int, height: int, offset: int, prng: AleaPRNG) -> Point:
    """Pick a start point on a random edge, ``offset`` cells in from it."""
    edge = prng.next_int(0, 4)

    if edge == EDGE_LEFT:
        return Point(offset, prng.next_int(offset, height - offset))
    if edge == EDGE_RIGHT:
        return Point(width - 1 - offset, prng.next_int(offset, height - offset))
    if edge == EDGE_TOP:
        return Point(prng.next_int(offset, width - offset), height - 1 - offset)
    return Point(prng.next_int(offset, width - offset), offset)


def pick_end_point(width: int, height: int, start: Point, prng: AleaPRNG) -> Point:
    """
    Pick an end point in the quadrant diagonally opposite the start.

    The quadrant is inset by ``END_POINT_INSET`` from the outer edges.
    """
    is_left = start.x < width // 2
    is_bottom = start.y < height // 2

    if is_left:
        x = prng.next_int(width // 2, width - END_POINT_INSET)
    else:
        x = prng.next_int(END_POINT_INSET, width // 2)

    if is_bottom:
        y = prng.next_int(height // 2, height - END_POINT_INSET)
    else:
        y = prng.next_int(END_POINT_INSET, height // 2)

    return Point(x, y)


def place_checkpoints(grid: ForestGrid, offset: int, prng: AleaPRNG) -> Checkpoints:
    """
    Choose start and end points and clear space around them.

    Marker values are not written to the grid; callers keep the returned
    coordinates instead.
    """
    start = pick_start_point(grid.width, grid.height, offset, prng)
    end = pick_end_point(grid.width, grid.height, start, prng)

    grid.clear_disc(start, CHECKPOINT_CLEAR_RADIUS)
    grid.clear_disc(end, CHECKPOINT_CLEAR_RADIUS)

    logger.info("Checkpoints placed", start=tuple(start), end=tuple(end))
    return Checkpoints(start, end)
