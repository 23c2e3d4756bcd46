"""
Path weaving between checkpoints and patches.

Paths start at the start point and greedily visit the nearest remaining
waypoint (patch centers, then the end point) until none are left. Each
connection is a midpoint-displacement curve that is rasterized into the
grid and widened by one random neighbour per step.
"""

import math
from typing import List, Sequence, Tuple

import structlog

from .alea_prng import AleaPRNG
from .grid import Cell, ForestGrid, Point
from .patches import distance

logger = structlog.get_logger()

PathPoint = Tuple[float, float]

# Widening candidates, in draw order
NEIGHBOUR_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def nearest_waypoint(current: Point, waypoints: Sequence[Point]) -> int:
    """
    Index of the waypoint closest to ``current``.

    Ties go to the earliest waypoint in the sequence.
    """
    best_index = 0
    best_distance = math.inf
    for index, waypoint in enumerate(waypoints):
        d = distance(current, waypoint)
        if d < best_distance:
            best_distance = d
            best_index = index
    return best_index


def order_waypoints(start: Point, waypoints: Sequence[Point]) -> List[Point]:
    """Greedy nearest-neighbour visit order from ``start``."""
    remaining = list(waypoints)
    order: List[Point] = []
    current = start
    while remaining:
        current = remaining.pop(nearest_waypoint(current, remaining))
        order.append(current)
    return order


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def generate_curved_path(
    start: PathPoint,
    end: PathPoint,
    segments: int,
    max_deviation: float,
    width: int,
    height: int,
    prng: AleaPRNG,
    path_points: List[PathPoint],
) -> None:
    """
    Append a midpoint-displacement curve from ``start`` to ``end``.

    The midpoint is pushed sideways by up to ``max_deviation`` and clamped
    one cell inside the grid, then both halves recurse with half the
    deviation. A zero-length segment has no direction; its deviation is
    still drawn but not applied.

    Args:
        start: Curve start
        end: Curve end
        segments: Recursion depth left
        max_deviation: Largest sideways offset at this depth
        width: Grid width
        height: Grid height
        prng: Run PRNG
        path_points: Output list, appended to in curve order
    """
    if segments <= 0:
        if not path_points or path_points[-1] != start:
            path_points.append(start)
        path_points.append(end)
        return

    sx, sy = start
    ex, ey = end
    mx = (sx + ex) / 2
    my = (sy + ey) / 2

    dx = ex - sx
    dy = ey - sy
    length = math.hypot(dx, dy)
    deviation = (prng.next_double() * 2 - 1) * max_deviation

    if length > 0:
        # Perpendicular of the unit direction
        mx += (-dy / length) * deviation
        my += (dx / length) * deviation

    midpoint = (_clamp(mx, 1, width - 2), _clamp(my, 1, height - 2))

    generate_curved_path(start, midpoint, segments - 1, max_deviation * 0.5,
                         width, height, prng, path_points)
    generate_curved_path(midpoint, end, segments - 1, max_deviation * 0.5,
                         width, height, prng, path_points)


def _open_cell(grid: ForestGrid, x: int, y: int, prng: AleaPRNG) -> None:
    """Open a path cell and one random axis neighbour."""
    grid.set(x, y, Cell.OPEN)
    nx, ny = NEIGHBOUR_OFFSETS[prng.next_int(0, len(NEIGHBOUR_OFFSETS))]
    if grid.in_bounds(x + nx, y + ny):
        grid.set(x + nx, y + ny, Cell.OPEN)


def rasterize_path(grid: ForestGrid, path_points: Sequence[PathPoint], prng: AleaPRNG) -> List[Point]:
    """
    Carve straight runs between consecutive curve points.

    Diagonal steps also open the corner cell so the carved path stays
    4-connected.

    Returns:
        Path cells in carve order, without widening cells
    """
    carved: List[Point] = []
    for (sx, sy), (ex, ey) in zip(path_points, path_points[1:]):
        steps = max(abs(int(ex - sx)), abs(int(ey - sy))) + 1
        for step in range(steps + 1):
            t = step / steps
            x = round(sx + (ex - sx) * t)
            y = round(sy + (ey - sy) * t)
            if not grid.in_bounds(x, y):
                continue

            # Corner fill on diagonal steps, on top of the one-neighbour
            # widening, keeps the path 4-connected
            if carved:
                px, py = carved[-1]
                if x != px and y != py:
                    grid.set(x, py, Cell.OPEN)

            _open_cell(grid, x, y, prng)
            carved.append(Point(x, y))
    return carved


def draw_path(
    grid: ForestGrid,
    start: Point,
    end: Point,
    segments: int,
    max_deviation: float,
    prng: AleaPRNG,
) -> List[PathPoint]:
    """Curve from ``start`` to ``end`` and carve it. Returns the curve points."""
    path_points: List[PathPoint] = []
    generate_curved_path(
        (float(start.x), float(start.y)),
        (float(end.x), float(end.y)),
        segments,
        max_deviation,
        grid.width,
        grid.height,
        prng,
        path_points,
    )
    rasterize_path(grid, path_points, prng)
    return path_points


def weave_paths(
    grid: ForestGrid,
    start: Point,
    end: Point,
    patch_centers: Sequence[Point],
    segments: int,
    max_deviation: float,
    prng: AleaPRNG,
) -> List[Point]:
    """
    Connect the start point to every patch center and the end point.

    Waypoints are consumed nearest-first; each one is connected to the point
    visited before it.

    Returns:
        Waypoints in visit order
    """
    visited: List[Point] = []
    current = start

    for target in order_waypoints(start, list(patch_centers) + [end]):
        path_points = draw_path(grid, current, target, segments, max_deviation, prng)
        logger.debug(
            "Path drawn",
            source=tuple(current),
            target=tuple(target),
            curve_points=len(path_points),
        )
        visited.append(target)
        current = target

    logger.info("Paths woven", waypoints=len(visited))
    return visited
