"""Circular clearings ("patches") carved into the forest."""

import math
from typing import List, Optional

import structlog

from .alea_prng import AleaPRNG
from .checkpoints import Checkpoints
from .exceptions import PatchPlacementExhausted
from .grid import ForestGrid, Point

logger = structlog.get_logger()

# Patch centers stay this far inside the grid
PATCH_INSET = 2

# Minimum gap, on top of the patch radius, between a patch center and a checkpoint
CHECKPOINT_MARGIN = 2

DEFAULT_ATTEMPTS_PER_PATCH = 100


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two grid points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def is_valid_patch_center(center: Point, checkpoints: Checkpoints, patch_radius: int) -> bool:
    """True when ``center`` keeps clear of both checkpoints."""
    min_distance = patch_radius + CHECKPOINT_MARGIN
    return (
        distance(center, checkpoints.start) >= min_distance
        and distance(center, checkpoints.end) >= min_distance
    )


def carve_patches(
    grid: ForestGrid,
    checkpoints: Checkpoints,
    num_patches: int,
    patch_radius: int,
    prng: AleaPRNG,
    max_attempts: Optional[int] = None,
) -> List[Point]:
    """
    Carve ``num_patches`` open discs into the grid.

    Centers too close to a checkpoint are rejected and redrawn without
    counting toward ``num_patches``. Patches may overlap each other.

    Args:
        grid: Grid to carve in place
        checkpoints: Start and end points to keep clear of
        num_patches: Number of patches to place
        patch_radius: Disc radius
        prng: Run PRNG
        max_attempts: Upper bound on center draws. Defaults to
            ``num_patches * DEFAULT_ATTEMPTS_PER_PATCH``.

    Returns:
        Accepted patch centers in placement order

    Raises:
        PatchPlacementExhausted: The attempt budget ran out
    """
    if max_attempts is None:
        max_attempts = num_patches * DEFAULT_ATTEMPTS_PER_PATCH

    centers: List[Point] = []
    attempts = 0

    while len(centers) < num_patches:
        if attempts >= max_attempts:
            logger.error(
                "Patch placement exhausted",
                placed=len(centers),
                requested=num_patches,
                attempts=attempts,
                patch_radius=patch_radius,
            )
            raise PatchPlacementExhausted(len(centers), num_patches, attempts)
        attempts += 1

        x = prng.next_int(PATCH_INSET, grid.width - PATCH_INSET)
        y = prng.next_int(PATCH_INSET, grid.height - PATCH_INSET)
        center = Point(x, y)

        if not is_valid_patch_center(center, checkpoints, patch_radius):
            continue

        centers.append(center)
        grid.clear_disc(center, patch_radius)

    logger.info(
        "Patches carved",
        count=len(centers),
        attempts=attempts,
        patch_radius=patch_radius,
    )
    return centers
