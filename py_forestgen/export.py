"""
JSON export for generated forests.

Consumers (mesh builders, grid viewers) only need the cell rows, the
dimensions and the marker coordinates, so that is all that is written.
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog

from .core.forest_generator import ForestMap

logger = structlog.get_logger()


def forest_to_dict(forest: ForestMap, include_markers: bool = False) -> Dict[str, Any]:
    """
    Convert a forest to plain Python types.

    Args:
        forest: Generated forest
        include_markers: Write START/END values into the cell rows

    Returns:
        JSON-serialisable dict. ``cells`` is a list of rows, indexed [y][x].
    """
    cells = forest.marked_cells() if include_markers else forest.cells
    return {
        "width": forest.width,
        "height": forest.height,
        "border_size": forest.border_size,
        "seed": forest.seed,
        "start": list(forest.start),
        "end": list(forest.end),
        "waypoints": [list(p) for p in forest.waypoints],
        "patch_centers": [list(p) for p in forest.patch_centers],
        "cells": cells.tolist(),
    }


def save_forest_json(
    forest: ForestMap, path: Union[str, Path], include_markers: bool = False
) -> Path:
    """Write a forest to ``path`` as JSON and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(forest_to_dict(forest, include_markers=include_markers), f)

    logger.info("Forest exported", path=str(path), width=forest.width, height=forest.height)
    return path
