"""
Forest level generation pipeline.

Stage 1 fills the grid with trees, places the start and end points and
carves clearings. Stage 2 smooths the forest with a cellular automaton.
Stage 3 weaves paths through every clearing to the end point and wraps the
result in a solid border.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numpy as np
import structlog

from .border import expand_border, translate_point
from .checkpoints import Checkpoints, place_checkpoints
from .forest_config import ForestConfig
from .grid import Cell, ForestGrid, Point
from .paths import weave_paths
from .patches import DEFAULT_ATTEMPTS_PER_PATCH, carve_patches
from .populate import populate_forest
from .smoothing import smooth_step
from ..utils.random import create_prng

logger = structlog.get_logger()


@dataclass(frozen=True, eq=False)
class ForestMap:
    """
    Finished forest level.

    All coordinates are in bordered space. ``cells`` is read-only and only
    holds OPEN and TREE; use ``marked_cells`` for a copy with the start and
    end markers set.
    """

    cells: np.ndarray
    border_size: int
    start: Point
    end: Point
    waypoints: List[Point]
    patch_centers: List[Point]
    seed: str
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self):
        self.cells.flags.writeable = False
        object.__setattr__(self, "height", self.cells.shape[0])
        object.__setattr__(self, "width", self.cells.shape[1])

    def cell(self, x: int, y: int) -> Cell:
        return Cell(int(self.cells[y, x]))

    def marked_cells(self) -> np.ndarray:
        """Copy of the grid with START and END written at the checkpoints."""
        cells = self.cells.copy()
        cells[self.start.y, self.start.x] = Cell.START
        cells[self.end.y, self.end.x] = Cell.END
        return cells

    def render_position(self, point: Point) -> Tuple[int, int]:
        """Origin-centred (x, z) position used for marker placement."""
        return point.x - self.width // 2, point.y - self.height // 2


class StageSnapshot(NamedTuple):
    """Grid state after a named pipeline stage."""
    name: str
    cells: np.ndarray


class ForestGenerator:
    """
    Runs one forest generation from a validated configuration.

    Each stage is a separate method so a caller can sequence (and pace)
    them itself; ``generate`` runs them all in order.
    """

    def __init__(self, config: ForestConfig, attempts_per_patch: int = DEFAULT_ATTEMPTS_PER_PATCH):
        """
        Initialize a generation run.

        Args:
            config: Generation parameters
            attempts_per_patch: Center draws allowed per requested patch

        Raises:
            ConfigurationError: The configuration is invalid
        """
        config.validate()
        self.config = config
        self.attempts_per_patch = attempts_per_patch
        self.reset()

    def reset(self) -> None:
        """Start a fresh run: new PRNG, empty grid and no placed points."""
        self.prng, self.seed = create_prng(self.config.seed, self.config.use_random_seed)

        self.grid = ForestGrid(self.config.width, self.config.height)
        self.checkpoints: Optional[Checkpoints] = None
        self.patch_centers: List[Point] = []
        self.visited: List[Point] = []
        self.smoothing_done = 0
        self.bordered = False

    # Stage 1

    def populate(self) -> None:
        populate_forest(self.grid, self.config.fill_percent, self.prng)

    def place_checkpoints(self) -> Checkpoints:
        self.checkpoints = place_checkpoints(self.grid, self.config.checkpoint_offset, self.prng)
        return self.checkpoints

    def carve_patches(self) -> List[Point]:
        self.patch_centers = carve_patches(
            self.grid,
            self._require_checkpoints(),
            self.config.num_patches,
            self.config.patch_radius,
            self.prng,
            max_attempts=self.config.num_patches * self.attempts_per_patch,
        )
        return self.patch_centers

    # Stage 2

    def smooth_step(self) -> None:
        self.grid = smooth_step(self.grid)
        self.smoothing_done += 1

    # Stage 3

    def weave_paths(self) -> List[Point]:
        checkpoints = self._require_checkpoints()
        self.visited = weave_paths(
            self.grid,
            checkpoints.start,
            checkpoints.end,
            self.patch_centers,
            self.config.segments,
            self.config.max_deviation,
            self.prng,
        )
        return self.visited

    def expand_border(self) -> None:
        self.grid = expand_border(self.grid, self.config.border_size)
        self.bordered = True

    def _require_checkpoints(self) -> Checkpoints:
        if self.checkpoints is None:
            raise RuntimeError("Checkpoints must be placed before this stage")
        return self.checkpoints

    def stages(self) -> Iterator[StageSnapshot]:
        """
        Run the pipeline, yielding a snapshot after every stage.

        Smoothing yields once per iteration. Every call starts from a fresh
        PRNG and grid, so a generator can be run again.
        """
        self.reset()

        logger.info(
            "Starting forest generation",
            width=self.config.width,
            height=self.config.height,
            seed=self.seed,
        )

        self.populate()
        yield self._snapshot("populate")
        self.place_checkpoints()
        yield self._snapshot("checkpoints")
        self.carve_patches()
        yield self._snapshot("patches")

        for _ in range(self.config.smoothening_iterations):
            self.smooth_step()
            yield self._snapshot("smooth")
        logger.info(
            "Forest smoothed",
            iterations=self.smoothing_done,
            trees=self.grid.count(Cell.TREE),
        )

        self.weave_paths()
        yield self._snapshot("paths")
        self.expand_border()
        yield self._snapshot("border")

    def _snapshot(self, name: str) -> StageSnapshot:
        return StageSnapshot(name, self.grid.cells.copy())

    def result(self) -> ForestMap:
        """Package the bordered grid and translated coordinates."""
        if not self.bordered:
            raise RuntimeError("Border must be added before taking the result")

        checkpoints = self._require_checkpoints()
        border = self.config.border_size
        forest = ForestMap(
            cells=self.grid.cells,
            border_size=border,
            start=translate_point(checkpoints.start, border),
            end=translate_point(checkpoints.end, border),
            waypoints=[translate_point(p, border) for p in self.visited],
            patch_centers=[translate_point(p, border) for p in self.patch_centers],
            seed=self.seed,
        )
        logger.info(
            "Forest generation complete",
            width=forest.width,
            height=forest.height,
            start=tuple(forest.start),
            end=tuple(forest.end),
            waypoints=len(forest.waypoints),
        )
        return forest

    def generate(self) -> ForestMap:
        """Run every stage and return the finished forest."""
        for _ in self.stages():
            pass
        return self.result()


def generate_forest(
    config: ForestConfig, attempts_per_patch: int = DEFAULT_ATTEMPTS_PER_PATCH
) -> ForestMap:
    """Generate a forest level from ``config``."""
    return ForestGenerator(config, attempts_per_patch=attempts_per_patch).generate()
