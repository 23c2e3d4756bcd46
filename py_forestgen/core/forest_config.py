"""Forest generation parameters."""

from dataclasses import dataclass
from typing import List

import structlog

from .exceptions import ConfigurationError

logger = structlog.get_logger()

# End points and patch centers are drawn from [2, dim - 2); the end quadrant
# ranges stay non-empty only from this size up.
MIN_DIMENSION = 4


@dataclass(frozen=True)
class ForestConfig:
    """Configuration for one forest generation run."""

    width: int
    height: int
    border_size: int = 1
    checkpoint_offset: int = 2
    seed: str = "forest"
    use_random_seed: bool = False
    fill_percent: int = 45
    num_patches: int = 5
    patch_radius: int = 3
    smoothening_iterations: int = 5
    max_deviation: float = 5.0
    segments: int = 4

    def errors(self) -> List[str]:
        """List every problem with this configuration."""
        problems = []

        if self.width <= 0:
            problems.append(f"width must be positive, got {self.width}")
        if self.height <= 0:
            problems.append(f"height must be positive, got {self.height}")
        if self.patch_radius <= 0:
            problems.append(f"patch_radius must be positive, got {self.patch_radius}")
        if not 0 <= self.fill_percent <= 100:
            problems.append(f"fill_percent must be within 0-100, got {self.fill_percent}")
        if self.border_size < 0:
            problems.append(f"border_size must not be negative, got {self.border_size}")
        if self.num_patches < 0:
            problems.append(f"num_patches must not be negative, got {self.num_patches}")
        if self.smoothening_iterations < 0:
            problems.append(
                f"smoothening_iterations must not be negative, got {self.smoothening_iterations}"
            )
        if self.segments < 0:
            problems.append(f"segments must not be negative, got {self.segments}")
        if self.max_deviation < 0:
            problems.append(f"max_deviation must not be negative, got {self.max_deviation}")
        if self.checkpoint_offset < 0:
            problems.append(
                f"checkpoint_offset must not be negative, got {self.checkpoint_offset}"
            )

        if problems:
            return problems

        # Start point ranges are [offset, dim - offset)
        if self.checkpoint_offset * 2 >= self.width:
            problems.append(
                f"checkpoint_offset {self.checkpoint_offset} leaves no start range "
                f"along width {self.width}"
            )
        if self.checkpoint_offset * 2 >= self.height:
            problems.append(
                f"checkpoint_offset {self.checkpoint_offset} leaves no start range "
                f"along height {self.height}"
            )
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            problems.append(
                f"grid must be at least {MIN_DIMENSION}x{MIN_DIMENSION} to place "
                f"the end point, got {self.width}x{self.height}"
            )
        return problems

    def validate(self) -> None:
        """
        Check the configuration before any generation work.

        Raises:
            ConfigurationError: Listing every problem found
        """
        problems = self.errors()
        if problems:
            logger.error("Invalid forest configuration", problems=problems)
            raise ConfigurationError("; ".join(problems))
