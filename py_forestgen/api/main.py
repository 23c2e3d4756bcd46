"""FastAPI main application."""

from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.exceptions import ConfigurationError, PatchPlacementExhausted
from ..core.forest_config import ForestConfig
from ..core.forest_generator import generate_forest
from ..export import forest_to_dict
from ..logging_config import configure_logging

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Forest Level Generator API",
    description="Procedural forest level generation",
    version=__version__,
)


# Request/Response models
class ForestGenerationRequest(BaseModel):
    """Request to generate a forest level."""

    width: int = Field(..., gt=0, le=settings.max_grid_width, description="Forest width in cells")
    height: int = Field(..., gt=0, le=settings.max_grid_height, description="Forest height in cells")
    border_size: int = Field(1, ge=0, le=64, description="Tree border thickness")
    checkpoint_offset: int = Field(2, ge=0, description="Start point distance from its edge")
    seed: Optional[str] = Field(None, description="Seed string; a time-derived seed is used when omitted")
    fill_percent: int = Field(45, ge=0, le=100, description="Initial tree percentage")
    num_patches: int = Field(5, ge=0, le=256, description="Number of clearings")
    patch_radius: int = Field(3, gt=0, description="Clearing radius")
    smoothening_iterations: int = Field(5, ge=0, le=50, description="Automaton iterations")
    max_deviation: float = Field(5.0, ge=0, description="Largest sideways path offset")
    segments: int = Field(4, ge=0, le=10, description="Curve recursion depth")
    include_markers: bool = Field(False, description="Write start/end markers into the cells")

    def to_config(self) -> ForestConfig:
        return ForestConfig(
            width=self.width,
            height=self.height,
            border_size=self.border_size,
            checkpoint_offset=self.checkpoint_offset,
            seed=self.seed or "",
            use_random_seed=self.seed is None,
            fill_percent=self.fill_percent,
            num_patches=self.num_patches,
            patch_radius=self.patch_radius,
            smoothening_iterations=self.smoothening_iterations,
            max_deviation=self.max_deviation,
            segments=self.segments,
        )


class ForestResponse(BaseModel):
    """Generated forest level."""

    seed: str
    width: int
    height: int
    border_size: int
    start: Tuple[int, int]
    end: Tuple[int, int]
    waypoints: List[Tuple[int, int]]
    patch_centers: List[Tuple[int, int]]
    cells: List[List[int]]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Forest Level Generator API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/forests/generate", response_model=ForestResponse)
def generate(request: ForestGenerationRequest):
    """Generate a forest level synchronously."""
    logger.info("Forest generation requested", request=request.model_dump())

    try:
        forest = generate_forest(
            request.to_config(),
            attempts_per_patch=settings.patch_attempts_per_patch,
        )
    except ConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PatchPlacementExhausted as e:
        raise HTTPException(status_code=409, detail=str(e))

    return ForestResponse(**forest_to_dict(forest, include_markers=request.include_markers))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
