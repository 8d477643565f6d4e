"""FastAPI application — soil nail wall layout API."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from soilnail import (
    SAMPLE_TERRAIN,
    calculate_quantities,
    generate_layout,
    get_prescriptive_params,
    recommend_for_terrain,
    sort_terrain,
    terrain_stats,
    validate_design,
)
from soilnail.types import NailParameters

from .builder import (
    layout_output,
    stats_output,
    suggestion_output,
    to_params,
    to_terrain,
)
from .schemas import (
    LayoutOutput,
    LayoutRequest,
    NailParametersInput,
    TerrainPointInput,
    TerrainRecommendationOutput,
    TerrainRequest,
    ValidateOutput,
    ValidateRequest,
)

logging.basicConfig(
    level=os.getenv("SOILNAIL_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Soil Nail Layout API", version="0.1.0")


def _cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _params_or_422(data: NailParametersInput) -> NailParameters:
    try:
        return to_params(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


# ── Layout + quantities ───────────────────────────────────────


@app.post("/api/layout", response_model=LayoutOutput)
def layout(data: LayoutRequest) -> LayoutOutput:
    """Generate the nail layout and material quantities for a profile.

    Terrain problems (too few points, too flat, offsets too large) come
    back as ``error`` on a 200 response.
    """
    params = _params_or_422(data.params)
    terrain = to_terrain(data.terrain)
    if data.sortTerrain:
        terrain = sort_terrain(terrain)

    result = generate_layout(params, terrain)
    if result.error is not None:
        logger.info("Layout request rejected: %s", result.error)
    return layout_output(result, calculate_quantities(result), terrain)


# ── Design checks ─────────────────────────────────────────────


@app.post("/api/validate", response_model=ValidateOutput)
def validate(data: ValidateRequest) -> ValidateOutput:
    """Check parameters against the prescriptive design ranges."""
    params = _params_or_422(data.params)
    warnings = validate_design(params, data.slopeHeight)
    return ValidateOutput(warnings=warnings, ok=not warnings)


@app.get("/api/prescriptive", response_model=NailParametersInput)
def prescriptive(
    slope_height: float, max_slope_angle: float | None = None
) -> NailParametersInput:
    """Suggested parameters for a wall height (and optional steepest angle)."""
    if slope_height < 0:
        raise HTTPException(status_code=422, detail="slope_height must not be negative")
    return suggestion_output(get_prescriptive_params(slope_height, max_slope_angle))


@app.post("/api/prescriptive/terrain", response_model=TerrainRecommendationOutput)
def prescriptive_for_terrain(data: TerrainRequest) -> TerrainRecommendationOutput:
    """Profile statistics plus the suggested parameters and their warnings."""
    terrain = sort_terrain(to_terrain(data.terrain))
    if len(terrain) < 2:
        raise HTTPException(
            status_code=422, detail="At least 2 terrain points are required"
        )

    stats = terrain_stats(terrain)
    suggested = recommend_for_terrain(terrain)
    return TerrainRecommendationOutput(
        stats=stats_output(stats),
        params=suggestion_output(suggested),
        warnings=validate_design(NailParameters(**suggested), stats.slope_height),
    )


# ── Terrain ───────────────────────────────────────────────────


@app.get("/api/terrain/sample", response_model=list[TerrainPointInput])
def terrain_sample() -> list[TerrainPointInput]:
    """Demonstration ground profile."""
    return [TerrainPointInput(x=p.x, y=p.y) for p in SAMPLE_TERRAIN]


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}
