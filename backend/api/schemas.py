"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ── Request Models ────────────────────────────────────────────


class TerrainPointInput(BaseModel):
    x: float  # metres
    y: float  # metres


class NailParametersInput(BaseModel):
    nailLength: float = Field(6.0, gt=0)  # m
    inclination: float = 15.0  # degrees below horizontal
    barDiameter: float = Field(25.0, gt=0)  # mm
    drillDiameter: float = Field(100.0, gt=0)  # mm
    hSpacing: float = Field(1.5, gt=0)  # m
    vSpacing: float = Field(1.5, gt=0)  # m
    topOffset: float = 0.5  # m
    bottomOffset: float = 0.5  # m
    patternType: Literal["rectangular", "staggered"] = "rectangular"
    wallExtent: float = Field(10.0, ge=0)  # m
    plateSize: float = 200.0  # mm
    plateThickness: float = 15.0  # mm
    facingType: str = "shotcrete"
    steelGrade: float = 500.0  # MPa
    groutStrength: float = 30.0  # MPa
    corrosionProtection: str = "encapsulated"
    centralizers: bool = True
    centralizerSpacing: float = 1.0  # m
    variableLength: bool = False


class LayoutRequest(BaseModel):
    params: NailParametersInput = NailParametersInput()
    terrain: list[TerrainPointInput]
    # Sort the profile by x before use (the core expects sorted input)
    sortTerrain: bool = False


class ValidateRequest(BaseModel):
    params: NailParametersInput
    slopeHeight: float


class TerrainRequest(BaseModel):
    terrain: list[TerrainPointInput]


# ── Response Models ───────────────────────────────────────────


class Point2DOutput(BaseModel):
    x: float
    y: float


class Point3DOutput(BaseModel):
    x: float
    y: float
    z: float


class RowOutput(BaseModel):
    rowNumber: int
    elevation: float
    faceX: float
    faceAngle: float  # deg — ground slope at the row elevation
    nailLength: float
    inclination: float
    start: Point2DOutput
    end: Point2DOutput


class NailOutput(BaseModel):
    id: str
    row: int
    col: int
    head: Point3DOutput
    tip: Point3DOutput
    length: float
    inclination: float
    elevation: float
    barDiameter: float
    drillDiameter: float


class QuantitiesOutput(BaseModel):
    totalNails: int
    totalRows: int
    nailsPerRow: int
    totalDrillLength: float  # m
    totalSteelWeight: float  # kg
    totalGroutVolume: float  # m³
    totalPlates: int
    totalCentralizers: int


class LayoutOutput(BaseModel):
    nails: list[NailOutput] = []
    rows: list[RowOutput] = []
    nailsPerRow: int
    params: NailParametersInput
    slopeHeight: float
    warnings: list[str] = []
    error: str | None = None
    errorKind: str | None = None
    quantities: QuantitiesOutput | None = None


class ValidateOutput(BaseModel):
    warnings: list[str]
    ok: bool


class TerrainStatsOutput(BaseModel):
    pointCount: int
    profileLength: float
    slopeHeight: float
    averageAngle: float
    maxSegmentAngle: float


class TerrainRecommendationOutput(BaseModel):
    stats: TerrainStatsOutput
    params: NailParametersInput
    warnings: list[str] = []
