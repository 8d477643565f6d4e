"""Converts between API schemas and soilnail value types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from soilnail import (
    Layout,
    NailParameters,
    Quantities,
    TerrainPoint,
    TerrainStats,
)
from soilnail.terrain import face_angle_at_elevation

from .schemas import (
    LayoutOutput,
    NailOutput,
    NailParametersInput,
    Point2DOutput,
    Point3DOutput,
    QuantitiesOutput,
    RowOutput,
    TerrainPointInput,
    TerrainStatsOutput,
)

# NailParameters field → API (camelCase) name
_PARAM_NAMES: dict[str, str] = {
    "nail_length": "nailLength",
    "inclination": "inclination",
    "bar_diameter": "barDiameter",
    "drill_diameter": "drillDiameter",
    "h_spacing": "hSpacing",
    "v_spacing": "vSpacing",
    "top_offset": "topOffset",
    "bottom_offset": "bottomOffset",
    "pattern_type": "patternType",
    "wall_extent": "wallExtent",
    "plate_size": "plateSize",
    "plate_thickness": "plateThickness",
    "facing_type": "facingType",
    "steel_grade": "steelGrade",
    "grout_strength": "groutStrength",
    "corrosion_protection": "corrosionProtection",
    "centralizers": "centralizers",
    "centralizer_spacing": "centralizerSpacing",
    "variable_length": "variableLength",
}


# ── Input conversion ──────────────────────────────────────────


def to_params(data: NailParametersInput) -> NailParameters:
    raw = data.model_dump()
    return NailParameters(**{f: raw[api] for f, api in _PARAM_NAMES.items()})


def to_terrain(points: list[TerrainPointInput]) -> list[TerrainPoint]:
    return [TerrainPoint(x=p.x, y=p.y) for p in points]


# ── Output conversion ─────────────────────────────────────────


def params_output(params: NailParameters) -> NailParametersInput:
    out: dict[str, Any] = {}
    for f in fields(params):
        value = getattr(params, f.name)
        if f.name == "pattern_type":
            value = value.value
        out[_PARAM_NAMES[f.name]] = value
    return NailParametersInput(**out)


def suggestion_output(suggested: dict[str, Any]) -> NailParametersInput:
    """Merge a partial suggestion over the default parameter set."""
    return params_output(NailParameters(**suggested))


def quantities_output(q: Quantities) -> QuantitiesOutput:
    return QuantitiesOutput(
        totalNails=q.total_nails,
        totalRows=q.total_rows,
        nailsPerRow=q.nails_per_row,
        totalDrillLength=round(q.total_drill_length, 6),
        totalSteelWeight=round(q.total_steel_weight, 6),
        totalGroutVolume=round(q.total_grout_volume, 6),
        totalPlates=q.total_plates,
        totalCentralizers=q.total_centralizers,
    )


def layout_output(
    layout: Layout,
    quantities: Quantities | None,
    terrain: Sequence[TerrainPoint],
) -> LayoutOutput:
    return LayoutOutput(
        nails=[
            NailOutput(
                id=n.id,
                row=n.row,
                col=n.col,
                head=Point3DOutput(x=n.head.x, y=n.head.y, z=n.head.z),
                tip=Point3DOutput(x=n.tip.x, y=n.tip.y, z=n.tip.z),
                length=n.length,
                inclination=n.inclination,
                elevation=n.elevation,
                barDiameter=n.bar_diameter,
                drillDiameter=n.drill_diameter,
            )
            for n in layout.nails
        ],
        rows=[
            RowOutput(
                rowNumber=r.row_number,
                elevation=r.elevation,
                faceX=r.face_x,
                faceAngle=round(face_angle_at_elevation(terrain, r.elevation), 4),
                nailLength=r.nail_length,
                inclination=r.inclination,
                start=Point2DOutput(x=r.start.x, y=r.start.y),
                end=Point2DOutput(x=r.end.x, y=r.end.y),
            )
            for r in layout.rows
        ],
        nailsPerRow=layout.nails_per_row,
        params=params_output(layout.params),
        slopeHeight=layout.slope_height,
        warnings=layout.warnings,
        error=layout.error,
        errorKind=layout.error_kind.value if layout.error_kind else None,
        quantities=quantities_output(quantities) if quantities else None,
    )


def stats_output(stats: TerrainStats) -> TerrainStatsOutput:
    return TerrainStatsOutput(
        pointCount=stats.point_count,
        profileLength=round(stats.profile_length, 6),
        slopeHeight=round(stats.slope_height, 6),
        averageAngle=round(stats.average_angle, 4),
        maxSegmentAngle=round(stats.max_segment_angle, 4),
    )
