"""Soil nail layout generation.

Turns a 2D ground profile into horizontal nail rows, then fans each row
out across the wall width into 3D nails:

  1. Profile checks (point count, height, offsets)
  2. Ground direction from the highest and lowest profile points
  3. Rows from the top offset down to the bottom offset, one every
     ``v_spacing``; levels the profile never reaches are skipped but
     still use up a row number
  4. ``floor(wall_extent / h_spacing) + 1`` nails per row, centred on
     the section, with every other row shifted half a spacing for the
     staggered pattern

Failures are reported on ``Layout.error``; nothing here raises for bad
terrain.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .terrain import ground_direction, x_at_elevation
from .types import (
    Layout,
    LayoutErrorKind,
    Nail3D,
    NailParameters,
    PatternType,
    Row,
    TerrainPoint,
    Vec2,
    Vec3,
)
from .validation import validate_design

logger = logging.getLogger(__name__)

MIN_SLOPE_HEIGHT = 0.5  # m

_ERROR_MESSAGES = {
    LayoutErrorKind.INSUFFICIENT_TERRAIN: "Define at least 2 terrain points first.",
    LayoutErrorKind.FLAT_TERRAIN: (
        f"Terrain profile is too flat. Need slope height > {MIN_SLOPE_HEIGHT}m."
    ),
    LayoutErrorKind.INVALID_OFFSETS: (
        "Top/bottom offsets are too large for this slope height."
    ),
}


def _failed(
    kind: LayoutErrorKind, params: NailParameters, slope_height: float = 0.0
) -> Layout:
    logger.warning("Layout not generated: %s", kind.value)
    return Layout(
        nails=[],
        rows=[],
        nails_per_row=0,
        params=params,
        slope_height=slope_height,
        warnings=[],
        error=_ERROR_MESSAGES[kind],
        error_kind=kind,
    )


def build_rows(
    params: NailParameters,
    points: Sequence[TerrainPoint],
    first_elev: float,
    last_elev: float,
    direction: int,
) -> list[Row]:
    """Rows from ``first_elev`` down to ``last_elev`` inclusive."""
    incl = math.radians(params.inclination)
    dx = direction * params.nail_length * math.cos(incl)
    dy = -params.nail_length * math.sin(incl)

    rows: list[Row] = []
    elevation = first_elev
    row_num = 1
    while elevation >= last_elev:
        face_x = x_at_elevation(points, elevation)
        if face_x is None:
            logger.debug("Row %d skipped: no terrain at %.3f m", row_num, elevation)
        else:
            rows.append(
                Row(
                    row_number=row_num,
                    elevation=elevation,
                    face_x=face_x,
                    nail_length=params.nail_length,
                    inclination=params.inclination,
                    start=Vec2(face_x, elevation),
                    end=Vec2(face_x + dx, elevation + dy),
                )
            )
        elevation -= params.v_spacing
        row_num += 1
    return rows


def nails_per_row(params: NailParameters) -> int:
    return math.floor(params.wall_extent / params.h_spacing) + 1


def fan_out(rows: Sequence[Row], params: NailParameters) -> list[Nail3D]:
    """Spread every row across the wall width."""
    count = nails_per_row(params)
    start_offset = -(params.wall_extent / 2)
    staggered = params.pattern_type == PatternType.STAGGERED

    nails: list[Nail3D] = []
    for idx, row in enumerate(rows):
        shift = params.h_spacing / 2 if staggered and idx % 2 == 1 else 0.0
        for col in range(count):
            z = start_offset + col * params.h_spacing + shift
            nails.append(
                Nail3D(
                    id=f"N{row.row_number}-{col + 1}",
                    row=row.row_number,
                    col=col + 1,
                    head=Vec3(row.start.x, row.start.y, z),
                    tip=Vec3(row.end.x, row.end.y, z),
                    length=row.nail_length,
                    inclination=row.inclination,
                    elevation=row.elevation,
                    bar_diameter=params.bar_diameter,
                    drill_diameter=params.drill_diameter,
                )
            )
    return nails


def generate_layout(
    params: NailParameters, terrain_points: Sequence[TerrainPoint]
) -> Layout:
    """Generate the full nail layout for a ground profile.

    ``terrain_points`` must be sorted ascending by x. The returned layout
    carries the design warnings for the profile's height; on failure it
    carries only the error.
    """
    if len(terrain_points) < 2:
        return _failed(LayoutErrorKind.INSUFFICIENT_TERRAIN, params)

    ys = [p.y for p in terrain_points]
    min_elev = min(ys)
    max_elev = max(ys)
    slope_height = max_elev - min_elev

    if slope_height < MIN_SLOPE_HEIGHT:
        return _failed(LayoutErrorKind.FLAT_TERRAIN, params, slope_height)

    first_elev = max_elev - params.top_offset
    last_elev = min_elev + params.bottom_offset
    if first_elev <= last_elev:
        return _failed(LayoutErrorKind.INVALID_OFFSETS, params, slope_height)

    direction = ground_direction(terrain_points)
    rows = build_rows(params, terrain_points, first_elev, last_elev, direction)
    nails = fan_out(rows, params)

    logger.info(
        "Layout: %d rows x %d nails (height %.2f m, direction %+d)",
        len(rows),
        nails_per_row(params),
        slope_height,
        direction,
    )

    return Layout(
        nails=nails,
        rows=rows,
        nails_per_row=nails_per_row(params),
        params=params,
        slope_height=slope_height,
        warnings=validate_design(params, slope_height),
    )
