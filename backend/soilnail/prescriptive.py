"""Prescriptive soil nail design from slope height tables.

Recommends a complete parameter set for walls whose height falls within
published prescriptive ranges. This is a lookup, not an analysis: slopes
taller than the last range get the last range's values, and the
validator is responsible for flagging them.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .terrain import terrain_stats
from .types import PatternType, TerrainPoint


@dataclass(frozen=True)
class PrescriptiveEntry:
    max_height: float  # m   — upper bound of the height range
    min_rows: int
    bar_dia: float     # mm
    nail_length: float  # m
    drill_dia: float   # mm
    plate_size: float  # mm
    plate_thk: float   # mm


@dataclass(frozen=True)
class DesignLimits:
    min_spacing: float = 1.0          # m
    max_spacing: float = 2.0          # m
    min_inclination: float = 10.0     # deg
    max_inclination: float = 20.0     # deg
    min_bar_dia: float = 20.0         # mm
    max_bar_dia: float = 40.0         # mm
    min_drill_dia: float = 75.0       # mm
    max_drill_dia: float = 200.0      # mm
    max_slope_height: float = 20.0    # m
    max_slope_angle: float = 70.0     # deg


# ── Height-range table (ascending by max_height) ────────────────────────
PRESCRIPTIVE_TABLE: tuple[PrescriptiveEntry, ...] = (
    PrescriptiveEntry(3.0, 2, 20, 3.0, 100, 150, 12),
    PrescriptiveEntry(4.0, 2, 20, 4.0, 100, 150, 12),
    PrescriptiveEntry(6.0, 3, 25, 5.0, 100, 200, 15),
    PrescriptiveEntry(8.0, 4, 25, 6.0, 100, 200, 15),
    PrescriptiveEntry(10.0, 5, 25, 8.0, 115, 200, 20),
    PrescriptiveEntry(12.0, 6, 28, 9.0, 115, 225, 20),
    PrescriptiveEntry(15.0, 8, 32, 11.0, 125, 250, 25),
    PrescriptiveEntry(20.0, 10, 32, 16.0, 150, 250, 25),
)

DESIGN_DEFAULTS: dict[str, Any] = {
    "inclination": 15.0,
    "h_spacing": 1.5,
    "v_spacing": 1.5,
    "top_offset": 0.5,
    "bottom_offset": 0.5,
    "steel_grade": 500.0,
    "grout_strength": 30.0,
    "centralizer_spacing": 1.0,
    "corrosion_protection": "encapsulated",
    "facing_type": "shotcrete",
    "pattern_type": PatternType.RECTANGULAR,
}

DESIGN_LIMITS = DesignLimits()

STEEP_SLOPE_ANGLE = 55.0   # deg
STEEP_LENGTH_FACTOR = 1.2


def select_table_entry(slope_height: float) -> PrescriptiveEntry:
    """First range covering ``slope_height``, else the largest range."""
    for entry in PRESCRIPTIVE_TABLE:
        if entry.max_height >= slope_height:
            return entry
    return PRESCRIPTIVE_TABLE[-1]


def get_prescriptive_params(
    slope_height: float,
    max_slope_angle: float | None = None,
) -> dict[str, Any]:
    """Suggested parameters for a slope of the given height.

    ``max_slope_angle`` is the steepest segment angle of the profile in
    degrees. Above 55° the nail length is increased by 20% and rounded up
    to a whole metre.

    The result uses :class:`~soilnail.types.NailParameters` field names
    and omits fields the tables do not cover (wall extent, toggles), so
    it can be applied with ``dataclasses.replace(params, **suggested)``.
    """
    entry = select_table_entry(slope_height)

    nail_length = entry.nail_length
    if max_slope_angle is not None and abs(max_slope_angle) > STEEP_SLOPE_ANGLE:
        # round() first so whole-metre products are not bumped up by float error
        nail_length = float(math.ceil(round(nail_length * STEEP_LENGTH_FACTOR, 6)))

    return {
        **DESIGN_DEFAULTS,
        "nail_length": nail_length,
        "bar_diameter": entry.bar_dia,
        "drill_diameter": entry.drill_dia,
        "plate_size": entry.plate_size,
        "plate_thickness": entry.plate_thk,
    }


def recommend_for_terrain(points: Sequence[TerrainPoint]) -> dict[str, Any]:
    """Suggested parameters using the profile's height and steepest segment."""
    stats = terrain_stats(points)
    return get_prescriptive_params(stats.slope_height, stats.max_segment_angle)
