"""Typed models for soil nail wall layout generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class TerrainPoint:
    x: float  # m — horizontal offset
    y: float  # m — elevation


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Vec3:
    x: float
    y: float
    z: float


class PatternType(str, Enum):
    RECTANGULAR = "rectangular"
    STAGGERED = "staggered"


@dataclass(frozen=True)
class NailParameters:
    """Full set of nail design inputs for one layout run.

    Units follow common soil nail practice:
    - Lengths, spacings, offsets: m
    - Bar / drill diameters, plate dimensions: mm
    - Inclination: degrees below horizontal
    - Steel grade, grout strength: MPa

    ``variable_length`` is carried through for callers and exports but is
    not used by layout generation; every row gets ``nail_length``.
    """

    nail_length: float = 6.0
    inclination: float = 15.0
    bar_diameter: float = 25.0
    drill_diameter: float = 100.0
    h_spacing: float = 1.5
    v_spacing: float = 1.5
    top_offset: float = 0.5
    bottom_offset: float = 0.5
    pattern_type: PatternType = PatternType.RECTANGULAR
    wall_extent: float = 10.0
    plate_size: float = 200.0
    plate_thickness: float = 15.0
    facing_type: str = "shotcrete"
    steel_grade: float = 500.0
    grout_strength: float = 30.0
    corrosion_protection: str = "encapsulated"
    centralizers: bool = True
    centralizer_spacing: float = 1.0
    variable_length: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings for the pattern (e.g. from JSON input)
        object.__setattr__(self, "pattern_type", PatternType(self.pattern_type))

        if self.h_spacing <= 0 or self.v_spacing <= 0:
            raise ValueError("Nail spacings must be positive")
        if self.wall_extent < 0:
            raise ValueError("wall_extent must not be negative")
        if self.nail_length <= 0:
            raise ValueError("nail_length must be positive")
        if self.bar_diameter <= 0 or self.drill_diameter <= 0:
            raise ValueError("Bar and drill diameters must be positive")


@dataclass(frozen=True)
class Row:
    """One installation level: a 2D nail from the face into the slope."""

    row_number: int
    elevation: float  # m
    face_x: float     # m — where the row meets the terrain
    nail_length: float
    inclination: float
    start: Vec2       # nail head
    end: Vec2         # nail tip


@dataclass(frozen=True)
class Nail3D:
    id: str           # "N{row}-{col}"
    row: int
    col: int          # 1-based across the wall
    head: Vec3
    tip: Vec3
    length: float
    inclination: float
    elevation: float
    bar_diameter: float
    drill_diameter: float


class LayoutErrorKind(Enum):
    INSUFFICIENT_TERRAIN = "InsufficientTerrain"
    FLAT_TERRAIN = "FlatTerrain"
    INVALID_OFFSETS = "InvalidOffsets"


@dataclass(frozen=True)
class Layout:
    nails: list[Nail3D]
    rows: list[Row]
    nails_per_row: int
    params: NailParameters
    slope_height: float
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    error_kind: LayoutErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def print_summary(self) -> None:
        p = self.params
        print(f"\n{'=' * 64}")
        print("  Soil Nail Layout")
        print(f"{'=' * 64}")
        if self.error is not None:
            print(f"  ERROR: {self.error}")
            print(f"{'=' * 64}")
            return
        print(f"  Slope height = {self.slope_height:.2f} m   "
              f"Pattern = {p.pattern_type.value}")
        print(f"  L = {p.nail_length:.2f} m   incl = {p.inclination:.1f}°   "
              f"Ø{p.bar_diameter:.0f} in Ø{p.drill_diameter:.0f} mm")
        print(f"  Sh = {p.h_spacing:.2f} m   Sv = {p.v_spacing:.2f} m   "
              f"wall = {p.wall_extent:.2f} m")
        print(f"{'─' * 64}")
        print(f"  {'Row':>4} {'Elev (m)':>10} {'Face x (m)':>12} {'Tip x (m)':>11} {'Tip y (m)':>11}")
        for r in self.rows:
            print(f"  {r.row_number:>4} {r.elevation:>10.3f} {r.face_x:>12.3f} "
                  f"{r.end.x:>11.3f} {r.end.y:>11.3f}")
        print(f"{'─' * 64}")
        print(f"  Rows = {len(self.rows)}   Nails/row = {self.nails_per_row}   "
              f"Nails = {len(self.nails)}")
        if self.warnings:
            print(f"{'─' * 64}")
            for w in self.warnings:
                print(f"  ! {w}")
        print(f"{'=' * 64}")


@dataclass(frozen=True)
class Quantities:
    total_nails: int
    total_rows: int
    nails_per_row: int
    total_drill_length: float   # m
    total_steel_weight: float   # kg
    total_grout_volume: float   # m³
    total_plates: int = 0
    total_centralizers: int = 0

    def print_summary(self) -> None:
        print(f"\n{'=' * 64}")
        print("  Material Quantities")
        print(f"{'=' * 64}")
        print(f"  Nails          {self.total_nails:>10d}   "
              f"({self.total_rows} rows x {self.nails_per_row})")
        print(f"  Drilling       {self.total_drill_length:>10.2f} m")
        print(f"  Steel          {self.total_steel_weight:>10.2f} kg")
        print(f"  Grout          {self.total_grout_volume:>10.3f} m³")
        print(f"  Head plates    {self.total_plates:>10d}")
        print(f"  Centralizers   {self.total_centralizers:>10d}")
        print(f"{'=' * 64}")


@dataclass(frozen=True)
class TerrainStats:
    point_count: int
    profile_length: float     # m — along the ground line
    slope_height: float       # m
    average_angle: float      # deg
    max_segment_angle: float  # deg — steepest single segment
