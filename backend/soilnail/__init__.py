"""soilnail — soil nail wall layout, prescriptive design and quantities."""

from .layout import generate_layout
from .prescriptive import (
    DESIGN_DEFAULTS,
    DESIGN_LIMITS,
    PRESCRIPTIVE_TABLE,
    get_prescriptive_params,
    recommend_for_terrain,
    select_table_entry,
)
from .quantities import calculate_quantities
from .terrain import SAMPLE_TERRAIN, sort_terrain, terrain_stats, x_at_elevation
from .types import (
    Layout,
    LayoutErrorKind,
    Nail3D,
    NailParameters,
    PatternType,
    Quantities,
    Row,
    TerrainPoint,
    TerrainStats,
    Vec2,
    Vec3,
)
from .validation import validate_design

__all__ = [
    "DESIGN_DEFAULTS",
    "DESIGN_LIMITS",
    "Layout",
    "LayoutErrorKind",
    "Nail3D",
    "NailParameters",
    "PRESCRIPTIVE_TABLE",
    "PatternType",
    "Quantities",
    "Row",
    "SAMPLE_TERRAIN",
    "TerrainPoint",
    "TerrainStats",
    "Vec2",
    "Vec3",
    "calculate_quantities",
    "generate_layout",
    "get_prescriptive_params",
    "recommend_for_terrain",
    "select_table_entry",
    "sort_terrain",
    "terrain_stats",
    "validate_design",
    "x_at_elevation",
]
