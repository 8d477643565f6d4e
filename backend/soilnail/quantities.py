"""Material take-off for a generated nail layout."""

from __future__ import annotations

import math

from .types import Layout, Quantities

STEEL_DENSITY = 7850.0  # kg/m³


def centralizers_per_nail(nail_length: float, spacing: float) -> int:
    """Centralizers placed every ``spacing`` strictly inside the nail."""
    if spacing <= 0:
        return 0
    # round() guards against 6.0 / 1.2 landing just above a whole number
    return max(math.ceil(round(nail_length / spacing, 9)) - 1, 0)


def calculate_quantities(layout: Layout | None) -> Quantities | None:
    """Aggregate steel, grout and drilling for a layout.

    Returns ``None`` for a missing or failed layout. All nails are
    assumed to share the layout's bar, drill and length.
    """
    if layout is None or layout.error is not None:
        return None

    p = layout.params
    total_nails = len(layout.nails)

    bar_r = p.bar_diameter / 2000   # mm → m radius
    drill_r = p.drill_diameter / 2000

    steel_per_nail = math.pi * bar_r**2 * p.nail_length * STEEL_DENSITY
    grout_per_nail = math.pi * (drill_r**2 - bar_r**2) * p.nail_length

    per_nail = (
        centralizers_per_nail(p.nail_length, p.centralizer_spacing)
        if p.centralizers
        else 0
    )

    return Quantities(
        total_nails=total_nails,
        total_rows=len(layout.rows),
        nails_per_row=layout.nails_per_row,
        total_drill_length=total_nails * p.nail_length,
        total_steel_weight=steel_per_nail * total_nails,
        total_grout_volume=grout_per_nail * total_nails,
        total_plates=total_nails,
        total_centralizers=per_nail * total_nails,
    )
