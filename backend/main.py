"""Demo: sample slope — prescriptive design, nail layout and quantities."""

import dataclasses

from soilnail import (
    SAMPLE_TERRAIN,
    NailParameters,
    PatternType,
    calculate_quantities,
    generate_layout,
    recommend_for_terrain,
    terrain_stats,
)


def main():
    # ── Terrain ───────────────────────────────────────────────────
    terrain = list(SAMPLE_TERRAIN)
    stats = terrain_stats(terrain)
    print(
        f"Profile: {stats.point_count} points, height {stats.slope_height:.2f} m, "
        f"steepest segment {stats.max_segment_angle:.1f}°"
    )

    # ── Prescriptive design ───────────────────────────────────────
    suggested = recommend_for_terrain(terrain)
    params = dataclasses.replace(
        NailParameters(),
        **{**suggested, "pattern_type": PatternType.STAGGERED, "wall_extent": 12.0},
    )

    # ── Layout + quantities ───────────────────────────────────────
    layout = generate_layout(params, terrain)
    layout.print_summary()

    qty = calculate_quantities(layout)
    if qty is not None:
        qty.print_summary()


if __name__ == "__main__":
    main()
