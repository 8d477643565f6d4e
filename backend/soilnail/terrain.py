"""Ground profile helpers: elevation crossings, slope statistics, sample data.

The profile is a polyline of (x, y) points sorted ascending by x. All
functions here are read-only over the point sequence.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .types import TerrainPoint, TerrainStats

EPS = 1e-3

SAMPLE_TERRAIN: tuple[TerrainPoint, ...] = (
    TerrainPoint(0.0, 0.0),
    TerrainPoint(2.0, 0.0),
    TerrainPoint(3.0, 1.0),
    TerrainPoint(5.0, 4.0),
    TerrainPoint(6.0, 6.0),
    TerrainPoint(7.0, 8.0),
    TerrainPoint(8.0, 9.5),
    TerrainPoint(9.0, 10.5),
    TerrainPoint(10.0, 11.0),
    TerrainPoint(12.0, 11.0),
    TerrainPoint(15.0, 11.0),
)


def _brackets(p1: TerrainPoint, p2: TerrainPoint, elevation: float) -> bool:
    lo = min(p1.y, p2.y)
    hi = max(p1.y, p2.y)
    return lo - EPS <= elevation <= hi + EPS


def x_at_elevation(points: Sequence[TerrainPoint], elevation: float) -> float | None:
    """Return the x offset where the profile crosses ``elevation``.

    Segments are scanned left to right and the first one that brackets
    the elevation wins, so a profile crossing the same level twice always
    reports the leftmost crossing. Near-flat segments report their
    midpoint. ``None`` means no segment reaches the elevation.
    """
    for p1, p2 in zip(points, points[1:]):
        if not _brackets(p1, p2, elevation):
            continue
        if abs(p2.y - p1.y) < EPS:
            return (p1.x + p2.x) / 2
        t = (elevation - p1.y) / (p2.y - p1.y)
        if -EPS <= t <= 1 + EPS:
            return p1.x + t * (p2.x - p1.x)
    return None


def face_angle_at_elevation(points: Sequence[TerrainPoint], elevation: float) -> float:
    """Angle (deg) of the first profile segment that brackets ``elevation``.

    Falls back to 45° when no segment reaches it.
    """
    for p1, p2 in zip(points, points[1:]):
        if _brackets(p1, p2, elevation):
            return math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x))
    return 45.0


def sort_terrain(points: Sequence[TerrainPoint]) -> list[TerrainPoint]:
    """Return a new list of the points ordered by horizontal offset."""
    return sorted(points, key=lambda p: p.x)


def ground_direction(points: Sequence[TerrainPoint]) -> int:
    """Horizontal sign pointing into the slope: +1 or -1.

    Compares only the lowest and highest profile points, so it assumes a
    single up-slope direction. Profiles whose grade reverses (a ridge or
    a ditch) get whichever direction the two extremes imply. On ties the
    first lowest point and the last highest point are used.
    """
    lowest = min(points, key=lambda p: p.y)
    highest = max(reversed(points), key=lambda p: p.y)
    return 1 if highest.x >= lowest.x else -1


def terrain_stats(points: Sequence[TerrainPoint]) -> TerrainStats:
    """Length, height and steepness summary of a profile."""
    if len(points) < 2:
        return TerrainStats(
            point_count=len(points),
            profile_length=0.0,
            slope_height=0.0,
            average_angle=0.0,
            max_segment_angle=0.0,
        )

    pts = sort_terrain(points)
    length = 0.0
    steepest = 0.0
    for p1, p2 in zip(pts, pts[1:]):
        dx = p2.x - p1.x
        dy = p2.y - p1.y
        length += math.hypot(dx, dy)
        if dx == 0 and dy == 0:
            continue
        # atan2 on |dx| keeps the angle within [0°, 90°] for either facing
        steepest = max(steepest, math.degrees(math.atan2(abs(dy), abs(dx))))

    ys = [p.y for p in pts]
    height = max(ys) - min(ys)
    span = pts[-1].x - pts[0].x
    avg = math.degrees(math.atan2(height, span)) if span > 0 else 0.0

    return TerrainStats(
        point_count=len(pts),
        profile_length=length,
        slope_height=height,
        average_angle=avg,
        max_segment_angle=steepest,
    )
