"""Tests for soilnail/terrain.py — profile crossings and statistics."""
import math

import pytest

from soilnail import SAMPLE_TERRAIN, TerrainPoint, sort_terrain, terrain_stats, x_at_elevation
from soilnail.terrain import face_angle_at_elevation, ground_direction


def _pts(*pairs):
    return [TerrainPoint(x, y) for x, y in pairs]


# --- x_at_elevation ---

def test_x_at_elevation_interpolates(ramp):
    assert x_at_elevation(ramp, 5.0) == pytest.approx(5.0)
    assert x_at_elevation(ramp, 2.5) == pytest.approx(2.5)


def test_x_at_elevation_endpoints(ramp):
    assert x_at_elevation(ramp, 0.0) == pytest.approx(0.0)
    assert x_at_elevation(ramp, 10.0) == pytest.approx(10.0)


def test_x_at_elevation_within_tolerance_above_top(ramp):
    assert x_at_elevation(ramp, 10.0005) == pytest.approx(10.0005)


def test_x_at_elevation_out_of_range(ramp):
    assert x_at_elevation(ramp, 10.5) is None
    assert x_at_elevation(ramp, -1.0) is None


def test_x_at_elevation_flat_segment_midpoint():
    pts = _pts((0, 2), (4, 2), (6, 4))
    assert x_at_elevation(pts, 2.0) == pytest.approx(2.0)


def test_x_at_elevation_first_crossing_wins():
    # Ridge crosses 2.5 m at x=2.5 and x=7.5; the left one is reported
    pts = _pts((0, 0), (5, 5), (10, 0))
    assert x_at_elevation(pts, 2.5) == pytest.approx(2.5)


def test_x_at_elevation_degenerate_profiles():
    assert x_at_elevation([], 1.0) is None
    assert x_at_elevation(_pts((0, 1)), 1.0) is None


# --- face_angle_at_elevation ---

def test_face_angle_ramp(ramp):
    assert face_angle_at_elevation(ramp, 5.0) == pytest.approx(45.0)


def test_face_angle_steep_segment():
    pts = _pts((0, 0), (1, 2))
    assert face_angle_at_elevation(pts, 1.0) == pytest.approx(math.degrees(math.atan2(2, 1)))


def test_face_angle_fallback(ramp):
    assert face_angle_at_elevation(ramp, 50.0) == 45.0


# --- sort_terrain / ground_direction ---

def test_sort_terrain_returns_new_list():
    pts = _pts((5, 1), (0, 0), (10, 3))
    out = sort_terrain(pts)
    assert [p.x for p in out] == [0, 5, 10]
    assert [p.x for p in pts] == [5, 0, 10]


def test_ground_direction_up_right(ramp):
    assert ground_direction(ramp) == 1


def test_ground_direction_up_left():
    assert ground_direction(_pts((0, 10), (10, 0))) == -1


def test_ground_direction_sample():
    assert ground_direction(list(SAMPLE_TERRAIN)) == 1


def test_ground_direction_ties_use_last_highest():
    # both ends at 10 m; the right one counts as the highest
    assert ground_direction(_pts((0, 10), (5, 0), (10, 10))) == 1


def test_ground_direction_ties_use_first_lowest():
    assert ground_direction(_pts((0, 0), (5, 10), (10, 0))) == 1
    assert ground_direction(_pts((0, 5), (5, 0), (10, 0))) == -1


# --- terrain_stats ---

def test_terrain_stats_ramp(ramp):
    s = terrain_stats(ramp)
    assert s.point_count == 2
    assert s.profile_length == pytest.approx(math.sqrt(200))
    assert s.slope_height == pytest.approx(10.0)
    assert s.average_angle == pytest.approx(45.0)
    assert s.max_segment_angle == pytest.approx(45.0)


def test_terrain_stats_sample(sample_terrain):
    s = terrain_stats(sample_terrain)
    assert s.point_count == 11
    assert s.slope_height == pytest.approx(11.0)
    assert s.average_angle == pytest.approx(math.degrees(math.atan2(11, 15)))
    assert s.max_segment_angle == pytest.approx(math.degrees(math.atan2(2, 1)))


def test_terrain_stats_vertical_segment():
    s = terrain_stats(_pts((0, 0), (0, 3), (2, 3)))
    assert s.max_segment_angle == pytest.approx(90.0)


def test_terrain_stats_too_few_points():
    s = terrain_stats(_pts((1, 1)))
    assert s.point_count == 1
    assert s.slope_height == 0.0
    assert s.max_segment_angle == 0.0
