"""Tests for soilnail/prescriptive.py — table-driven recommendations."""
import dataclasses

import pytest

from soilnail import (
    DESIGN_DEFAULTS,
    PRESCRIPTIVE_TABLE,
    NailParameters,
    get_prescriptive_params,
    recommend_for_terrain,
    select_table_entry,
)


@pytest.mark.parametrize("height,length", [
    (0.0, 3.0),
    (3.0, 3.0),
    (4.0, 4.0),
    (5.0, 5.0),
    (8.0, 6.0),
    (8.01, 8.0),
    (20.0, 16.0),
])
def test_nail_length_by_height(height, length):
    assert get_prescriptive_params(height)["nail_length"] == length


def test_over_height_uses_largest_entry():
    assert select_table_entry(35.0) is PRESCRIPTIVE_TABLE[-1]
    assert get_prescriptive_params(35.0)["nail_length"] == 16.0


def test_table_ascending():
    heights = [e.max_height for e in PRESCRIPTIVE_TABLE]
    assert heights == sorted(heights)


def test_non_decreasing_across_boundaries():
    lengths = []
    for entry in PRESCRIPTIVE_TABLE:
        lengths.append(get_prescriptive_params(entry.max_height)["nail_length"])
        lengths.append(get_prescriptive_params(entry.max_height + 0.01)["nail_length"])
    assert lengths == sorted(lengths)


def test_entry_values_copied():
    entry = select_table_entry(11.0)
    p = get_prescriptive_params(11.0)
    assert entry.min_rows == 6
    assert p["bar_diameter"] == entry.bar_dia
    assert p["drill_diameter"] == entry.drill_dia
    assert p["plate_size"] == entry.plate_size
    assert p["plate_thickness"] == entry.plate_thk


def test_defaults_merged():
    p = get_prescriptive_params(6.0)
    for key, value in DESIGN_DEFAULTS.items():
        assert p[key] == value
    assert p["inclination"] == 15.0
    assert p["h_spacing"] == p["v_spacing"] == 1.5


def test_result_applies_to_parameters():
    p = dataclasses.replace(NailParameters(wall_extent=20.0), **get_prescriptive_params(9.0))
    assert p.nail_length == 8.0
    assert p.wall_extent == 20.0


@pytest.mark.parametrize("height,angle,length", [
    (8.0, 60.0, 8.0),   # 6 m x 1.2 = 7.2 → 8
    (6.0, 60.0, 6.0),   # 5 m x 1.2 = 6.0 stays 6
    (20.0, 70.0, 20.0),  # 16 m x 1.2 = 19.2 → 20
    (8.0, -60.0, 8.0),
    (8.0, 55.0, 6.0),   # threshold itself does not escalate
    (8.0, None, 6.0),
])
def test_steep_slope_escalation(height, angle, length):
    assert get_prescriptive_params(height, angle)["nail_length"] == length


def test_recommend_for_terrain(sample_terrain):
    # 11 m high, steepest segment ≈ 63.4° → 9 m x 1.2 = 10.8 → 11 m
    p = recommend_for_terrain(sample_terrain)
    assert p["nail_length"] == 11.0
    assert p["bar_diameter"] == 28


def test_recommend_for_gentle_terrain(ramp):
    assert recommend_for_terrain(ramp)["nail_length"] == 8.0
