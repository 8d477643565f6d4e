"""Tests for soilnail/validation.py — prescriptive range checks."""
import pytest

from soilnail import NailParameters, validate_design


def test_reference_design_passes():
    p = NailParameters(
        nail_length=6.0, h_spacing=1.5, v_spacing=1.5, inclination=15.0,
        bar_diameter=25.0, drill_diameter=100.0, grout_strength=30.0,
    )
    assert validate_design(p, 8.0) == []


def test_all_rules_fire_in_order():
    p = NailParameters(
        nail_length=2.0, h_spacing=0.5, v_spacing=3.0, inclination=5.0,
        bar_diameter=50.0, drill_diameter=100.0, grout_strength=10.0,
    )
    warnings = validate_design(p, 25.0)
    assert len(warnings) == 7
    assert "too short" in warnings[0]
    assert warnings[1].startswith("Horizontal spacing")
    assert warnings[2].startswith("Vertical spacing")
    assert "below 10°" in warnings[3]
    assert "Drill/bar" in warnings[4]
    assert "Grout strength" in warnings[5]
    assert "full geotechnical analysis" in warnings[6]


def test_long_nails_and_steep_inclination():
    p = NailParameters(nail_length=20.0, inclination=25.0)
    warnings = validate_design(p, 8.0)
    assert len(warnings) == 2
    assert "unnecessarily long" in warnings[0]
    assert "exceeds the recommended" in warnings[1]


@pytest.mark.parametrize("spacing", [1.0, 2.0])
def test_spacing_bounds_inclusive(spacing):
    p = NailParameters(h_spacing=spacing, v_spacing=spacing)
    assert validate_design(p, 8.0) == []


def test_annulus_boundary():
    assert validate_design(NailParameters(bar_diameter=40.0, drill_diameter=100.0), 8.0) == []
    warnings = validate_design(NailParameters(bar_diameter=41.0, drill_diameter=100.0), 8.0)
    assert len(warnings) == 1 and "Drill/bar" in warnings[0]


def test_height_limit_only():
    p = NailParameters(nail_length=16.0)
    warnings = validate_design(p, 21.0)
    assert len(warnings) == 1
    assert "21.0 m" in warnings[0]


def test_zero_height_skips_ratio_rules():
    assert validate_design(NailParameters(), 0.0) == []


def test_pure_and_repeatable():
    p = NailParameters(nail_length=2.0, grout_strength=10.0)
    assert validate_design(p, 10.0) == validate_design(p, 10.0)
