"""Shared test fixtures for soil nail layout tests."""
import pytest

from soilnail import SAMPLE_TERRAIN, NailParameters, TerrainPoint, generate_layout


@pytest.fixture
def ramp():
    """Straight 45° slope rising 10 m over 10 m."""
    return [TerrainPoint(0.0, 0.0), TerrainPoint(10.0, 10.0)]


@pytest.fixture
def sample_terrain():
    return list(SAMPLE_TERRAIN)


@pytest.fixture
def params():
    """Default parameter set (6 m nails at 1.5 m centres, 10 m wall)."""
    return NailParameters()


@pytest.fixture
def ramp_layout(params, ramp):
    return generate_layout(params, ramp)
