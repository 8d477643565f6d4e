"""Prescriptive design range checks for soil nail parameters.

Each rule is evaluated independently and contributes at most one warning.
The order of the returned list follows the rule order below:
  1. Nail length / wall height — lower bound
  2. Nail length / wall height — upper bound
  3. Horizontal spacing range
  4. Vertical spacing range
  5. Minimum inclination
  6. Maximum inclination
  7. Drill hole / bar diameter (grout annulus)
  8. Minimum grout strength
  9. Wall height beyond the prescriptive tables
"""

from __future__ import annotations

from .prescriptive import DESIGN_LIMITS
from .types import NailParameters

MIN_LENGTH_RATIO = 0.6
MAX_LENGTH_RATIO = 1.5
MIN_ANNULUS_RATIO = 2.5
MIN_GROUT_STRENGTH = 20.0  # MPa


def _check_length_short(params: NailParameters, slope_height: float) -> str | None:
    if slope_height <= 0:
        return None
    ratio = params.nail_length / slope_height
    if ratio < MIN_LENGTH_RATIO:
        return (
            f"Nail length/height ratio {ratio:.2f} is below {MIN_LENGTH_RATIO}; "
            f"nails may be too short for a {slope_height:.1f} m wall."
        )
    return None


def _check_length_long(params: NailParameters, slope_height: float) -> str | None:
    if slope_height <= 0:
        return None
    ratio = params.nail_length / slope_height
    if ratio > MAX_LENGTH_RATIO:
        return (
            f"Nail length/height ratio {ratio:.2f} exceeds {MAX_LENGTH_RATIO}; "
            "nails may be unnecessarily long."
        )
    return None


def _check_spacing(name: str, value: float) -> str | None:
    lim = DESIGN_LIMITS
    if value < lim.min_spacing or value > lim.max_spacing:
        return (
            f"{name} spacing {value:.2f} m is outside the recommended range "
            f"{lim.min_spacing:.1f}-{lim.max_spacing:.1f} m."
        )
    return None


def _check_inclination_min(params: NailParameters) -> str | None:
    if params.inclination < DESIGN_LIMITS.min_inclination:
        return (
            f"Inclination {params.inclination:.1f}° is below "
            f"{DESIGN_LIMITS.min_inclination:.0f}°; grout may not fill the hole."
        )
    return None


def _check_inclination_max(params: NailParameters) -> str | None:
    if params.inclination > DESIGN_LIMITS.max_inclination:
        return (
            f"Inclination {params.inclination:.1f}° exceeds the recommended "
            f"{DESIGN_LIMITS.max_inclination:.0f}°."
        )
    return None


def _check_annulus(params: NailParameters) -> str | None:
    ratio = params.drill_diameter / params.bar_diameter
    if ratio < MIN_ANNULUS_RATIO:
        return (
            f"Drill/bar diameter ratio {ratio:.2f} is below {MIN_ANNULUS_RATIO}; "
            "grout cover around the bar is insufficient."
        )
    return None


def _check_grout(params: NailParameters) -> str | None:
    if params.grout_strength < MIN_GROUT_STRENGTH:
        return (
            f"Grout strength {params.grout_strength:.1f} MPa is below the "
            f"minimum {MIN_GROUT_STRENGTH:.0f} MPa."
        )
    return None


def _check_height(slope_height: float) -> str | None:
    if slope_height > DESIGN_LIMITS.max_slope_height:
        return (
            f"Wall height {slope_height:.1f} m exceeds the prescriptive limit of "
            f"{DESIGN_LIMITS.max_slope_height:.0f} m; a full geotechnical "
            "analysis is required."
        )
    return None


def validate_design(params: NailParameters, slope_height: float) -> list[str]:
    """Return warnings for every rule the parameters break (empty if none)."""
    checks = [
        _check_length_short(params, slope_height),
        _check_length_long(params, slope_height),
        _check_spacing("Horizontal", params.h_spacing),
        _check_spacing("Vertical", params.v_spacing),
        _check_inclination_min(params),
        _check_inclination_max(params),
        _check_annulus(params),
        _check_grout(params),
        _check_height(slope_height),
    ]
    return [w for w in checks if w is not None]
