# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Astronomical constants for solar position calculations.

Single read-only instance shared by every domain module.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class _AstronomicalConstants:
    """Fixed astronomical parameters (medium-precision solar model)."""
    EARTH_OBLIQUITY: float = 23.4397          # deg, axial tilt
    ECCENTRICITY_FACTOR: float = 0.0167       # orbital eccentricity
    SOLAR_CONSTANT: float = 1361.0            # W/m²
    J2000: float = 2451545.0                  # JD of 2000-01-01T12:00:00 UTC
    DAYS_PER_JULIAN_YEAR: float = 365.25
    DAYS_PER_JULIAN_CENTURY: float = 36525.0
    ATMOSPHERIC_REFRACTION: float = 0.833     # deg, refraction at horizon
    DEGREES_TO_RADIANS: float = math.pi / 180.0
    RADIANS_TO_DEGREES: float = 180.0 / math.pi
    POLAR_CIRCLE_LATITUDE: float = 66.5       # deg, Arctic/Antarctic circle
    # Sun elevation limits of the twilight bands (deg)
    CIVIL_TWILIGHT: float = -6.0
    NAUTICAL_TWILIGHT: float = -12.0
    ASTRONOMICAL_TWILIGHT: float = -18.0


AstronomicalConstants: _AstronomicalConstants = _AstronomicalConstants()
