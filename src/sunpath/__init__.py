# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
sunpath

Medium-precision solar position engine: Julian Day conversion, solar
ephemeris (declination, equation of time), topocentric azimuth and
elevation with atmospheric refraction, daily sun paths with bisection
refined sunrise/sunset, polar lighting classification (midnight sun,
polar night, twilight bands), and annual equation-of-time tables.
"""

from sunpath.domain.constants import AstronomicalConstants
from sunpath.domain.coordinates import (
    CoordinateFormat,
    CoordinateFormatError,
    GeographicCoordinate,
    InvalidCoordinateError,
    ValidationResult,
    format_coordinates,
    parse_coordinates,
    validate_coordinate,
    validate_date,
)
from sunpath.domain.julian import (
    julian_day,
    days_since_j2000,
    julian_centuries_j2000,
)
from sunpath.domain.solar import (
    SolarEphemeris,
    solar_declination,
    equation_of_time,
    solar_ephemeris,
)
from sunpath.domain.solar_position import (
    SolarPosition,
    atmospheric_refraction,
    solar_position,
)
from sunpath.domain.sun_events import refine_transition
from sunpath.domain.sun_path import (
    SunPath,
    SunPathConfig,
    daily_sun_path,
    sun_paths_for_range,
)
from sunpath.domain.polar import (
    PolarCondition,
    PolarConditionType,
    classify_polar_condition,
    is_polar_region,
    polar_condition,
)
from sunpath.domain.equation_of_time import (
    EquationOfTimeDatum,
    annual_equation_of_time,
    equation_of_time_extrema,
)

__version__ = "1.0.0"

__all__ = [
    "AstronomicalConstants",
    "CoordinateFormat",
    "CoordinateFormatError",
    "GeographicCoordinate",
    "InvalidCoordinateError",
    "ValidationResult",
    "format_coordinates",
    "parse_coordinates",
    "validate_coordinate",
    "validate_date",
    "julian_day",
    "days_since_j2000",
    "julian_centuries_j2000",
    "SolarEphemeris",
    "solar_declination",
    "equation_of_time",
    "solar_ephemeris",
    "SolarPosition",
    "atmospheric_refraction",
    "solar_position",
    "refine_transition",
    "SunPath",
    "SunPathConfig",
    "daily_sun_path",
    "sun_paths_for_range",
    "PolarCondition",
    "PolarConditionType",
    "classify_polar_condition",
    "is_polar_region",
    "polar_condition",
    "EquationOfTimeDatum",
    "annual_equation_of_time",
    "equation_of_time_extrema",
]
