# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric solar position.

Computes apparent azimuth and elevation of the Sun for an observer,
from the solar declination and the local hour angle, with an
atmospheric refraction correction near the horizon.

No external dependencies — only stdlib math/dataclasses/datetime.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from sunpath.domain.constants import AstronomicalConstants
from sunpath.domain.coordinates import GeographicCoordinate, require_valid
from sunpath.domain.julian import as_utc, julian_day, utc_hours
from sunpath.domain.solar import equation_of_time, solar_declination

_REFRACTION_FLOOR_DEG = -0.575
_REFRACTION_CEILING_DEG = 85.0


@dataclass(frozen=True)
class SolarPosition:
    """Apparent Sun position seen from a location at one instant."""
    azimuth: float      # deg clockwise from true north, [0, 360)
    elevation: float    # deg above horizon, [-90, 90]
    timestamp: datetime  # UTC
    location: GeographicCoordinate

    @property
    def is_sun_visible(self) -> bool:
        return self.elevation > 0.0

    def __str__(self) -> str:
        return (f"Az: {self.azimuth:.2f}°, El: {self.elevation:.2f}° "
                f"at {self.timestamp:%Y-%m-%d %H:%M:%S}")


def hour_angle_deg(instant: datetime, longitude: float) -> float:
    """
    Local hour angle of the Sun in degrees (0 at solar noon, + afternoon).

    Solar time is the UTC clock time shifted 4 minutes per degree of
    longitude and by the equation of time at the same instant.
    """
    solar_time = utc_hours(instant)
    solar_time += longitude / 15.0
    solar_time += equation_of_time(instant) / 60.0
    return (solar_time - 12.0) * 15.0


def atmospheric_refraction(elevation_deg: float) -> float:
    """
    Refraction correction in degrees for a geometric elevation.

    Bennett's cotangent formula R = 1.02 / tan(h + 10.3 / (h + 5.11))
    arcminutes. Zero below -0.575° and above 85°, where it is negligible.
    """
    if elevation_deg < _REFRACTION_FLOOR_DEG or elevation_deg > _REFRACTION_CEILING_DEG:
        return 0.0
    arg_deg = elevation_deg + 10.3 / (elevation_deg + 5.11)
    return 1.02 / math.tan(math.radians(arg_deg)) / 60.0


def solar_position(location: GeographicCoordinate, instant: datetime) -> SolarPosition:
    """
    Apparent solar azimuth and elevation.

    Args:
        location: Observer location; must be valid.
        instant: Calendar instant (naive values are taken as UTC).

    Returns:
        SolarPosition with azimuth in [0, 360) and elevation in [-90, 90].

    Raises:
        InvalidCoordinateError: If the location is out of range.
    """
    require_valid(location)

    utc = as_utc(instant)
    declination = solar_declination(julian_day(utc))
    hour_angle = hour_angle_deg(utc, location.longitude)

    lat_rad = math.radians(location.latitude)
    dec_rad = math.radians(declination)
    ha_rad = math.radians(hour_angle)

    sin_el = (math.sin(dec_rad) * math.sin(lat_rad)
              + math.cos(dec_rad) * math.cos(lat_rad) * math.cos(ha_rad))
    elevation = math.degrees(math.asin(max(-1.0, min(1.0, sin_el))))

    if elevation > -AstronomicalConstants.ATMOSPHERIC_REFRACTION:
        elevation += atmospheric_refraction(elevation)
    elevation = max(-90.0, min(90.0, elevation))

    azimuth_rad = math.atan2(
        math.sin(ha_rad),
        math.cos(ha_rad) * math.sin(lat_rad) - math.tan(dec_rad) * math.cos(lat_rad),
    )
    azimuth = (math.degrees(azimuth_rad) + 180.0) % 360.0
    if azimuth >= 360.0:
        azimuth = 0.0

    return SolarPosition(
        azimuth=azimuth,
        elevation=elevation,
        timestamp=utc,
        location=location,
    )
