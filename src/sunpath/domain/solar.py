# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

Low-precision Sun coordinates from the mean longitude and mean anomaly
(Astronomical Almanac / Meeus Ch. 25 simplified series). Accuracy is
roughly 0.01° in declination and up to about half a minute in the
equation of time (fixed eccentricity, truncated series), sufficient for
sun path and daylight analysis.
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone

import numpy as np

from sunpath.domain.constants import AstronomicalConstants
from sunpath.domain.julian import julian_day

_OBLIQUITY_RAD = float(np.radians(AstronomicalConstants.EARTH_OBLIQUITY))
_E = AstronomicalConstants.ECCENTRICITY_FACTOR


@dataclass(frozen=True)
class SolarEphemeris:
    """Sun ephemeris quantities at a given Julian Day."""
    julian_day: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    ecliptic_longitude_deg: float
    declination_deg: float
    equation_of_time_min: float  # apparent minus mean solar time


def mean_longitude_deg(n: float) -> float:
    """Mean longitude of the Sun, n days after J2000.0, in [0, 360)."""
    return (280.460 + 0.9856474 * n) % 360.0


def mean_anomaly_deg(n: float) -> float:
    """Mean anomaly of the Sun, n days after J2000.0, in [0, 360)."""
    return (357.528 + 0.9856003 * n) % 360.0


def ecliptic_longitude_deg(n: float) -> float:
    """Apparent ecliptic longitude (equation of centre applied)."""
    g_rad = float(np.radians(mean_anomaly_deg(n)))
    return (mean_longitude_deg(n)
            + 1.915 * float(np.sin(g_rad))
            + 0.020 * float(np.sin(2.0 * g_rad)))


def solar_declination(jd: float) -> float:
    """
    Solar declination in degrees.

    asin(sin(obliquity) * sin(ecliptic longitude)); the magnitude never
    exceeds the obliquity.
    """
    n = jd - AstronomicalConstants.J2000
    lambda_rad = float(np.radians(ecliptic_longitude_deg(n)))
    return float(np.degrees(np.arcsin(np.sin(_OBLIQUITY_RAD) * np.sin(lambda_rad))))


def _equation_of_time_from_n(n: float) -> float:
    l_rad = float(np.radians(mean_longitude_deg(n)))
    g_rad = float(np.radians(mean_anomaly_deg(n)))

    y = float(np.tan(_OBLIQUITY_RAD / 2.0)) ** 2

    sin2l = float(np.sin(2.0 * l_rad))
    cos2l = float(np.cos(2.0 * l_rad))
    sin4l = float(np.sin(4.0 * l_rad))
    sing = float(np.sin(g_rad))
    sin2g = float(np.sin(2.0 * g_rad))

    eot_rad = (y * sin2l
               - 2.0 * _E * sing
               + 4.0 * _E * y * sing * cos2l
               - 0.5 * y * y * sin4l
               - 1.25 * _E * _E * sin2g)

    # 4 minutes of time per degree of rotation
    return float(np.degrees(eot_rad)) * 4.0


def _as_instant(when: date | datetime) -> datetime:
    if isinstance(when, datetime):
        return when
    return datetime(when.year, when.month, when.day, tzinfo=timezone.utc)


def equation_of_time(when: date | datetime) -> float:
    """
    Equation of time in minutes.

    Positive when the apparent Sun is ahead of the mean Sun (sundial fast).

    Args:
        when: A date (taken at 00:00 UTC) or an instant.
    """
    n = julian_day(_as_instant(when)) - AstronomicalConstants.J2000
    return _equation_of_time_from_n(n)


def solar_ephemeris(when: date | datetime) -> SolarEphemeris:
    """All ephemeris quantities for one instant."""
    jd = julian_day(_as_instant(when))
    n = jd - AstronomicalConstants.J2000
    return SolarEphemeris(
        julian_day=jd,
        mean_longitude_deg=mean_longitude_deg(n),
        mean_anomaly_deg=mean_anomaly_deg(n),
        ecliptic_longitude_deg=ecliptic_longitude_deg(n) % 360.0,
        declination_deg=solar_declination(jd),
        equation_of_time_min=_equation_of_time_from_n(n),
    )
