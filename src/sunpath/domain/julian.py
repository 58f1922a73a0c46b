# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Julian Day conversion.

Meeus "Astronomical Algorithms" Ch. 7 civil-to-Julian algorithm for the
proleptic Gregorian calendar. Naive datetimes are taken as UTC.

No external dependencies — only stdlib math/datetime.
"""
import math
from datetime import datetime, timezone

from sunpath.domain.constants import AstronomicalConstants


def as_utc(instant: datetime) -> datetime:
    """Return the instant as an aware UTC datetime (naive means UTC)."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def utc_hours(instant: datetime) -> float:
    """Fractional UTC clock hours of the instant, in [0, 24)."""
    utc = as_utc(instant)
    return (utc.hour + utc.minute / 60.0 + utc.second / 3600.0
            + utc.microsecond / 3.6e9)


def julian_day(instant: datetime) -> float:
    """
    Julian Day of a UTC instant.

    January and February are counted as months 13 and 14 of the previous
    year before the Gregorian leap-day correction is applied.

    Args:
        instant: Calendar instant; aware values are converted to UTC.

    Returns:
        Continuous day count; 2000-01-01T12:00:00Z maps to J2000.
    """
    utc = as_utc(instant)
    year = utc.year
    month = utc.month

    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + a // 4

    return (math.floor(365.25 * (year + 4716))
            + math.floor(30.6001 * (month + 1))
            + utc.day + utc_hours(utc) / 24.0 + b - 1524.5)


def days_since_j2000(instant: datetime) -> float:
    """Days elapsed since J2000.0 (negative before it)."""
    return julian_day(instant) - AstronomicalConstants.J2000


def julian_centuries_j2000(instant: datetime) -> float:
    """Julian centuries since J2000.0 (2000-01-01 12:00:00 UTC)."""
    return days_since_j2000(instant) / AstronomicalConstants.DAYS_PER_JULIAN_CENTURY
