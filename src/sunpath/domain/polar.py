# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Polar lighting condition classification.

Derives midnight sun, polar night and continuous twilight bands from a
day's sun path. The polar-region flag is a separate geometric check on
latitude alone.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta, tzinfo
from enum import Enum

from sunpath.domain.constants import AstronomicalConstants
from sunpath.domain.coordinates import GeographicCoordinate, require_valid
from sunpath.domain.sun_path import (
    DEFAULT_SUN_PATH_CONFIG,
    SunPath,
    SunPathConfig,
    daily_sun_path,
    format_duration,
)

logger = logging.getLogger(__name__)


class PolarConditionType(Enum):
    NORMAL = "normal"
    MIDNIGHT_SUN = "midnight_sun"
    POLAR_NIGHT = "polar_night"
    CIVIL_TWILIGHT = "civil_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"


_DESCRIPTIONS = {
    PolarConditionType.NORMAL:
        "Normal day and night cycle with sunrise and sunset.",
    PolarConditionType.MIDNIGHT_SUN:
        "The sun remains above the horizon for the entire 24-hour period.",
    PolarConditionType.POLAR_NIGHT:
        "Complete polar night - the sun remains well below the horizon.",
    PolarConditionType.CIVIL_TWILIGHT:
        "Continuous civil twilight - the sun stays close to but below the horizon.",
    PolarConditionType.NAUTICAL_TWILIGHT:
        "Continuous nautical twilight - suitable for navigation by stars.",
    PolarConditionType.ASTRONOMICAL_TWILIGHT:
        "Continuous astronomical twilight - dark sky conditions.",
}


@dataclass(frozen=True)
class PolarCondition:
    """Lighting condition of one day at one location."""
    type: PolarConditionType
    description: str
    is_polar_region: bool
    max_elevation: float
    min_elevation: float
    daylight_duration: timedelta | None = None

    @property
    def requires_special_visualization(self) -> bool:
        return self.type is not PolarConditionType.NORMAL

    def user_message(self) -> str:
        """Message suitable for display to an end user."""
        if self.type is PolarConditionType.MIDNIGHT_SUN:
            return ("Midnight Sun: The sun remains above the horizon for the entire day. "
                    f"Maximum elevation: {self.max_elevation:.1f}°")
        if self.type is PolarConditionType.POLAR_NIGHT:
            return ("Polar Night: The sun remains below the horizon for the entire day. "
                    f"Maximum elevation: {self.max_elevation:.1f}°")
        if self.type is PolarConditionType.CIVIL_TWILIGHT:
            return ("Civil Twilight: The sun stays between 0° and -6° below the horizon. "
                    "Continuous twilight conditions.")
        if self.type is PolarConditionType.NAUTICAL_TWILIGHT:
            return ("Nautical Twilight: The sun stays between -6° and -12° below the horizon. "
                    "Navigation by stars possible.")
        if self.type is PolarConditionType.ASTRONOMICAL_TWILIGHT:
            return ("Astronomical Twilight: The sun stays between -12° and -18° below the horizon. "
                    "Dark sky conditions for astronomy.")
        if self.daylight_duration is not None:
            return f"Normal day/night cycle. Daylight duration: {format_duration(self.daylight_duration)}"
        return "Normal day/night cycle"


def is_polar_region(location: GeographicCoordinate) -> bool:
    """True north of the Arctic or south of the Antarctic circle."""
    if not location.is_valid:
        return False
    return abs(location.latitude) >= AstronomicalConstants.POLAR_CIRCLE_LATITUDE


def _dark_day_type(max_elevation: float) -> PolarConditionType:
    if max_elevation > AstronomicalConstants.CIVIL_TWILIGHT:
        return PolarConditionType.CIVIL_TWILIGHT
    if max_elevation > AstronomicalConstants.NAUTICAL_TWILIGHT:
        return PolarConditionType.NAUTICAL_TWILIGHT
    if max_elevation > AstronomicalConstants.ASTRONOMICAL_TWILIGHT:
        return PolarConditionType.ASTRONOMICAL_TWILIGHT
    return PolarConditionType.POLAR_NIGHT


def classify_polar_condition(
    location: GeographicCoordinate,
    sun_path: SunPath,
) -> PolarCondition:
    """
    Classify a day's lighting from its sun path.

    Evaluated in order: all samples visible is midnight sun (24 h of
    daylight); no sample visible is civil, nautical or astronomical
    twilight or polar night by the day's maximum elevation (no
    daylight); anything else is a normal day.
    """
    max_el = sun_path.max_elevation
    min_el = sun_path.min_elevation

    if sun_path.is_polar_day:
        condition_type = PolarConditionType.MIDNIGHT_SUN
        daylight = timedelta(hours=24)
    elif sun_path.is_polar_night:
        condition_type = _dark_day_type(max_el)
        daylight = timedelta(0)
    else:
        condition_type = PolarConditionType.NORMAL
        daylight = sun_path.daylight_duration

    return PolarCondition(
        type=condition_type,
        description=_DESCRIPTIONS[condition_type],
        is_polar_region=is_polar_region(location),
        max_elevation=max_el,
        min_elevation=min_el,
        daylight_duration=daylight,
    )


def polar_condition(
    location: GeographicCoordinate,
    day: date,
    tz: tzinfo | None = None,
    config: SunPathConfig = DEFAULT_SUN_PATH_CONFIG,
) -> PolarCondition:
    """
    Lighting condition for a location and date.

    Raises:
        InvalidCoordinateError: If the location is out of range.
    """
    require_valid(location)
    condition = classify_polar_condition(location, daily_sun_path(location, day, tz, config))
    logger.debug("Polar condition %s at %s: %s", day.isoformat(), location, condition.type.value)
    return condition
