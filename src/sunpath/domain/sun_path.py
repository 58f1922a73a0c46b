# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Daily sun path construction.

Samples the solar position across one day at a fixed step, detects
visibility transitions between consecutive samples, and refines
sunrise and sunset by bisection only inside those brackets.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo

from sunpath.domain.constants import AstronomicalConstants
from sunpath.domain.coordinates import GeographicCoordinate, require_valid
from sunpath.domain.solar_position import SolarPosition, solar_position
from sunpath.domain.sun_events import DEFAULT_EVENT_PRECISION, refine_transition

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class SunPathConfig:
    """Sampling cadence and event precision for daily sun paths."""
    sample_step: timedelta = timedelta(minutes=15)
    samples_per_day: int = 96
    event_precision: timedelta = DEFAULT_EVENT_PRECISION

    def __post_init__(self):
        if self.sample_step <= timedelta(0):
            raise ValueError(f"Sample step must be positive, got {self.sample_step}")
        if self.samples_per_day <= 0:
            raise ValueError(f"Samples per day must be positive, got {self.samples_per_day}")
        if self.event_precision <= timedelta(0):
            raise ValueError(f"Event precision must be positive, got {self.event_precision}")


DEFAULT_SUN_PATH_CONFIG = SunPathConfig()


@dataclass(frozen=True)
class SunPath:
    """
    The Sun's path across one day at one location.

    sunrise/sunset are None when no such transition happens during the
    day: always the case on polar days and polar nights.
    """
    location: GeographicCoordinate
    date: date
    daily_positions: tuple[SolarPosition, ...]
    sunrise: SolarPosition | None = None
    sunset: SolarPosition | None = None

    @property
    def has_sunrise(self) -> bool:
        return self.sunrise is not None

    @property
    def has_sunset(self) -> bool:
        return self.sunset is not None

    @property
    def is_polar_day(self) -> bool:
        return all(p.is_sun_visible for p in self.daily_positions)

    @property
    def is_polar_night(self) -> bool:
        return not any(p.is_sun_visible for p in self.daily_positions)

    @property
    def max_elevation(self) -> float:
        return max(p.elevation for p in self.daily_positions)

    @property
    def min_elevation(self) -> float:
        return min(p.elevation for p in self.daily_positions)

    @property
    def daylight_duration(self) -> timedelta | None:
        """
        Time between sunrise and sunset, or None if either is missing.

        When the day window opens with the Sun up, sunset precedes
        sunrise; the visible time is then the window minus the night.
        """
        if self.sunrise is None or self.sunset is None:
            return None
        duration = self.sunset.timestamp - self.sunrise.timestamp
        if duration < timedelta(0):
            duration += _ONE_DAY
        return duration

    @property
    def requires_special_visualization(self) -> bool:
        return (self.is_polar_day or self.is_polar_night
                or abs(self.location.latitude) >= AstronomicalConstants.POLAR_CIRCLE_LATITUDE)

    def polar_condition_message(self) -> str:
        """Short human-readable summary of the day's lighting."""
        max_el = self.max_elevation
        if self.is_polar_day:
            return f"Midnight Sun: The sun remains above the horizon all day. Max elevation: {max_el:.1f}°"
        if self.is_polar_night:
            if max_el > AstronomicalConstants.CIVIL_TWILIGHT:
                return f"Civil Twilight: Continuous twilight conditions. Max elevation: {max_el:.1f}°"
            if max_el > AstronomicalConstants.NAUTICAL_TWILIGHT:
                return f"Nautical Twilight: Navigation by stars possible. Max elevation: {max_el:.1f}°"
            if max_el > AstronomicalConstants.ASTRONOMICAL_TWILIGHT:
                return f"Astronomical Twilight: Dark sky conditions. Max elevation: {max_el:.1f}°"
            return f"Polar Night: Complete darkness. Max elevation: {max_el:.1f}°"
        duration = self.daylight_duration
        if duration is None:
            return "Normal conditions"
        return f"Normal day/night cycle. Daylight: {format_duration(duration)}"

    def __str__(self) -> str:
        return f"Sun path for {self.date.isoformat()} at {self.location}"


def format_duration(duration: timedelta) -> str:
    """Format a duration as HH:MM."""
    total_minutes = int(duration.total_seconds() // 60)
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def day_start_utc(day: date, tz: tzinfo | None = None) -> datetime:
    """
    Midnight opening the given day (in tz, default UTC) as a UTC instant.

    Raises:
        ValueError: If the instant falls outside the datetime range.
    """
    midnight = datetime(day.year, day.month, day.day, tzinfo=tz or timezone.utc)
    try:
        return midnight.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"Day {day.isoformat()} is outside the supported date range") from e


def _day_window(
    day: date, tz: tzinfo | None, config: SunPathConfig,
) -> tuple[list[datetime], datetime]:
    """Sample instants of the day and the instant one step past the last."""
    start = day_start_utc(day, tz)
    try:
        after_end = start + config.samples_per_day * config.sample_step
    except OverflowError as e:
        raise ValueError(f"Day {day.isoformat()} is outside the supported date range") from e
    return [start + i * config.sample_step for i in range(config.samples_per_day)], after_end


def daily_sun_path(
    location: GeographicCoordinate,
    day: date,
    tz: tzinfo | None = None,
    config: SunPathConfig = DEFAULT_SUN_PATH_CONFIG,
) -> SunPath:
    """
    Build the sun path for one day.

    Samples start at midnight of the day (UTC, or local midnight in tz).
    Sunrise is the first invisible-to-visible transition between
    consecutive samples; sunset is the last visible-to-invisible one,
    the final sample being compared with the instant one step later.

    Args:
        location: Observer location.
        day: Calendar date.
        tz: Optional zone whose midnight opens the day.
        config: Sampling cadence and event precision.

    Returns:
        SunPath with all samples and the refined events (None if absent).

    Raises:
        ValueError: If the day window falls outside the datetime range.
        InvalidCoordinateError: If the location is out of range.
    """
    require_valid(location)

    times, after_end = _day_window(day, tz, config)
    step = config.sample_step
    positions = tuple(solar_position(location, t) for t in times)
    visible = [p.is_sun_visible for p in positions]

    sunrise: SolarPosition | None = None
    for i in range(1, len(positions)):
        if visible[i] and not visible[i - 1]:
            sunrise = refine_transition(
                location, times[i - 1], times[i], True, config.event_precision,
            )
            break

    sunset: SolarPosition | None = None
    # All samples visible: polar day, no sunset inside the window.
    if not all(visible):
        # Visibility one step past the last sample closes the final bracket.
        visible_after = visible[1:] + [solar_position(location, after_end).is_sun_visible]
        for i in range(len(positions) - 1, -1, -1):
            if visible[i] and not visible_after[i]:
                sunset = refine_transition(
                    location, times[i], times[i] + step, False, config.event_precision,
                )
                break

    logger.debug(
        "Sun path %s at %s: sunrise=%s sunset=%s",
        day.isoformat(), location,
        sunrise.timestamp.isoformat() if sunrise else None,
        sunset.timestamp.isoformat() if sunset else None,
    )

    return SunPath(
        location=location,
        date=day,
        daily_positions=positions,
        sunrise=sunrise,
        sunset=sunset,
    )


def sun_paths_for_range(
    location: GeographicCoordinate,
    start_day: date,
    days: int,
    tz: tzinfo | None = None,
    config: SunPathConfig = DEFAULT_SUN_PATH_CONFIG,
) -> list[SunPath]:
    """
    Sun paths for consecutive days, in calendar order.

    Raises:
        ValueError: If days is not positive.
        InvalidCoordinateError: If the location is out of range.
    """
    if days <= 0:
        raise ValueError(f"Number of days must be positive, got {days}")
    require_valid(location)
    return [
        daily_sun_path(location, start_day + timedelta(days=offset), tz, config)
        for offset in range(days)
    ]
