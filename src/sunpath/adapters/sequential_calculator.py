# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sequential solar calculator.

Thin adapter binding the SolarCalculator port to the pure domain
functions, evaluated one call at a time on the caller's thread.
"""
from datetime import date, datetime, tzinfo

from sunpath.domain import julian, solar
from sunpath.domain import equation_of_time as eot
from sunpath.domain import polar, solar_position, sun_path
from sunpath.domain.coordinates import GeographicCoordinate
from sunpath.ports import SolarCalculator


class SequentialSolarCalculator(SolarCalculator):
    """Runs every calculation in the calling thread."""

    def __init__(self, config: sun_path.SunPathConfig = sun_path.DEFAULT_SUN_PATH_CONFIG):
        self._config = config

    def julian_day(self, instant: datetime) -> float:
        return julian.julian_day(instant)

    def solar_declination(self, julian_day: float) -> float:
        return solar.solar_declination(julian_day)

    def equation_of_time(self, day: date | datetime) -> float:
        return solar.equation_of_time(day)

    def solar_position(
        self, location: GeographicCoordinate, instant: datetime,
    ) -> solar_position.SolarPosition:
        return solar_position.solar_position(location, instant)

    def daily_sun_path(
        self, location: GeographicCoordinate, day: date, tz: tzinfo | None = None,
    ) -> sun_path.SunPath:
        return sun_path.daily_sun_path(location, day, tz, self._config)

    def sun_paths_for_range(
        self,
        location: GeographicCoordinate,
        start_day: date,
        days: int,
        tz: tzinfo | None = None,
    ) -> list[sun_path.SunPath]:
        return sun_path.sun_paths_for_range(location, start_day, days, tz, self._config)

    def annual_equation_of_time(self, year: int) -> list[eot.EquationOfTimeDatum]:
        return eot.annual_equation_of_time(year)

    def polar_condition(
        self, location: GeographicCoordinate, day: date, tz: tzinfo | None = None,
    ) -> polar.PolarCondition:
        return polar.polar_condition(location, day, tz, self._config)

    def is_polar_region(self, location: GeographicCoordinate) -> bool:
        return polar.is_polar_region(location)
