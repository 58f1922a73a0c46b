# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for solar calculations.

Adapters implement this to run the domain calculations sequentially or
distributed across workers.
"""
from datetime import date, datetime, tzinfo
from typing import Protocol, runtime_checkable

from sunpath.domain.coordinates import GeographicCoordinate
from sunpath.domain.equation_of_time import EquationOfTimeDatum
from sunpath.domain.polar import PolarCondition
from sunpath.domain.solar_position import SolarPosition
from sunpath.domain.sun_path import SunPath


@runtime_checkable
class SolarCalculator(Protocol):
    """Port for solar position, sun path and equation-of-time queries."""

    def julian_day(self, instant: datetime) -> float:
        """Julian Day of a UTC instant."""
        ...

    def solar_declination(self, julian_day: float) -> float:
        """Solar declination in degrees."""
        ...

    def equation_of_time(self, day: date | datetime) -> float:
        """Equation of time in minutes."""
        ...

    def solar_position(
        self, location: GeographicCoordinate, instant: datetime,
    ) -> SolarPosition:
        """Apparent Sun position; raises InvalidCoordinateError."""
        ...

    def daily_sun_path(
        self, location: GeographicCoordinate, day: date, tz: tzinfo | None = None,
    ) -> SunPath:
        """Sampled path with refined sunrise/sunset; raises InvalidCoordinateError."""
        ...

    def sun_paths_for_range(
        self,
        location: GeographicCoordinate,
        start_day: date,
        days: int,
        tz: tzinfo | None = None,
    ) -> list[SunPath]:
        """Sun paths for consecutive days, in calendar order."""
        ...

    def annual_equation_of_time(self, year: int) -> list[EquationOfTimeDatum]:
        """Equation of time for every day of the year, in calendar order."""
        ...

    def polar_condition(
        self, location: GeographicCoordinate, day: date, tz: tzinfo | None = None,
    ) -> PolarCondition:
        """Lighting classification; raises InvalidCoordinateError."""
        ...

    def is_polar_region(self, location: GeographicCoordinate) -> bool:
        """Latitude at or beyond a polar circle."""
        ...
