# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Annual equation-of-time table.

One datum per calendar day, each computed independently from the solar
ephemeris at 00:00 UTC of that day.
"""
import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta

import numpy as np

from sunpath.domain.solar import equation_of_time

logger = logging.getLogger(__name__)

_MIN_YEAR = 1
_MAX_YEAR = 9999


@dataclass(frozen=True)
class EquationOfTimeDatum:
    """Equation of time for one calendar day."""
    date: date
    minutes: float  # positive: apparent Sun ahead of mean Sun

    def __str__(self) -> str:
        return f"{self.date:%b %d}: {self.minutes:.2f} min"


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def year_dates(year: int) -> list[date]:
    """Every date of the year, January 1 through December 31."""
    _check_year(year)
    first = date(year, 1, 1)
    return [first + timedelta(days=i) for i in range(days_in_year(year))]


def _check_year(year: int) -> None:
    if not _MIN_YEAR <= year <= _MAX_YEAR:
        raise ValueError(
            f"Year must be between {_MIN_YEAR} and {_MAX_YEAR}, got {year}"
        )


def equation_of_time_datum(day: date) -> EquationOfTimeDatum:
    return EquationOfTimeDatum(date=day, minutes=equation_of_time(day))


def annual_equation_of_time(year: int) -> list[EquationOfTimeDatum]:
    """
    Equation of time for every day of a year, in calendar order.

    Args:
        year: Calendar year (1..9999).

    Returns:
        365 or 366 data, first January 1, last December 31.

    Raises:
        ValueError: If the year is out of range; no data is produced.
    """
    table = [equation_of_time_datum(day) for day in year_dates(year)]
    logger.debug("Equation of time table for %d: %d days", year, len(table))
    return table


def equation_of_time_extrema(
    table: list[EquationOfTimeDatum],
) -> tuple[EquationOfTimeDatum, EquationOfTimeDatum]:
    """
    Minimum and maximum data of an equation-of-time table.

    Returns:
        (minimum, maximum); the earliest datum wins ties.

    Raises:
        ValueError: If the table is empty.
    """
    if not table:
        raise ValueError("Equation of time table is empty")
    minutes = np.array([d.minutes for d in table])
    return table[int(np.argmin(minutes))], table[int(np.argmax(minutes))]
