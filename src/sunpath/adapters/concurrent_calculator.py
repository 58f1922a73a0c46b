# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Concurrent solar calculator: parallelizes per-day batch work.

Uses ThreadPoolExecutor from stdlib to evaluate the days of an annual
equation-of-time table or a multi-day sun path range concurrently.
Domain functions are pure, so no locking is needed; results are
returned in calendar order.
"""
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta, tzinfo

from sunpath.adapters.sequential_calculator import SequentialSolarCalculator
from sunpath.domain import sun_path
from sunpath.domain.coordinates import GeographicCoordinate, require_valid
from sunpath.domain.equation_of_time import (
    EquationOfTimeDatum,
    equation_of_time_datum,
    year_dates,
)

_log = logging.getLogger(__name__)


class ConcurrentSolarCalculator(SequentialSolarCalculator):
    """
    Solar calculator with thread-pooled batch operations.

    Single-instant queries run on the caller's thread; annual tables and
    day ranges are fanned out one day per task.

    Args:
        max_workers: Thread pool size.
            Default: min(32, os.cpu_count() + 4), as ThreadPoolExecutor.
        config: Sampling cadence and event precision for sun paths.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        config: sun_path.SunPathConfig = sun_path.DEFAULT_SUN_PATH_CONFIG,
    ):
        super().__init__(config)
        if max_workers is not None and max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self._max_workers = max_workers or min(32, (os.cpu_count() or 1) + 4)

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def annual_equation_of_time(self, year: int) -> list[EquationOfTimeDatum]:
        days = year_dates(year)
        _log.debug(
            "Computing %d-day equation of time table for %d on %d workers",
            len(days), year, self._max_workers,
        )
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            return list(executor.map(equation_of_time_datum, days))

    def sun_paths_for_range(
        self,
        location: GeographicCoordinate,
        start_day: date,
        days: int,
        tz: tzinfo | None = None,
    ) -> list[sun_path.SunPath]:
        if days <= 0:
            raise ValueError(f"Number of days must be positive, got {days}")
        require_valid(location)

        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [
                executor.submit(
                    sun_path.daily_sun_path,
                    location, start_day + timedelta(days=offset), tz, self._config,
                )
                for offset in range(days)
            ]
            return [future.result() for future in futures]
