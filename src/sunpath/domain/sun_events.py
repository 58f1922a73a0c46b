# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise/sunset refinement by bisection.

Narrows a time bracket known to contain one visibility transition
until it is no wider than the requested precision.

No external dependencies — only stdlib datetime.
"""
from datetime import datetime, timedelta

from sunpath.domain.coordinates import GeographicCoordinate
from sunpath.domain.solar_position import SolarPosition, solar_position

DEFAULT_EVENT_PRECISION = timedelta(seconds=30)


def refine_transition(
    location: GeographicCoordinate,
    start: datetime,
    end: datetime,
    finding_sunrise: bool,
    precision: timedelta = DEFAULT_EVENT_PRECISION,
) -> SolarPosition:
    """
    Locate a sunrise or sunset inside [start, end].

    The Sun must be invisible at start and visible at end for a sunrise
    (the reverse for a sunset). The bracket is not verified; with a bad
    bracket the result converges to one of its ends.

    Args:
        location: Observer location.
        start: Bracket start.
        end: Bracket end.
        finding_sunrise: True for sunrise, False for sunset.
        precision: Stop once the bracket is this narrow.

    Returns:
        SolarPosition at the midpoint of the final bracket.

    Raises:
        ValueError: If precision is not positive or end precedes start.
        InvalidCoordinateError: If the location is out of range.
    """
    if precision <= timedelta(0):
        raise ValueError(f"Precision must be positive, got {precision}")
    if end < start:
        raise ValueError(f"Bracket end {end} precedes start {start}")

    while end - start > precision:
        mid = start + (end - start) / 2
        visible = solar_position(location, mid).is_sun_visible

        if finding_sunrise == visible:
            end = mid
        else:
            start = mid

    return solar_position(location, start + (end - start) / 2)
