# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for polar lighting condition classification."""
from datetime import date, datetime, timedelta, timezone

import pytest

from sunpath.domain.coordinates import GeographicCoordinate, InvalidCoordinateError
from sunpath.domain.polar import (
    PolarCondition,
    PolarConditionType,
    classify_polar_condition,
    is_polar_region,
    polar_condition,
)
from sunpath.domain.solar_position import SolarPosition
from sunpath.domain.sun_path import SunPath


_TROMSO = GeographicCoordinate(69.6492, 18.9553)
_GREENWICH = GeographicCoordinate(51.4769, 0.0)
_ARCTIC = GeographicCoordinate(80.0, 0.0)


def _path(location, elevations, sunrise=None, sunset=None):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    positions = tuple(
        SolarPosition(180.0, el, start + timedelta(minutes=15 * i), location)
        for i, el in enumerate(elevations)
    )
    return SunPath(location, start.date(), positions, sunrise, sunset)


# ── Polar region flag ─────────────────────────────────────────────

class TestIsPolarRegion:

    @pytest.mark.parametrize(
        "latitude, expected",
        [
            (66.5, True), (-66.5, True), (90.0, True), (-90.0, True),
            (66.49, False), (-66.49, False), (0.0, False), (51.48, False),
        ],
    )
    def test_polar_circle_threshold(self, latitude, expected):
        assert is_polar_region(GeographicCoordinate(latitude, 10.0)) is expected

    def test_invalid_location_is_not_polar(self):
        assert is_polar_region(GeographicCoordinate(95.0, 0.0)) is False


# ── Classification from a sun path ────────────────────────────────

class TestClassifyPolarCondition:

    def test_all_visible_is_midnight_sun(self):
        cond = classify_polar_condition(_ARCTIC, _path(_ARCTIC, [0.5, 10.0, 3.0]))
        assert cond.type is PolarConditionType.MIDNIGHT_SUN
        assert cond.daylight_duration == timedelta(hours=24)
        assert cond.max_elevation == 10.0
        assert cond.min_elevation == 0.5

    @pytest.mark.parametrize(
        "max_elevation, expected",
        [
            (-0.1, PolarConditionType.CIVIL_TWILIGHT),
            (0.0, PolarConditionType.CIVIL_TWILIGHT),
            (-5.99, PolarConditionType.CIVIL_TWILIGHT),
            (-6.0, PolarConditionType.NAUTICAL_TWILIGHT),
            (-11.99, PolarConditionType.NAUTICAL_TWILIGHT),
            (-12.0, PolarConditionType.ASTRONOMICAL_TWILIGHT),
            (-17.99, PolarConditionType.ASTRONOMICAL_TWILIGHT),
            (-18.0, PolarConditionType.POLAR_NIGHT),
            (-40.0, PolarConditionType.POLAR_NIGHT),
        ],
    )
    def test_dark_day_bands(self, max_elevation, expected):
        path = _path(_ARCTIC, [max_elevation - 5.0, max_elevation, max_elevation - 1.0])
        cond = classify_polar_condition(_ARCTIC, path)
        assert cond.type is expected
        assert cond.daylight_duration == timedelta(0)

    def test_mixed_is_normal(self):
        rise = SolarPosition(90.0, 0.0, datetime(2024, 1, 1, 8, tzinfo=timezone.utc), _GREENWICH)
        sett = SolarPosition(270.0, 0.0, datetime(2024, 1, 1, 16, tzinfo=timezone.utc), _GREENWICH)
        path = _path(_GREENWICH, [-10.0, 15.0, -10.0], rise, sett)
        cond = classify_polar_condition(_GREENWICH, path)
        assert cond.type is PolarConditionType.NORMAL
        assert cond.daylight_duration == timedelta(hours=8)
        assert not cond.requires_special_visualization
        assert cond.is_polar_region is False

    def test_polar_region_flag_independent_of_lighting(self):
        cond = classify_polar_condition(_ARCTIC, _path(_ARCTIC, [-10.0, 15.0]))
        assert cond.type is PolarConditionType.NORMAL
        assert cond.is_polar_region is True

    def test_description_matches_type(self):
        cond = classify_polar_condition(_ARCTIC, _path(_ARCTIC, [-30.0, -20.0]))
        assert cond.description.startswith("Complete polar night")


# ── Real days ─────────────────────────────────────────────────────

class TestPolarConditionScenarios:

    def test_tromso_midsummer(self):
        cond = polar_condition(_TROMSO, date(2024, 6, 21))
        assert cond.type is PolarConditionType.MIDNIGHT_SUN
        assert cond.is_polar_region
        assert cond.requires_special_visualization

    def test_tromso_equinox_normal(self):
        cond = polar_condition(_TROMSO, date(2024, 3, 20))
        assert cond.type is PolarConditionType.NORMAL
        assert cond.is_polar_region
        assert 11.5 <= cond.daylight_duration.total_seconds() / 3600.0 <= 13.0

    def test_greenwich_normal(self):
        cond = polar_condition(_GREENWICH, date(2024, 12, 21))
        assert cond.type is PolarConditionType.NORMAL
        assert not cond.is_polar_region

    @pytest.mark.parametrize(
        "latitude, expected",
        [
            (70.0, PolarConditionType.CIVIL_TWILIGHT),
            (75.0, PolarConditionType.NAUTICAL_TWILIGHT),
            (80.0, PolarConditionType.ASTRONOMICAL_TWILIGHT),
            (89.0, PolarConditionType.POLAR_NIGHT),
        ],
    )
    def test_december_solstice_depths(self, latitude, expected):
        cond = polar_condition(GeographicCoordinate(latitude, 0.0), date(2024, 12, 21))
        assert cond.type is expected
        assert cond.daylight_duration == timedelta(0)

    def test_polar_night_starts_above_polar_circle(self):
        """Refraction keeps the Sun up at 67.0° on the winter solstice."""
        day = date(2024, 12, 21)
        lit = polar_condition(GeographicCoordinate(67.0, 0.0), day)
        assert lit.type is PolarConditionType.NORMAL
        assert lit.is_polar_region
        assert lit.max_elevation > 0.0

        dark = polar_condition(GeographicCoordinate(67.5, 0.0), day)
        assert dark.type is PolarConditionType.CIVIL_TWILIGHT
        assert dark.daylight_duration == timedelta(0)

    def test_southern_midwinter(self):
        cond = polar_condition(GeographicCoordinate(-89.0, 0.0), date(2024, 6, 21))
        assert cond.type is PolarConditionType.POLAR_NIGHT

    def test_invalid_location(self):
        with pytest.raises(InvalidCoordinateError):
            polar_condition(GeographicCoordinate(-91.0, 0.0), date(2024, 6, 21))


# ── User messages ─────────────────────────────────────────────────

class TestUserMessage:

    def _condition(self, condition_type, daylight=None):
        return PolarCondition(
            type=condition_type,
            description="",
            is_polar_region=True,
            max_elevation=12.34,
            min_elevation=-1.0,
            daylight_duration=daylight,
        )

    def test_midnight_sun(self):
        msg = self._condition(PolarConditionType.MIDNIGHT_SUN).user_message()
        assert msg.startswith("Midnight Sun:")
        assert "12.3°" in msg

    def test_polar_night(self):
        msg = self._condition(PolarConditionType.POLAR_NIGHT).user_message()
        assert msg.startswith("Polar Night:")

    @pytest.mark.parametrize(
        "condition_type, prefix",
        [
            (PolarConditionType.CIVIL_TWILIGHT, "Civil Twilight:"),
            (PolarConditionType.NAUTICAL_TWILIGHT, "Nautical Twilight:"),
            (PolarConditionType.ASTRONOMICAL_TWILIGHT, "Astronomical Twilight:"),
        ],
    )
    def test_twilight(self, condition_type, prefix):
        assert self._condition(condition_type).user_message().startswith(prefix)

    def test_normal_with_duration(self):
        msg = self._condition(PolarConditionType.NORMAL, timedelta(hours=9, minutes=5)).user_message()
        assert msg == "Normal day/night cycle. Daylight duration: 09:05"

    def test_normal_without_duration(self):
        assert self._condition(PolarConditionType.NORMAL).user_message() == "Normal day/night cycle"

    def test_type_values(self):
        assert {t.value for t in PolarConditionType} == {
            "normal", "midnight_sun", "polar_night",
            "civil_twilight", "nautical_twilight", "astronomical_twilight",
        }
