# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solar position calculations.

Usage:
    # Sun position now, or at a given UTC instant
    sunpath position --lat 51.4769 --lon 0.0
    sunpath position --lat 51.4769 --lon 0.0 --time 2024-03-20T12:00:00Z

    # Locations may also be given as text (decimal or DMS)
    sunpath position --coords "40° 42' 46\"N, 74° 0' 21\"W" --dms

    # Daily sun path with sunrise/sunset, optionally every sample
    sunpath path --lat 69.65 --lon 18.96 --date 2024-06-21 --samples
    sunpath path --lat 40.7128 --lon -74.006 --date 2024-06-21 --utc-offset -4

    # Polar lighting classification
    sunpath polar --lat 78.22 --lon 15.65 --date 2024-12-21

    # Annual equation-of-time table
    sunpath eot --year 2024
    sunpath eot --year 2024 --concurrent --extrema-only
"""
import argparse
import logging
import sys
from datetime import date, datetime, timedelta, timezone, tzinfo

from sunpath.adapters import ConcurrentSolarCalculator, SequentialSolarCalculator
from sunpath.domain.coordinates import (
    CoordinateFormat,
    GeographicCoordinate,
    format_coordinates,
    parse_coordinates,
    validate_coordinate,
)
from sunpath.domain.equation_of_time import EquationOfTimeDatum, equation_of_time_extrema
from sunpath.domain.polar import PolarCondition
from sunpath.domain.solar_position import SolarPosition
from sunpath.domain.sun_path import SunPath, format_duration
from sunpath.ports import SolarCalculator

logger = logging.getLogger(__name__)


def _parse_instant(text: str) -> datetime:
    """ISO 8601 instant; a trailing Z and naive values mean UTC."""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        instant = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid time {text!r}: expected ISO 8601") from e
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def _parse_day(text: str | None) -> date:
    if text is None:
        return datetime.now(tz=timezone.utc).date()
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid date {text!r}: expected YYYY-MM-DD") from e


def _offset_tz(hours: float | None) -> tzinfo | None:
    if hours is None:
        return None
    if not -14.0 <= hours <= 14.0:
        raise ValueError(f"UTC offset must be within ±14 hours, got {hours}")
    return timezone(timedelta(hours=hours))


def _resolve_location(args: argparse.Namespace) -> GeographicCoordinate:
    if args.coords:
        fmt = (CoordinateFormat.DEGREES_MINUTES_SECONDS if args.dms
               else CoordinateFormat.DECIMAL_DEGREES)
        return parse_coordinates(args.coords, fmt)
    if args.lat is None or args.lon is None:
        raise ValueError("Specify a location with --lat and --lon, or --coords")

    result = validate_coordinate(args.lat, args.lon)
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))
    for warning in result.warnings:
        logger.warning(warning)
    return GeographicCoordinate(args.lat, args.lon)


def _make_calculator(concurrent: bool = False) -> SolarCalculator:
    return ConcurrentSolarCalculator() if concurrent else SequentialSolarCalculator()


def format_position(position: SolarPosition) -> str:
    visibility = "visible" if position.is_sun_visible else "below horizon"
    return f"{position} ({visibility})"


def print_sun_path(path: SunPath, samples: bool = False) -> None:
    print(path)
    print(f"  Sunrise: {path.sunrise if path.sunrise else 'none'}")
    print(f"  Sunset:  {path.sunset if path.sunset else 'none'}")
    duration = path.daylight_duration
    if duration is not None:
        print(f"  Daylight: {format_duration(duration)}")
    print(f"  Max elevation: {path.max_elevation:.2f}°")
    print(f"  Min elevation: {path.min_elevation:.2f}°")
    print(f"  {path.polar_condition_message()}")
    if samples:
        for position in path.daily_positions:
            print(f"    {format_position(position)}")


def print_polar_condition(location: GeographicCoordinate, day: date,
                          condition: PolarCondition) -> None:
    print(f"Polar condition for {day.isoformat()} at {format_coordinates(location)}")
    print(f"  Type: {condition.type.value}")
    print(f"  {condition.description}")
    print(f"  Polar region: {'yes' if condition.is_polar_region else 'no'}")
    print(f"  Max elevation: {condition.max_elevation:.2f}°")
    print(f"  Min elevation: {condition.min_elevation:.2f}°")
    print(f"  {condition.user_message()}")


def print_equation_of_time(table: list[EquationOfTimeDatum],
                           extrema_only: bool = False) -> None:
    if not extrema_only:
        for datum in table:
            print(datum)
    minimum, maximum = equation_of_time_extrema(table)
    print(f"Minimum: {minimum}")
    print(f"Maximum: {maximum}")


def run_position(location: GeographicCoordinate, instant: datetime) -> SolarPosition:
    return _make_calculator().solar_position(location, instant)


def run_path(location: GeographicCoordinate, day: date,
             tz: tzinfo | None = None) -> SunPath:
    return _make_calculator().daily_sun_path(location, day, tz)


def run_polar(location: GeographicCoordinate, day: date,
              tz: tzinfo | None = None) -> PolarCondition:
    return _make_calculator().polar_condition(location, day, tz)


def run_eot(year: int, concurrent: bool = False) -> list[EquationOfTimeDatum]:
    return _make_calculator(concurrent).annual_equation_of_time(year)


def _add_location_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--lat', type=float, help="Latitude in degrees (north positive)")
    parser.add_argument('--lon', type=float, help="Longitude in degrees (east positive)")
    parser.add_argument(
        '--coords',
        help="Location as text, e.g. \"40.7128, -74.0060\" (overrides --lat/--lon)"
    )
    parser.add_argument(
        '--dms', action='store_true', default=False,
        help="Parse --coords as degrees-minutes-seconds"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sunpath',
        description="Solar position, sun path and equation-of-time calculator",
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    position = sub.add_parser('position', help="Sun azimuth and elevation at an instant")
    _add_location_args(position)
    position.add_argument(
        '--time',
        help="UTC instant in ISO 8601 (default: now)"
    )

    path = sub.add_parser('path', help="Daily sun path with sunrise and sunset")
    _add_location_args(path)
    path.add_argument('--date', help="Date YYYY-MM-DD (default: today UTC)")
    path.add_argument(
        '--utc-offset', type=float,
        help="Hours east of UTC whose midnight opens the day (default: 0)"
    )
    path.add_argument(
        '--samples', action='store_true', default=False,
        help="Print every sampled position"
    )

    polar = sub.add_parser('polar', help="Polar lighting condition for a date")
    _add_location_args(polar)
    polar.add_argument('--date', help="Date YYYY-MM-DD (default: today UTC)")
    polar.add_argument(
        '--utc-offset', type=float,
        help="Hours east of UTC whose midnight opens the day (default: 0)"
    )

    eot = sub.add_parser('eot', help="Annual equation-of-time table")
    eot.add_argument('--year', type=int, required=True, help="Calendar year")
    eot.add_argument(
        '--concurrent', action='store_true', default=False,
        help="Compute days on a thread pool"
    )
    eot.add_argument(
        '--extrema-only', action='store_true', default=False,
        help="Print only the annual minimum and maximum"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == 'position':
            location = _resolve_location(args)
            instant = (_parse_instant(args.time) if args.time
                       else datetime.now(tz=timezone.utc))
            print(format_position(run_position(location, instant)))

        elif args.command == 'path':
            location = _resolve_location(args)
            day = _parse_day(args.date)
            print_sun_path(
                run_path(location, day, _offset_tz(args.utc_offset)),
                samples=args.samples,
            )

        elif args.command == 'polar':
            location = _resolve_location(args)
            day = _parse_day(args.date)
            condition = run_polar(location, day, _offset_tz(args.utc_offset))
            print_polar_condition(location, day, condition)

        elif args.command == 'eot':
            table = run_eot(args.year, concurrent=args.concurrent)
            print_equation_of_time(table, extrema_only=args.extrema_only)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
