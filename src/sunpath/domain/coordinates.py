# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geographic coordinates: value type, validation, parsing and formatting.

Supports decimal degrees ("40.7128, -74.0060") and degrees-minutes-seconds
(40° 42' 46"N, 74° 0' 21"W) text forms.

No external dependencies — only stdlib re/dataclasses/datetime/enum.
"""
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum

from sunpath.domain.constants import AstronomicalConstants

_MIN_VALID_DATE = date(1900, 1, 1)
_MAX_VALID_DATE = date(2100, 12, 31)

_DECIMAL_DEGREES_RE = re.compile(
    r"^(?P<lat>-?\d+(?:\.\d+)?)(?:\s*,\s*|\s+)(?P<lon>-?\d+(?:\.\d+)?)$"
)

_DMS_RE = re.compile(
    r"^(?P<lat_deg>\d+)[°\s]+(?P<lat_min>\d+)['\s]+(?P<lat_sec>\d+(?:\.\d+)?)[\"'\s]*(?P<lat_dir>[NS])"
    r"\s*,?\s*"
    r"(?P<lon_deg>\d+)[°\s]+(?P<lon_min>\d+)['\s]+(?P<lon_sec>\d+(?:\.\d+)?)[\"'\s]*(?P<lon_dir>[EW])$",
    re.IGNORECASE,
)


class CoordinateFormat(Enum):
    DECIMAL_DEGREES = "decimal"
    DEGREES_MINUTES_SECONDS = "dms"


@dataclass(frozen=True)
class GeographicCoordinate:
    """Observer location in decimal degrees (north and east positive)."""
    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """Both latitude and longitude lie within their bounds."""
        return (-90.0 <= self.latitude <= 90.0
                and -180.0 <= self.longitude <= 180.0)

    def __str__(self) -> str:
        return f"Lat: {self.latitude:.6f}°, Lon: {self.longitude:.6f}°"


class InvalidCoordinateError(ValueError):
    """Latitude or longitude outside the valid range."""

    def __init__(self, coordinate: GeographicCoordinate):
        self.coordinate = coordinate
        super().__init__(
            f"Invalid geographic coordinate ({coordinate.latitude}, "
            f"{coordinate.longitude}): latitude must be within [-90, 90] "
            f"and longitude within [-180, 180]"
        )


class CoordinateFormatError(ValueError):
    """Coordinate text could not be parsed."""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating user-supplied input."""
    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


def require_valid(location: GeographicCoordinate) -> None:
    """Raise InvalidCoordinateError unless the location is valid."""
    if not location.is_valid:
        raise InvalidCoordinateError(location)


def validate_coordinate(latitude: float, longitude: float) -> ValidationResult:
    """
    Check a latitude/longitude pair and collect advisory warnings.

    Errors make the result invalid. Warnings flag locations where the
    engine still works but results need care (poles, polar circles,
    equator).
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not -90.0 <= latitude <= 90.0:
        errors.append(
            f"Latitude must be between -90° and +90°. Current value: {latitude:.6f}°"
        )
    if not -180.0 <= longitude <= 180.0:
        errors.append(
            f"Longitude must be between -180° and +180°. Current value: {longitude:.6f}°"
        )

    if abs(latitude) > 89.9:
        warnings.append(
            "Extremely high latitude may cause calculation precision issues near the poles."
        )
    if abs(latitude) >= AstronomicalConstants.POLAR_CIRCLE_LATITUDE:
        warnings.append(
            "Location is in polar region. Expect midnight sun or polar night "
            "conditions during certain periods."
        )
    if abs(latitude) < 1.0:
        warnings.append(
            "Location is near the equator. Sun will pass nearly overhead "
            "during certain times of year."
        )

    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
    )


def validate_date(day: date) -> ValidationResult:
    """Check that a date lies in the band where the solar model is accurate."""
    if day < _MIN_VALID_DATE:
        return ValidationResult(
            is_valid=False,
            errors=(f"Date is too far in the past. Minimum supported date: {_MIN_VALID_DATE.isoformat()}",),
        )
    if day > _MAX_VALID_DATE:
        return ValidationResult(
            is_valid=False,
            errors=(f"Date is too far in the future. Maximum supported date: {_MAX_VALID_DATE.isoformat()}",),
        )
    return ValidationResult(is_valid=True)


def parse_coordinates(
    text: str,
    fmt: CoordinateFormat = CoordinateFormat.DECIMAL_DEGREES,
) -> GeographicCoordinate:
    """
    Parse a "latitude, longitude" string.

    Args:
        text: Coordinate text in the given format.
        fmt: Decimal degrees or degrees-minutes-seconds.

    Returns:
        A valid GeographicCoordinate.

    Raises:
        CoordinateFormatError: If the text does not match the format or
            the parsed values are out of range.
    """
    if not text or not text.strip():
        raise CoordinateFormatError("Input cannot be empty")

    if fmt is CoordinateFormat.DECIMAL_DEGREES:
        coordinate = _parse_decimal_degrees(text.strip())
    else:
        coordinate = _parse_dms(text.strip())

    if not coordinate.is_valid:
        raise CoordinateFormatError(
            "Coordinates out of valid range. Latitude: -90 to +90, "
            "Longitude: -180 to +180"
        )
    return coordinate


def _parse_decimal_degrees(text: str) -> GeographicCoordinate:
    match = _DECIMAL_DEGREES_RE.match(text)
    if match is None:
        raise CoordinateFormatError(
            "Invalid decimal degrees format. Expected: 'latitude, longitude' "
            "(e.g., '40.7128, -74.0060')"
        )
    return GeographicCoordinate(float(match["lat"]), float(match["lon"]))


def _parse_dms(text: str) -> GeographicCoordinate:
    match = _DMS_RE.match(text)
    if match is None:
        raise CoordinateFormatError(
            "Invalid DMS format. Expected: 'DD° MM' SS\"N/S, DD° MM' SS\"E/W' "
            "(e.g., '40° 42' 46\"N, 74° 0' 21\"W')"
        )

    lat_min, lon_min = int(match["lat_min"]), int(match["lon_min"])
    lat_sec, lon_sec = float(match["lat_sec"]), float(match["lon_sec"])
    if lat_min >= 60 or lat_sec >= 60 or lon_min >= 60 or lon_sec >= 60:
        raise CoordinateFormatError("Minutes and seconds must be less than 60")

    latitude = int(match["lat_deg"]) + lat_min / 60.0 + lat_sec / 3600.0
    longitude = int(match["lon_deg"]) + lon_min / 60.0 + lon_sec / 3600.0
    if match["lat_dir"].upper() == "S":
        latitude = -latitude
    if match["lon_dir"].upper() == "W":
        longitude = -longitude
    return GeographicCoordinate(latitude, longitude)


def _to_dms(value: float, positive: str, negative: str) -> tuple[int, int, float, str]:
    """Split into degrees, minutes and seconds rounded to 0.01 s, carrying up."""
    direction = negative if value < 0 else positive
    hundredths = round(abs(value) * 360000.0)
    degrees, hundredths = divmod(hundredths, 360000)
    minutes, hundredths = divmod(hundredths, 6000)
    return degrees, minutes, hundredths / 100.0, direction


def format_coordinates(
    coordinate: GeographicCoordinate,
    fmt: CoordinateFormat = CoordinateFormat.DECIMAL_DEGREES,
) -> str:
    """
    Format a coordinate for display.

    Raises:
        InvalidCoordinateError: If the coordinate is out of range.
    """
    require_valid(coordinate)

    if fmt is CoordinateFormat.DECIMAL_DEGREES:
        return f"{coordinate.latitude:.6f}, {coordinate.longitude:.6f}"

    lat_d, lat_m, lat_s, lat_dir = _to_dms(coordinate.latitude, "N", "S")
    lon_d, lon_m, lon_s, lon_dir = _to_dms(coordinate.longitude, "E", "W")
    return (
        f"{lat_d:02d}° {lat_m:02d}' {lat_s:05.2f}\"{lat_dir}, "
        f"{lon_d:03d}° {lon_m:02d}' {lon_s:05.2f}\"{lon_dir}"
    )

