"""User-defined terrain (.udt) points: one 'latitude, longitude, height' per line."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from .coords import (
    CoordinateFormat,
    detect_format,
    is_dd_format,
    is_latitude,
    is_longitude,
    is_not_empty,
)
from .qth import HeightUnit

__all__ = [
    "UdtError",
    "UserPoint",
    "is_height",
    "is_user_text",
    "is_user_file",
]

_FIELD_SEPARATOR = ", "
_NON_DIGIT_RE = re.compile(r"\D")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class UdtError(ValueError):
    """A user point is invalid."""


def _section(text: str, separator: str, index: int) -> str:
    parts = text.split(separator)
    return parts[index] if index < len(parts) else ""


def _to_float(text: str) -> float:
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    try:
        return float(stripped)
    except OverflowError:
        return 0.0


def is_height(text: str) -> bool:
    """True when the text is a non-negative height, optionally suffixed with 'm'."""
    parts = text.split(" ")
    if len(parts) != 1:
        return False
    value = parts[0]
    if "m" in value:
        value = _section(value, "m", 0)
    number = _to_float(value)
    if number < 0:
        return False
    return not _NON_DIGIT_RE.search(value) or ("." in value and number != 0)


@dataclass
class UserPoint:
    """One terrain point.

    ``latitude`` and ``longitude`` hold magnitudes; ``south`` marks a negative
    latitude and ``east`` a negative longitude, longitudes being west-positive.
    """

    latitude: str = ""
    longitude: str = ""
    height: str = ""
    height_unit: HeightUnit = HeightUnit.FEET
    south: bool = False
    east: bool = False

    @classmethod
    def from_line(cls, line: str) -> "UserPoint":
        """Parse one 'latitude, longitude, height' line."""
        latitude = _section(line, _FIELD_SEPARATOR, 0).strip()
        longitude = _section(line, _FIELD_SEPARATOR, 1).strip()
        height = _section(line, _FIELD_SEPARATOR, 2).strip()

        if "m" in height:
            height = _section(height, "m", 0)
            unit = HeightUnit.METERS
        else:
            unit = HeightUnit.FEET

        south = "-" in latitude
        if south:
            latitude = _section(latitude, "-", 1)
        east = "-" in longitude
        if east:
            longitude = _section(longitude, "-", 1)

        return cls(
            latitude=latitude,
            longitude=longitude,
            height=height,
            height_unit=unit,
            south=south,
            east=east,
        )

    def to_line(self) -> str:
        """Render the point as one line, without a line terminator."""
        latitude = self.latitude.strip()
        longitude = self.longitude.strip()
        lat_field = latitude + _FIELD_SEPARATOR
        lon_field = longitude + _FIELD_SEPARATOR
        if self.south and is_latitude(latitude):
            lat_field = "-" + lat_field
        if self.east and is_longitude(longitude):
            lon_field = "-" + lon_field
        height = self.height.strip() + self.height_unit.value
        return (lat_field + lon_field + height).strip()

    def validate(self) -> None:
        """Raise UdtError naming the first field that is not acceptable."""
        if not is_latitude(self.latitude.strip()):
            raise UdtError("Invalid latitude value")
        if not is_longitude(self.longitude.strip()):
            raise UdtError("Invalid longitude value")
        if not is_dd_format(self.height.strip()):
            raise UdtError("Invalid point height")

    @property
    def latitude_format(self) -> CoordinateFormat:
        """Format the latitude is written in."""
        return detect_format(self.latitude)

    @property
    def longitude_format(self) -> CoordinateFormat:
        """Format the longitude is written in."""
        return detect_format(self.longitude)


def is_user_text(text: str) -> bool:
    """True when the first line of the text is a valid user point."""
    first = text.split("\n")[0]
    latitude = _section(first, _FIELD_SEPARATOR, 0).strip()
    longitude = _section(first, _FIELD_SEPARATOR, 1).strip()
    height = _section(first, _FIELD_SEPARATOR, 2).strip()
    if "-" in longitude:
        longitude = _section(longitude, "-", 1)
    if "-" in latitude:
        latitude = _section(latitude, "-", 1)
    if not is_latitude(latitude) or not is_not_empty(latitude):
        return False
    if not is_longitude(longitude) or not is_not_empty(longitude):
        return False
    return is_height(height) and is_not_empty(height)


def is_user_file(path: str | os.PathLike) -> bool:
    """True when the file can be read and its first line is a valid user point."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return False
    return is_user_text(data.decode("utf-8", errors="replace"))