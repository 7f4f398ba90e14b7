"""Site location (.qth) files: a name, latitude, longitude and antenna height."""

from __future__ import annotations

import enum
import os
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

__all__ = [
    "HeightUnit",
    "QthError",
    "QthSite",
    "QthDirectory",
    "read_qth",
    "write_qth",
]

_SUFFIX = ".qth"


class HeightUnit(enum.Enum):
    """Unit of the antenna height; meters are marked with an 'm' suffix."""

    FEET = ""
    METERS = "m"


class QthError(ValueError):
    """A site is invalid or its file cannot be found."""


def _section(text: str, separator: str, index: int) -> str:
    parts = text.split(separator)
    return parts[index] if index < len(parts) else ""


@dataclass
class QthSite:
    """One transmitter or receiver site.

    ``latitude`` and ``longitude`` hold magnitudes, in decimal degrees or as
    'D M S'. ``south`` marks a negative latitude; ``east`` marks a negative
    longitude, since longitudes are written west-positive.
    """

    name: str = ""
    latitude: str = ""
    longitude: str = ""
    height: str = ""
    height_unit: HeightUnit = HeightUnit.FEET
    south: bool = False
    east: bool = False

    @classmethod
    def from_text(cls, text: str) -> "QthSite":
        """Parse the four-line contents of a .qth file."""
        height_line = _section(text, "\n", 3)
        if "m" in height_line:
            height = _section(height_line, "m", 0)
            unit = HeightUnit.METERS
        else:
            height = height_line
            unit = HeightUnit.FEET

        latitude = _section(text, "\n", 1)
        south = "-" in latitude
        if south:
            latitude = _section(latitude, "-", 1)

        longitude = _section(text, "\n", 2)
        east = "-" in longitude
        if east:
            longitude = _section(longitude, "-", 1)

        return cls(
            name=_section(text, "\n", 0),
            latitude=latitude,
            longitude=longitude,
            height=height,
            height_unit=unit,
            south=south,
            east=east,
        )

    def to_text(self) -> str:
        """Render the site as the contents of a .qth file."""
        latitude = self.latitude.strip()
        longitude = self.longitude.strip()
        if self.south and is_latitude(latitude):
            latitude = "-" + latitude
        if self.east and is_longitude(longitude):
            longitude = "-" + longitude
        height = self.height.strip() + self.height_unit.value
        return "".join(line + "\n" for line in (self.name, latitude, longitude, height))

    def validate(self) -> None:
        """Raise QthError naming the first field that is not acceptable."""
        if not is_latitude(self.latitude.strip()):
            raise QthError("Invalid latitude value")
        if not is_longitude(self.longitude.strip()):
            raise QthError("Invalid longitude value")
        if not is_dd_format(self.height):
            raise QthError("Invalid height value")
        if not is_not_empty(self.name):
            raise QthError("Invalid site name")

    @property
    def latitude_format(self) -> CoordinateFormat:
        """Format the latitude is written in."""
        return detect_format(self.latitude)

    @property
    def longitude_format(self) -> CoordinateFormat:
        """Format the longitude is written in."""
        return detect_format(self.longitude)


def read_qth(path: str | os.PathLike) -> QthSite:
    """Read a site from a .qth file."""
    return QthSite.from_text(Path(path).read_bytes().decode("utf-8"))


def write_qth(path: str | os.PathLike, site: QthSite) -> None:
    """Validate a site and write it to a .qth file."""
    site.validate()
    Path(path).write_bytes(site.to_text().encode("utf-8"))


class QthDirectory:
    """The .qth files kept in one directory."""

    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def files(self) -> list[str]:
        """Names of the .qth files present, sorted case-insensitively."""
        if not self.directory.is_dir():
            return []
        names = (
            entry.name
            for entry in self.directory.iterdir()
            if entry.is_file() and entry.name.endswith(_SUFFIX)
        )
        return sorted(names, key=lambda name: (name.lower(), name))

    def exists(self, file_name: str) -> bool:
        """True when a .qth file of that name is present."""
        return file_name in self.files()

    def _require(self, file_name: str) -> Path:
        if not self.exists(file_name):
            raise QthError("File is not exist")
        return self.directory / file_name

    def load(self, file_name: str) -> QthSite:
        """Read a site by file name; raise QthError if the file is missing."""
        return read_qth(self._require(file_name))

    def save(self, file_name: str, site: QthSite) -> Path:
        """Validate and write a site under the given file name."""
        path = self.directory / file_name
        write_qth(path, site)
        return path

    def delete(self, file_name: str) -> None:
        """Remove a site file; raise QthError if it is missing."""
        self._require(file_name).unlink()