"""A user-defined terrain file on disk, edited point by point or as raw text."""

from __future__ import annotations

import os
from pathlib import Path

from .udt import UdtError, UserPoint

__all__ = ["UserDataFile"]

_ENCODING = "utf-8"


class UserDataFile:
    """A .udt file holding one 'latitude, longitude, height' point per line."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def _raw(self) -> str:
        try:
            return self.path.read_bytes().decode(_ENCODING, errors="replace")
        except FileNotFoundError:
            return ""

    def _write_lines(self, lines: list[str]) -> None:
        self.path.write_bytes("".join(line + "\n" for line in lines).encode(_ENCODING))

    def _stored_lines(self) -> list[str]:
        """Lines of the trimmed contents, as they are replaced or removed by index."""
        text = self._raw().strip()
        return text.split("\n") if text else []

    def lines(self) -> list[str]:
        """The non-empty lines of the file, trimmed, in file order."""
        return [line.strip() for line in self._raw().split("\n") if line.strip()]

    def points(self) -> list[UserPoint]:
        """Every non-empty line parsed as a point."""
        return [UserPoint.from_line(line) for line in self.lines()]

    def point(self, index: int) -> UserPoint:
        """The point on the given line of the file (counting from 0)."""
        stored = self._stored_lines()
        if not 0 <= index < len(stored):
            raise IndexError(f"no line {index} in {self.path}")
        return UserPoint.from_line(stored[index].strip())

    def contains_line(self, text: str) -> bool:
        """True when some line of the file contains the text."""
        if not self.path.exists():
            return False
        return any(text in line for line in self._raw().split("\n"))

    def _check_new(self, point: UserPoint) -> str:
        line = point.to_line()
        if line in self.lines():
            raise UdtError("Invalid point line (duplicate)")
        point.validate()
        return line

    def add_point(self, point: UserPoint) -> str:
        """Validate a point and append it to the file; return the line written."""
        line = self._check_new(point)
        with self.path.open("ab") as handle:
            handle.write((line + "\n").encode(_ENCODING))
        return line

    def replace_point(self, index: int, point: UserPoint) -> str:
        """Validate a point and put it in place of the given line; return that line."""
        stored = self._stored_lines()
        if not 0 <= index < len(stored):
            raise UdtError("line is not exist")
        line = self._check_new(point)
        stored[index] = line
        self._write_lines(stored)
        return line

    def delete_point(self, index: int) -> None:
        """Remove the given line from the file."""
        stored = self._stored_lines()
        if not 0 <= index < len(stored):
            raise UdtError("line is not exist")
        del stored[index]
        self._write_lines(stored)

    def read_text(self) -> str:
        """The whole contents of the file; empty when it does not exist."""
        return self._raw()

    def write_text(self, text: str) -> None:
        """Replace the contents with the trimmed text and a final newline."""
        self.path.write_bytes((text.strip() + "\n").encode(_ENCODING))

    def save_as(self, path: str | os.PathLike) -> Path:
        """Copy the trimmed contents to a new file and continue with that file."""
        stored = self._stored_lines() or [""]
        self.path = Path(path)
        self._write_lines(stored)
        return self.path

    def delete(self) -> None:
        """Remove the file from disk."""
        try:
            self.path.unlink()
        except OSError as exc:
            raise UdtError(str(exc)) from exc