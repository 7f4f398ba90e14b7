"""Validation and conversion of decimal-degree and degree-minute-second coordinates."""

from __future__ import annotations

import enum
import re
import struct

__all__ = [
    "CoordinateFormat",
    "is_not_empty",
    "is_dd_format",
    "is_dms_format",
    "is_longitude",
    "is_latitude",
    "dd_to_dms",
    "dms_to_dd",
    "detect_format",
    "convert_coordinate",
]

_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_NON_DIGIT_RE = re.compile(r"\D")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class CoordinateFormat(enum.Enum):
    """How an angle is written: decimal degrees or degrees, minutes, seconds."""

    DD = "dd"
    DMS = "dms"


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_float(text: str) -> float:
    """Parse a number leniently; anything unparsable becomes 0."""
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        return 0.0
    try:
        return _f32(float(stripped))
    except OverflowError:
        return 0.0


def _to_int(text: str) -> int:
    """Parse a whole number leniently; anything unparsable becomes 0."""
    stripped = text.strip()
    if not _INT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


def _leading_int(text: str) -> int:
    """Parse the integer that starts a string, raising if there is none."""
    match = _LEADING_INT_RE.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range in {text!r}")
    return value


def _number(value: float) -> str:
    return f"{value:.6g}"


def _field(parts: list[str], index: int) -> str:
    return parts[index] if index < len(parts) else ""


def is_not_empty(text: str) -> bool:
    """True when the text holds anything besides whitespace."""
    return text.strip() != ""


def is_dd_format(text: str) -> bool:
    """True when the text reads as a non-negative decimal-degree value."""
    parts = text.split(" ")
    if len(parts) != 1:
        return False
    value = parts[0]
    number = _to_float(value)
    if number < 0:
        return False
    return not _NON_DIGIT_RE.search(value) or ("." in value and number != 0)


def is_dms_format(text: str) -> bool:
    """True when the text reads as 'D M S' with minutes and seconds below 60."""
    parts = text.split(" ")
    if len(parts) != 3:
        return False
    degrees = _to_float(dms_to_dd(text))
    minutes = _to_int(parts[1])
    seconds = _to_float(parts[2])
    return 0 <= degrees <= 180 and 0 <= minutes < 60 and 0 <= seconds < 60


def _within(text: str, limit: int) -> bool:
    if is_dms_format(text):
        return 0 <= _to_int(text.split(" ")[0]) <= limit
    if is_dd_format(text):
        return 0 <= _to_float(text) <= limit
    return False


def is_longitude(text: str) -> bool:
    """True when the text is a longitude magnitude between 0 and 180."""
    return _within(text, 180)


def is_latitude(text: str) -> bool:
    """True when the text is a latitude magnitude between 0 and 90."""
    return _within(text, 90)


def dd_to_dms(text: str) -> str:
    """Convert decimal degrees to 'D M S'; the sign is dropped.

    Raises ValueError when the text does not start with an integer.
    """
    degrees = abs(_leading_int(text))
    value = abs(_to_float(text))
    arg_minutes = _f32(_f32(value - degrees) * 60)
    minutes = int(arg_minutes)
    seconds = _f32(_f32(arg_minutes - minutes) * 60)
    return f"{degrees} {minutes} {_number(seconds)}"


def dms_to_dd(text: str) -> str:
    """Convert 'D M S' to decimal degrees."""
    parts = text.split(" ")
    degrees_text = parts[0]
    if _to_int(degrees_text) < 0:
        degrees_text = _field(degrees_text.split("-"), 1)
    minutes = _to_float(_field(parts, 1))
    seconds = _to_float(_field(parts, 2))
    degrees = _to_float(degrees_text)
    result = _number(_f32(degrees + minutes / 60.0 + seconds / 3600.0))
    if "-" in degrees_text:
        return "-" + result
    return result


def detect_format(text: str) -> CoordinateFormat:
    """Decimal degrees if the text reads as such, otherwise DMS."""
    return CoordinateFormat.DD if is_dd_format(text) else CoordinateFormat.DMS


def convert_coordinate(text: str, target: CoordinateFormat) -> str:
    """Rewrite a coordinate in the target format; unreadable input gives ''."""
    if text == "":
        return ""
    if target is CoordinateFormat.DMS:
        if is_dd_format(text):
            return dd_to_dms(text)
        if is_dms_format(text):
            return text
        return ""
    if is_dd_format(text):
        return text
    if is_dms_format(text):
        return dms_to_dd(text)
    return ""