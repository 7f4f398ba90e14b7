import pytest

from splatfiles.coords import (
    CoordinateFormat,
    convert_coordinate,
    dd_to_dms,
    detect_format,
    dms_to_dd,
    is_dd_format,
    is_dms_format,
    is_latitude,
    is_longitude,
    is_not_empty,
)


@pytest.mark.parametrize(
    "text, expected",
    [("", False), ("   ", False), ("\t", False), ("a", True), (" x ", True)],
)
def test_is_not_empty(text, expected):
    assert is_not_empty(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12", True),
        ("12.5", True),
        ("0", True),
        ("0.0", False),
        ("-5", False),
        ("abc", False),
        ("12 30", False),
        ("1e5", False),
    ],
)
def test_is_dd_format(text, expected):
    assert is_dd_format(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12 30 0", True),
        ("12 59 59.5", True),
        ("12 60 0", False),
        ("12 30 60", False),
        ("200 0 0", False),
        ("12 30", False),
        ("12", False),
    ],
)
def test_is_dms_format(text, expected):
    assert is_dms_format(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("90", True), ("91", False), ("45.5", True), ("89 59 59", True), ("95 0 0", False), ("x", False)],
)
def test_is_latitude(text, expected):
    assert is_latitude(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("180", True), ("181", False), ("120.25", True), ("179 30 0", True), ("x", False)],
)
def test_is_longitude(text, expected):
    assert is_longitude(text) is expected


def test_latitude_is_stricter_than_longitude():
    for value in ["0", "45", "90", "120", "180", "12 30 0", "150 0 0"]:
        if is_latitude(value):
            assert is_longitude(value)


def test_dd_to_dms_worked_example():
    assert dd_to_dms("12.5") == "12 30 0"


def test_dms_to_dd_worked_example():
    assert dms_to_dd("12 30 0") == "12.5"


@pytest.mark.parametrize("value", ["12.5", "45.25", "7.75", "30", "100.125"])
def test_dd_round_trip(value):
    dms = dd_to_dms(value)
    assert is_dms_format(dms)
    assert dms_to_dd(dms) == value


def test_dd_to_dms_drops_sign():
    assert dd_to_dms("-12.5") == dd_to_dms("12.5")


def test_dd_to_dms_rejects_non_numeric():
    with pytest.raises(ValueError):
        dd_to_dms("abc")


def test_dms_to_dd_output_is_decimal():
    assert is_dd_format(dms_to_dd("40 15 30"))


def test_detect_format():
    assert detect_format("12.5") is CoordinateFormat.DD
    assert detect_format("12 30 0") is CoordinateFormat.DMS


def test_convert_to_dms_and_back():
    dms = convert_coordinate("45.25", CoordinateFormat.DMS)
    assert dms == dd_to_dms("45.25")
    assert convert_coordinate(dms, CoordinateFormat.DD) == "45.25"


def test_convert_keeps_matching_format():
    assert convert_coordinate("12 30 0", CoordinateFormat.DMS) == "12 30 0"
    assert convert_coordinate("12.5", CoordinateFormat.DD) == "12.5"


@pytest.mark.parametrize("target", list(CoordinateFormat))
def test_convert_unreadable_gives_empty(target):
    assert convert_coordinate("nonsense", target) == ""
    assert convert_coordinate("", target) == ""