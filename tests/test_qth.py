import pytest

from splatfiles.coords import CoordinateFormat
from splatfiles.qth import (
    HeightUnit,
    QthDirectory,
    QthError,
    QthSite,
    read_qth,
    write_qth,
)


def _site(**changes):
    values = dict(
        name="Tower",
        latitude="45.5",
        longitude="120.25",
        height="30",
        height_unit=HeightUnit.METERS,
        south=False,
        east=False,
    )
    values.update(changes)
    return QthSite(**values)


def test_from_text_reads_signs_and_meters():
    site = QthSite.from_text("Tower\n-45.5\n-120.25\n30m\n")
    assert site.name == "Tower"
    assert site.latitude == "45.5"
    assert site.south is True
    assert site.longitude == "120.25"
    assert site.east is True
    assert site.height == "30"
    assert site.height_unit is HeightUnit.METERS


def test_from_text_reads_feet_and_positive_values():
    site = QthSite.from_text("Hill\n10\n20\n100\n")
    assert site.height_unit is HeightUnit.FEET
    assert site.height == "100"
    assert site.south is False
    assert site.east is False


def test_from_text_missing_lines_are_empty():
    site = QthSite.from_text("Only name")
    assert site.name == "Only name"
    assert site.latitude == ""
    assert site.height == ""


def test_text_round_trip():
    text = "Tower\n-45.5\n-120.25\n30m\n"
    assert QthSite.from_text(text).to_text() == text


def test_to_text_fixed_layout():
    site = _site(south=True, height_unit=HeightUnit.FEET)
    assert site.to_text() == "Tower\n-45.5\n120.25\n30\n"


def test_coordinate_formats_detected():
    site = _site(latitude="45 30 15", longitude="120.25")
    assert site.latitude_format is CoordinateFormat.DMS
    assert site.longitude_format is CoordinateFormat.DD


def test_validate_accepts_good_site():
    site = _site(latitude="45 30 15")
    site.validate()
    assert QthSite.from_text(site.to_text()) == site


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"latitude": "95"}, "Invalid latitude value"),
        ({"longitude": "200"}, "Invalid longitude value"),
        ({"height": "abc"}, "Invalid height value"),
        ({"name": "   "}, "Invalid site name"),
        ({"latitude": "95", "longitude": "200"}, "Invalid latitude value"),
    ],
)
def test_validate_errors(changes, message):
    with pytest.raises(QthError, match=message):
        _site(**changes).validate()


def test_write_and_read_file(tmp_path):
    path = tmp_path / "tower.qth"
    site = _site(south=True, east=True)
    write_qth(path, site)
    assert read_qth(path) == site


def test_write_invalid_site_leaves_no_file(tmp_path):
    path = tmp_path / "bad.qth"
    with pytest.raises(QthError):
        write_qth(path, _site(latitude="abc"))
    assert not path.exists()


def test_directory_lists_only_qth_files(tmp_path):
    (tmp_path / "b.qth").write_text("x")
    (tmp_path / "A.qth").write_text("x")
    (tmp_path / "notes.txt").write_text("x")
    (tmp_path / "sub.qth").mkdir()
    directory = QthDirectory(tmp_path)
    assert directory.files() == ["A.qth", "b.qth"]
    assert directory.exists("b.qth")
    assert not directory.exists("notes.txt")


def test_directory_save_load_delete(tmp_path):
    directory = QthDirectory(tmp_path)
    site = _site(east=True)
    path = directory.save("site.qth", site)
    assert path == tmp_path / "site.qth"
    assert directory.load("site.qth") == site
    directory.delete("site.qth")
    assert directory.files() == []


def test_directory_missing_file_errors(tmp_path):
    directory = QthDirectory(tmp_path)
    with pytest.raises(QthError, match="File is not exist"):
        directory.load("missing.qth")
    with pytest.raises(QthError, match="File is not exist"):
        directory.delete("missing.qth")


def test_directory_nonexistent_is_empty(tmp_path):
    assert QthDirectory(tmp_path / "nowhere").files() == []