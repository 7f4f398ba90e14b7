# splatfiles

Helpers for the small text files used with the SPLAT! RF propagation tool:

- `splatfiles.coords`: checking and converting coordinates written in
  decimal degrees (`55.75`) or as degrees, minutes, seconds (`55 45 0`);
- `splatfiles.qth`: site files (`.qth`), four lines holding a site name,
  latitude, longitude and antenna height;
- `splatfiles.udt`: user terrain points, one `latitude, longitude, height`
  per line;
- `splatfiles.udt_document`: a file of such points, edited point by point or
  as raw text;
- `splatfiles.settings`: an INI file with the working, SDF and graph
  directories and the interface language.

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

## Coordinates

```python
from splatfiles.coords import (
    CoordinateFormat, is_latitude, dd_to_dms, dms_to_dd, convert_coordinate,
)

is_latitude("55.75")                                  # True
dd_to_dms("55.5")                                     # "55 30 0"
dms_to_dd("55 30 0")                                  # "55.5"
convert_coordinate("55.5", CoordinateFormat.DMS)      # "55 30 0"
```

Values are magnitudes: `is_latitude` accepts 0 to 90 and `is_longitude`
0 to 180, in either format. `detect_format(text)` returns
`CoordinateFormat.DD` when the text reads as decimal degrees and
`CoordinateFormat.DMS` otherwise. `convert_coordinate` returns `""` for text
it cannot read. `dd_to_dms` raises `ValueError` when the text does not start
with an integer.

## Site files

```python
from splatfiles.qth import QthDirectory, QthSite, HeightUnit, read_qth, write_qth

sites = QthDirectory("/home/me/splat")
print(sites.files())                 # names of the *.qth files there
site = sites.load("tower.qth")
print(site.to_text())

new_site = QthSite(name="Hill", latitude="55.75", longitude="37.61",
                   height="30", height_unit=HeightUnit.METERS, east=True)
sites.save("hill.qth", new_site)
```

A `QthSite` holds the latitude and longitude as magnitudes; `south` marks a
negative latitude and `east` a negative longitude (longitudes are written
west-positive). Meters are written with an `m` suffix on the height line.

`validate()` raises `QthError` on a bad latitude, longitude, height or an
empty site name. `write_qth(path, site)` validates and writes one file and
`read_qth(path)` reads it back. `QthDirectory.load` and `QthDirectory.delete`
raise `QthError` when the file is not in the directory.

## User terrain points

```python
from splatfiles.udt import UserPoint, is_user_file
from splatfiles.udt_document import UserDataFile

doc = UserDataFile("/home/me/splat/points.dat")
doc.add_point(UserPoint.from_line("55.75, -37.61, 30m"))
for point in doc.points():
    print(point.to_line())
```

`UserDataFile` also offers `lines()`, `point(index)`, `contains_line(text)`,
`replace_point(index, point)`, `delete_point(index)`, `read_text()`,
`write_text(text)`, `save_as(path)` and `delete()`. Adding or replacing a
point raises `UdtError` when the line is already in the file or the point is
invalid; replacing or deleting a line that is not there also raises
`UdtError`.

`is_user_file(path)` and `is_user_text(text)` report whether the first line
is a valid point; `is_height(text)` checks a height with an optional `m`.

## Settings

```python
from splatfiles.settings import Settings

settings = Settings("config.conf", home="/home/me")
settings.set_sdf_dir("/data/sdf")      # stored as "/data/sdf/" and saved
print(settings.dir_path, settings.sdf_dir, settings.graph_dir)
language = settings.resolve_language()
print(language.value, language.translation)
```

Missing directories default to the home directory (`<home>/sdf` for SDF
files) and are written out at once. Every setter saves the file. `reset()`
restores the defaults and the system locale; `select_language(index)` picks
Russian for 0 and English otherwise.

## What it does not do

There is no graphical interface, file picker or command-line program here,
and nothing runs the propagation tool itself. `Language.translation` only
names a translation file; no translations are loaded.

## Tests

```
pip install .[test]
pytest
```