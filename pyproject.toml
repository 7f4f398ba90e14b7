[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splatfiles"
version = "0.1.0"
description = "Read, validate and write radio site (.qth) files, user terrain point files and coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["splat", "qth", "rf", "propagation", "ham radio", "coordinates", "dms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["splatfiles"]

[tool.pytest.ini_options]
addopts = "-ra"
