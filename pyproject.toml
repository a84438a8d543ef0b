[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holidaycal"
version = "2.0.0"
description = "Holiday rules and national holiday definitions for calculating actual and observed holiday dates"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "holiday",
    "holidays",
    "calendar",
    "bank holidays",
    "easter",
    "orthodox easter",
    "scheduling",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["holidaycal"]

[tool.hatch.build.targets.sdist]
include = ["holidaycal", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
