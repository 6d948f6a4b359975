[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logistica"
version = "0.1.0"
description = "Interactive console system for managing a freight fleet: trucks, drivers, clients and trips."
requires-python = ">=3.10"
dependencies = []
keywords = ["logistics", "fleet", "trucks", "drivers", "trips", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logistica = "logistica.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logistica"]

[tool.pytest.ini_options]
addopts = "-ra"
