[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emblib"
version = "0.1.0"
description = "Building blocks for embedded-style control code: bounded containers, filters, controllers, motor-control math, scheduling, state machines and redundant EEPROM storage."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "control",
    "filters",
    "pi-controller",
    "motor-control",
    "eeprom",
    "scheduler",
    "state-machine",
    "bounded-containers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emblib"]

[tool.hatch.build.targets.sdist]
include = ["emblib", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
