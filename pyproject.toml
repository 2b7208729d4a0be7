[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcf8316c"
version = "0.1.0"
description = "Register definitions for the MCF8316C-Q1 sensorless FOC BLDC motor driver"
requires-python = ">=3.10"
keywords = ["mcf8316c", "bldc", "motor-driver", "registers", "bitfield", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mcf8316c"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
