[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "argoslib"
version = "0.1.0"
description = "Utilities for robot control code: angles, debouncing, edge detection, swerve helpers, controller input and vibration patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "swerve", "debounce", "controller", "edge-detection", "interpolation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["argoslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
