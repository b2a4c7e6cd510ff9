"""Utilities for robot control code: angles, filters, debouncing, swerve helpers, controller input and rumble."""

__version__ = "0.1.0"