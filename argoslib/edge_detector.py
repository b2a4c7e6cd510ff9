"""Detection of rising and falling edges in a boolean signal."""

from __future__ import annotations

import enum

__all__ = ["EdgeDetectSettings", "EdgeDetector", "EdgeStatus"]


class EdgeDetectSettings(enum.Enum):
    """Which edges a detector reports."""

    DETECT_BOTH = enum.auto()
    DETECT_FALLING = enum.auto()
    DETECT_RISING = enum.auto()


class EdgeStatus(enum.Enum):
    """Result of one edge calculation."""

    FALLING = enum.auto()
    RISING = enum.auto()
    ERROR = enum.auto()
    NONE = enum.auto()

    def __str__(self) -> str:
        return self.name.capitalize()


class EdgeDetector:
    """Reports edges between successive boolean values."""

    def __init__(self, settings: EdgeDetectSettings, initial_value: bool = False) -> None:
        self.settings = settings
        self._previous = initial_value

    def __call__(self, cur_val: bool) -> bool:
        """Feed a value and return True if a configured edge occurred."""
        status = self.calculate(cur_val)
        if self.settings is EdgeDetectSettings.DETECT_BOTH:
            return status in (EdgeStatus.RISING, EdgeStatus.FALLING)
        if self.settings is EdgeDetectSettings.DETECT_RISING:
            return status is EdgeStatus.RISING
        return status is EdgeStatus.FALLING

    def calculate(self, cur_val: bool) -> EdgeStatus:
        """Feed a value and return which configured edge, if any, occurred."""
        falling = self._previous and not cur_val
        rising = not self._previous and cur_val
        status = EdgeStatus.NONE
        if self.settings is EdgeDetectSettings.DETECT_BOTH:
            if falling:
                status = EdgeStatus.FALLING
            elif rising:
                status = EdgeStatus.RISING
        elif self.settings is EdgeDetectSettings.DETECT_FALLING:
            if falling:
                status = EdgeStatus.FALLING
        elif rising:
            status = EdgeStatus.RISING
        self._previous = cur_val
        return status