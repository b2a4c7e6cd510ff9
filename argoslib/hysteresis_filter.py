"""Boolean output from a value with separate on and off thresholds."""

from __future__ import annotations

from typing import Any

__all__ = ["HysteresisFilter"]


class HysteresisFilter:
    """Turns on above one threshold and off below another."""

    def __init__(self, deactivate_threshold: Any, activate_threshold: Any) -> None:
        self._deactivate_threshold = deactivate_threshold
        self._activate_threshold = activate_threshold
        self._state = False

    @property
    def state(self) -> bool:
        """The latest filtered output."""
        return self._state

    def __call__(self, new_value: Any) -> bool:
        """Feed a new value and return the filtered output."""
        if self._state:
            if new_value < self._deactivate_threshold:
                self._state = False
        elif new_value > self._activate_threshold:
            self._state = True
        return self._state