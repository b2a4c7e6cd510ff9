"""Debouncing of boolean and general values over time."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["DebounceSettings", "Debouncer", "GenericDebouncer"]

Clock = Callable[[], int]
"""A monotonic clock returning integer nanoseconds."""

_NS_PER_MS = 1_000_000


def _elapsed_ms(now_ns: int, since_ns: int) -> int:
    """Whole milliseconds between two clock readings, truncated."""
    return (now_ns - since_ns) // _NS_PER_MS


@dataclass(frozen=True)
class DebounceSettings:
    """Times in milliseconds a new value must persist before it is accepted."""

    activate_time_ms: float
    clear_time_ms: float


class Debouncer:
    """Debounces a boolean with separate activate and clear times."""

    def __init__(
        self,
        settings: DebounceSettings,
        initial_value: bool = False,
        clock: Clock = time.monotonic_ns,
    ) -> None:
        self._settings = settings
        self._clock = clock
        self._raw_status = initial_value
        self._debounced_status = initial_value
        self._transition_time = clock()

    @classmethod
    def symmetric(cls, debounce_time_ms: float, clock: Clock = time.monotonic_ns) -> Debouncer:
        """Build a debouncer using the same activate and clear time."""
        return cls(DebounceSettings(debounce_time_ms, debounce_time_ms), False, clock)

    @property
    def settings(self) -> DebounceSettings:
        """The activate and clear times."""
        return self._settings

    @property
    def raw_status(self) -> bool:
        """The latest value without debounce applied."""
        return self._raw_status

    @property
    def debounced_status(self) -> bool:
        """The latest value after debounce."""
        return self._debounced_status

    def __call__(self, new_val: bool) -> bool:
        """Feed a new raw value and return the debounced status."""
        prev_raw = self._raw_status
        now = self._clock()

        if prev_raw == self._debounced_status and new_val != self._debounced_status:
            self._transition_time = now

        if new_val != self._debounced_status:
            since = _elapsed_ms(now, self._transition_time)
            required = self._settings.activate_time_ms if new_val else self._settings.clear_time_ms
            if since >= required:
                self._debounced_status = new_val

        self._raw_status = new_val
        return self._debounced_status

    def reset(self, new_val: bool) -> None:
        """Force both raw and debounced status to ``new_val``."""
        self._raw_status = new_val
        self._debounced_status = new_val


class GenericDebouncer:
    """Debounces any comparable value with a single settle time."""

    def __init__(
        self,
        debounce_time_ms: float,
        initial_value: Any = None,
        clock: Clock = time.monotonic_ns,
    ) -> None:
        self._debounce_time_ms = debounce_time_ms
        self._clock = clock
        self._raw_status = initial_value
        self._debounced_status = initial_value
        self._transition_time = clock()

    @property
    def raw_status(self) -> Any:
        """The latest value without debounce applied."""
        return self._raw_status

    @property
    def debounced_status(self) -> Any:
        """The latest value after debounce."""
        return self._debounced_status

    def __call__(self, new_val: Any) -> Any:
        """Feed a new raw value and return the debounced value."""
        prev_raw = self._raw_status
        now = self._clock()

        if new_val != self._debounced_status and new_val != prev_raw:
            self._transition_time = now

        if new_val != self._debounced_status:
            if _elapsed_ms(now, self._transition_time) >= self._debounce_time_ms:
                self._debounced_status = new_val

        self._raw_status = new_val
        return self._debounced_status

    def reset(self, new_val: Any) -> None:
        """Force both raw and debounced value to ``new_val``."""
        self._raw_status = new_val
        self._debounced_status = new_val