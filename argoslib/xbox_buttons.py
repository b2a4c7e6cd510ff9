"""Xbox controller layout and per-button press, release and debounce tracking."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from argoslib.debounce import DebounceSettings

__all__ = [
    "ANALOG_TRIGGER_THRESHOLD",
    "Axis",
    "Button",
    "ButtonTracker",
    "DPadButtons",
    "HIDDevice",
    "JoystickHand",
    "UpdateStatus",
    "pov_buttons",
]

Clock = Callable[[], int]
"""A monotonic clock returning integer nanoseconds."""

ANALOG_TRIGGER_THRESHOLD = 0.5
"""Fraction of trigger travel above which a trigger counts as a pressed button."""

_NS_PER_MS = 1_000_000


class HIDDevice(Protocol):
    """The raw input device a controller reads from."""

    def is_connected(self) -> bool: ...

    def get_raw_button(self, index: int) -> bool: ...

    def get_raw_axis(self, index: int) -> float: ...

    def get_pov(self) -> int: ...

    def set_rumble(self, left: float, right: float) -> None: ...


class JoystickHand(enum.Enum):
    """Left or right side of the controller."""

    LEFT_HAND = enum.auto()
    RIGHT_HAND = enum.auto()


class Button(enum.IntEnum):
    """Controller buttons; trigger and direction-pad entries are virtual."""

    A = 1
    B = 2
    X = 3
    Y = 4
    BUMPER_LEFT = 5
    BUMPER_RIGHT = 6
    BACK = 7
    START = 8
    STICK_LEFT = 9
    STICK_RIGHT = 10
    LEFT_TRIGGER = 11
    RIGHT_TRIGGER = 12
    UP = 13
    RIGHT = 14
    DOWN = 15
    LEFT = 16


class Axis(enum.IntEnum):
    """Controller analog axes."""

    LEFT_X = 0
    LEFT_Y = 1
    LEFT_TRIGGER = 2
    RIGHT_TRIGGER = 3
    RIGHT_X = 4
    RIGHT_Y = 5


@dataclass(frozen=True)
class UpdateStatus:
    """State of one button after an update."""

    pressed: bool = False
    released: bool = False
    debounce_press: bool = False
    debounce_release: bool = False
    raw_active: bool = False
    debounce_active: bool = False


@dataclass(frozen=True)
class DPadButtons:
    """Direction-pad directions, each including its adjacent diagonals."""

    up: bool = False
    right: bool = False
    down: bool = False
    left: bool = False


def pov_buttons(pov_angle: int) -> DPadButtons:
    """Convert a POV angle in degrees (negative when released) to directions."""
    return DPadButtons(
        up=0 <= pov_angle <= 45 or pov_angle >= 315,
        right=45 <= pov_angle <= 135,
        down=135 <= pov_angle <= 225,
        left=225 <= pov_angle <= 315,
    )


_PHYSICAL_BUTTONS = frozenset(Button(i) for i in range(Button.A, Button.STICK_RIGHT + 1))
_DPAD_FIELDS = {
    Button.UP: "up",
    Button.RIGHT: "right",
    Button.DOWN: "down",
    Button.LEFT: "left",
}


class ButtonTracker:
    """Tracks raw and debounced state of every button of one device."""

    def __init__(self, hid: HIDDevice, clock: Clock = time.monotonic_ns) -> None:
        self.hid = hid
        self._clock = clock
        self._settings = {button: DebounceSettings(0, 0) for button in Button}
        self._reset_state(clock())

    def _reset_state(self, now: int) -> None:
        self._debounce_status = dict.fromkeys(Button, False)
        self._raw_status = dict.fromkeys(Button, False)
        self._transition_time = dict.fromkeys(Button, now)

    def set_button_debounce(self, target_button: Button, new_settings: DebounceSettings) -> None:
        """Configure debounce times for one button."""
        self._settings[Button(target_button)] = new_settings

    def swap_settings(self, other: ButtonTracker) -> None:
        """Exchange debounce settings with another tracker and clear both states."""
        self._settings, other._settings = other._settings, self._settings
        now = self._clock()
        self._reset_state(now)
        other._reset_state(now)

    def trigger_axis(self, hand: JoystickHand) -> float:
        """Travel of the left or right trigger in [0, 1]."""
        axis = Axis.LEFT_TRIGGER if hand is JoystickHand.LEFT_HAND else Axis.RIGHT_TRIGGER
        return self.hid.get_raw_axis(int(axis))

    def _read(self, button: Button) -> bool:
        if button in _PHYSICAL_BUTTONS:
            return bool(self.hid.get_raw_button(int(button)))
        if button is Button.LEFT_TRIGGER:
            return self.trigger_axis(JoystickHand.LEFT_HAND) > ANALOG_TRIGGER_THRESHOLD
        if button is Button.RIGHT_TRIGGER:
            return self.trigger_axis(JoystickHand.RIGHT_HAND) > ANALOG_TRIGGER_THRESHOLD
        return getattr(pov_buttons(self.hid.get_pov()), _DPAD_FIELDS[button])

    def update(self, button: Button) -> UpdateStatus:
        """Read a button and return its new state.

        Raises ValueError for a value that names no button.
        """
        try:
            button = Button(button)
        except ValueError:
            raise ValueError(f"invalid button index: {button!r}") from None

        # Avoid repeated errors from a controller that is not plugged in.
        if not self.hid.is_connected():
            return UpdateStatus()

        new_val = self._read(button)
        prev_raw = self._raw_status[button]
        debounced = self._debounce_status[button]
        now = self._clock()

        if prev_raw == debounced and new_val != debounced:
            self._transition_time[button] = now

        debounce_press = debounce_release = False
        if new_val != debounced:
            since_ms = (now - self._transition_time[button]) // _NS_PER_MS
            settings = self._settings[button]
            if new_val:
                if since_ms >= settings.activate_time_ms:
                    debounce_press = True
                    self._debounce_status[button] = new_val
            elif since_ms >= settings.clear_time_ms:
                debounce_release = True
                self._debounce_status[button] = new_val

        self._raw_status[button] = new_val
        return UpdateStatus(
            pressed=new_val and not prev_raw,
            released=not new_val and prev_raw,
            debounce_press=debounce_press,
            debounce_release=debounce_release,
            raw_active=new_val,
            debounce_active=self._debounce_status[button],
        )