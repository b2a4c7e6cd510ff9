"""Xbox controller with debounced buttons, button combinations, triggers and rumble."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from argoslib.debounce import DebounceSettings
from argoslib.triggers import Trigger
from argoslib.vibration import VibrationModel, vibration_off
from argoslib.xbox_buttons import (
    Axis,
    Button,
    ButtonTracker,
    Clock,
    HIDDevice,
    JoystickHand,
    UpdateStatus,
)

__all__ = ["XboxController"]

Buttons = "Button | Iterable[Button]"


def _as_combo(buttons: Button | Iterable[Button]) -> list[Button]:
    """A single button, or a combination of buttons, as a list."""
    if isinstance(buttons, int):
        return [buttons]
    return list(buttons)


class XboxController:
    """An Xbox controller read through a raw input device."""

    def __init__(self, hid: HIDDevice, clock: Clock = time.monotonic_ns) -> None:
        self.hid = hid
        self._tracker = ButtonTracker(hid, clock)
        self._vibration_model: VibrationModel = vibration_off()

    def set_button_debounce(self, target_button: Button, new_settings: DebounceSettings) -> None:
        """Configure debounce times for one button."""
        self._tracker.set_button_debounce(target_button, new_settings)

    def swap_settings(self, other: XboxController) -> None:
        """Exchange debounce settings with another controller and clear both button states."""
        self._tracker.swap_settings(other._tracker)

    def get_x(self, hand: JoystickHand) -> float:
        """X position of the left or right joystick in [-1, 1]."""
        axis = Axis.LEFT_X if hand is JoystickHand.LEFT_HAND else Axis.RIGHT_X
        return self.hid.get_raw_axis(int(axis))

    def get_y(self, hand: JoystickHand) -> float:
        """Y position of the left or right joystick in [-1, 1]."""
        axis = Axis.LEFT_Y if hand is JoystickHand.LEFT_HAND else Axis.RIGHT_Y
        return self.hid.get_raw_axis(int(axis))

    def get_trigger_axis(self, hand: JoystickHand) -> float:
        """Travel of the left or right trigger in [0, 1]."""
        return self._tracker.trigger_axis(hand)

    def update_button(self, button: Button) -> UpdateStatus:
        """Read one button and return its full new state."""
        return self._tracker.update(button)

    def _updates(self, buttons: Button | Iterable[Button]) -> list[UpdateStatus]:
        return [self.update_button(button) for button in _as_combo(buttons)]

    def get_debounced_button(self, buttons: Button | Iterable[Button]) -> bool:
        """True when every given button is active after debounce."""
        return all(u.debounce_active for u in self._updates(buttons))

    def get_debounced_button_pressed(self, buttons: Button | Iterable[Button]) -> bool:
        """True when the debounced combination has just become active."""
        updates = self._updates(buttons)
        return all(u.debounce_active for u in updates) and any(
            u.debounce_press for u in updates
        )

    def get_debounced_button_released(self, buttons: Button | Iterable[Button]) -> bool:
        """True when the debounced combination has just become inactive."""
        updates = self._updates(buttons)
        return not any(u.debounce_active for u in updates) and any(
            u.debounce_release for u in updates
        )

    def get_raw_button(self, buttons: Button | Iterable[Button]) -> bool:
        """True when every given button is active, ignoring debounce."""
        return all(u.raw_active for u in self._updates(buttons))

    def get_raw_button_pressed(self, buttons: Button | Iterable[Button]) -> bool:
        """True when the raw combination has just become active."""
        updates = self._updates(buttons)
        return all(u.raw_active for u in updates) and any(u.pressed for u in updates)

    def get_raw_button_released(self, buttons: Button | Iterable[Button]) -> bool:
        """True when the raw combination has just become inactive."""
        updates = self._updates(buttons)
        return not any(u.raw_active for u in updates) and any(u.released for u in updates)

    @property
    def vibration(self) -> VibrationModel:
        """The active vibration model; setting it updates the rumble output at once."""
        return self._vibration_model

    @vibration.setter
    def vibration(self, new_model: VibrationModel) -> None:
        self._vibration_model = new_model
        self.update_vibration()

    def update_vibration(self) -> None:
        """Send the current output of the vibration model to the device."""
        status = self._vibration_model()
        self.hid.set_rumble(status.intensity_left, status.intensity_right)

    def trigger_raw(self, buttons: Button | Iterable[Button]) -> Trigger:
        """Trigger that is true when every given button is active, ignoring debounce."""
        combo = _as_combo(buttons)
        return Trigger(lambda: self.get_raw_button(combo))

    def trigger_raw_any_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when any given button is active, ignoring debounce."""
        return self._any_of(_as_combo(buttons), self.get_raw_button)

    def trigger_raw_all_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when all given buttons are active, ignoring debounce."""
        return self._all_of(_as_combo(buttons), self.get_raw_button)

    def trigger_raw_none_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when no given button is active, ignoring debounce."""
        return self._none_of(_as_combo(buttons), self.get_raw_button)

    def trigger_raw_one_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when exactly one given button is active, ignoring debounce."""
        return self._one_of(_as_combo(buttons), self.get_raw_button)

    def trigger_debounced(self, buttons: Button | Iterable[Button]) -> Trigger:
        """Trigger that is true when every given button is active after debounce."""
        combo = _as_combo(buttons)
        return Trigger(lambda: self.get_debounced_button(combo))

    def trigger_debounced_any_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when any given button is active after debounce."""
        return self._any_of(_as_combo(buttons), self.get_debounced_button)

    def trigger_debounced_all_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when all given buttons are active after debounce."""
        return self._all_of(_as_combo(buttons), self.get_debounced_button)

    def trigger_debounced_none_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when no given button is active after debounce."""
        return self._none_of(_as_combo(buttons), self.get_debounced_button)

    def trigger_debounced_one_of(self, buttons: Iterable[Button]) -> Trigger:
        """Trigger that is true when exactly one given button is active after debounce."""
        return self._one_of(_as_combo(buttons), self.get_debounced_button)

    @staticmethod
    def _any_of(combo: list[Button], getter: Callable[[Button], bool]) -> Trigger:
        return Trigger(lambda: any(getter(button) for button in combo))

    @staticmethod
    def _all_of(combo: list[Button], getter: Callable[[Button], bool]) -> Trigger:
        return Trigger(lambda: bool(combo) and all(getter(button) for button in combo))

    @staticmethod
    def _none_of(combo: list[Button], getter: Callable[[Button], bool]) -> Trigger:
        return Trigger(lambda: not any(getter(button) for button in combo))

    def _one_of(self, combo: list[Button], getter: Callable[[Button], bool]) -> Trigger:
        # With fewer than two buttons exclusivity is meaningless; the raw state is used.
        if len(combo) < 2:
            return self.trigger_raw_any_of(combo)

        def exclusive(index: int) -> bool:
            return getter(combo[index]) and not any(
                getter(other) for other_index, other in enumerate(combo) if other_index != index
            )

        return Trigger(lambda: any(exclusive(index) for index in range(len(combo))))