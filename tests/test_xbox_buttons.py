import pytest

from argoslib.debounce import DebounceSettings
from argoslib.xbox_buttons import (
    Axis,
    Button,
    ButtonTracker,
    DPadButtons,
    JoystickHand,
    UpdateStatus,
    pov_buttons,
)


class FakeHID:
    def __init__(self):
        self.connected = True
        self.buttons = set()
        self.axes = {}
        self.pov = -1
        self.rumble = (0.0, 0.0)

    def is_connected(self):
        return self.connected

    def get_raw_button(self, index):
        return index in self.buttons

    def get_raw_axis(self, index):
        return self.axes.get(index, 0.0)

    def get_pov(self):
        return self.pov

    def set_rumble(self, left, right):
        self.rumble = (left, right)


class FakeClock:
    def __init__(self):
        self.now_ns = 0

    def __call__(self):
        return self.now_ns

    def advance_ms(self, ms):
        self.now_ns += ms * 1_000_000


@pytest.fixture
def hid():
    return FakeHID()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tracker(hid, clock):
    return ButtonTracker(hid, clock)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (-1, DPadButtons()),
        (0, DPadButtons(up=True)),
        (45, DPadButtons(up=True, right=True)),
        (90, DPadButtons(right=True)),
        (180, DPadButtons(down=True)),
        (270, DPadButtons(left=True)),
        (315, DPadButtons(up=True, left=True)),
    ],
)
def test_pov_buttons(angle, expected):
    assert pov_buttons(angle) == expected


def test_press_and_release_without_debounce(tracker, hid):
    hid.buttons.add(int(Button.A))
    assert tracker.update(Button.A) == UpdateStatus(
        pressed=True, debounce_press=True, raw_active=True, debounce_active=True
    )
    held = tracker.update(Button.A)
    assert held.pressed is False
    assert held.debounce_active is True
    hid.buttons.clear()
    assert tracker.update(Button.A) == UpdateStatus(released=True, debounce_release=True)


def test_disconnected_reports_nothing(tracker, hid):
    hid.buttons.add(int(Button.B))
    hid.connected = False
    assert tracker.update(Button.B) == UpdateStatus()


def test_activate_debounce_delays_active(tracker, hid, clock):
    tracker.set_button_debounce(Button.X, DebounceSettings(100, 0))
    hid.buttons.add(int(Button.X))
    first = tracker.update(Button.X)
    assert first.pressed is True
    assert first.debounce_active is False
    clock.advance_ms(50)
    assert tracker.update(Button.X).debounce_active is False
    clock.advance_ms(50)
    status = tracker.update(Button.X)
    assert status.debounce_press is True
    assert status.debounce_active is True
    hid.buttons.clear()
    assert tracker.update(Button.X).debounce_release is True


def test_clear_debounce_delays_release(tracker, hid, clock):
    tracker.set_button_debounce(Button.Y, DebounceSettings(0, 30))
    hid.buttons.add(int(Button.Y))
    assert tracker.update(Button.Y).debounce_active is True
    hid.buttons.clear()
    assert tracker.update(Button.Y).debounce_active is True
    clock.advance_ms(30)
    status = tracker.update(Button.Y)
    assert status.debounce_release is True
    assert status.debounce_active is False


def test_analog_trigger_as_button(tracker, hid):
    hid.axes[int(Axis.LEFT_TRIGGER)] = 0.6
    assert tracker.update(Button.LEFT_TRIGGER).raw_active is True
    assert tracker.update(Button.RIGHT_TRIGGER).raw_active is False
    hid.axes[int(Axis.LEFT_TRIGGER)] = 0.5
    assert tracker.update(Button.LEFT_TRIGGER).raw_active is False


def test_trigger_axis_reads_correct_side(tracker, hid):
    hid.axes[int(Axis.LEFT_TRIGGER)] = 0.25
    hid.axes[int(Axis.RIGHT_TRIGGER)] = 0.75
    assert tracker.trigger_axis(JoystickHand.LEFT_HAND) == 0.25
    assert tracker.trigger_axis(JoystickHand.RIGHT_HAND) == 0.75


def test_dpad_virtual_buttons(tracker, hid):
    hid.pov = 90
    assert tracker.update(Button.RIGHT).raw_active is True
    assert tracker.update(Button.UP).raw_active is False
    assert tracker.update(Button.LEFT).raw_active is False


@pytest.mark.parametrize("bad", [0, 17, -3])
def test_invalid_button_rejected(tracker, bad):
    with pytest.raises(ValueError):
        tracker.update(bad)


def test_swap_settings_exchanges_debounce(hid, clock):
    other_hid = FakeHID()
    first = ButtonTracker(hid, clock)
    second = ButtonTracker(other_hid, clock)
    first.set_button_debounce(Button.A, DebounceSettings(100, 100))
    first.swap_settings(second)

    hid.buttons.add(int(Button.A))
    other_hid.buttons.add(int(Button.A))
    assert first.update(Button.A).debounce_active is True
    assert second.update(Button.A).debounce_active is False


def test_swap_settings_clears_state(hid, clock):
    first = ButtonTracker(hid, clock)
    second = ButtonTracker(FakeHID(), clock)
    hid.buttons.add(int(Button.START))
    assert first.update(Button.START).pressed is True
    first.swap_settings(second)
    assert first.update(Button.START).pressed is True