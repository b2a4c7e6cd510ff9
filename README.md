# argoslib

Building blocks for robot control code. The package is plain Python and needs nothing
outside the standard library.

## Contents

- `argoslib.angle_utils` has `constrain_angle`, `nearest_angle` and `inverted_angle`,
  which wrap angles given in degrees.
- `argoslib.general` has `in_threshold`, an inclusive tolerance check.
- `argoslib.interpolation` has `InterpolationMap`, a piecewise linear map over sorted
  `InterpMapPoint`s or `(in, out)` tuples. Outputs are clamped at both ends. An empty or
  unsorted table raises `ValueError`.
- `argoslib.hysteresis_filter` has `HysteresisFilter`. Its output turns on above the
  activate threshold and turns off below the deactivate threshold.
- `argoslib.color` has `ArgosColor`, which you can scale with `*`, and `gamma_correct`.
  It also provides the `GAMMA8` table and the named palettes `COLORS` and
  `GAMMA_CORRECTED_COLORS`.
- `argoslib.log` has `ArgosLogger`, which writes printf-style messages prefixed by a
  tag. `LogLevel.ERR` messages go to standard error.
- `argoslib.debounce` has `DebounceSettings`, `Debouncer` (boolean, with separate
  activate and clear times, and `Debouncer.symmetric`) and `GenericDebouncer` (any
  comparable value, one settle time).
- `argoslib.edge_detector` has `EdgeDetector`, configured with `EdgeDetectSettings`.
  Calling it returns a bool and `calculate` returns an `EdgeStatus`.
- `argoslib.swerve_utils` provides:
  - `optimize`, which chooses between the forward module state and the reversed one;
  - `circular_interpolate`, which reshapes the magnitude of a joystick vector;
  - the dataclasses `SwerveModuleState`, `SwerveModulePositions` and `TranslationSpeeds`.
- `argoslib.odometry_aim` has `get_angle_to_target` and `get_distance_to_target`, using
  `Translation2d` and `Translation3d`.
- `argoslib.vibration` provides rumble models, which are callables returning a
  `VibrationStatus`:
  - `vibration_off` and `vibration_constant`;
  - `vibration_sync_pulse` and `vibration_alternate_pulse`;
  - `vibration_sync_wave` and `vibration_alternate_wave`;
  - `temporary_vibration_pattern`.
- `argoslib.triggers` has `Trigger`, which combines with `&`, `|` and `~`, and the
  combinators `one_of`, `none_of`, `any_of` and `all_of`.
- `argoslib.status_frame_config` has `status_frame_periods`, which returns the
  `StatusFramePeriods` for each `MotorPresetMode`.
- `argoslib.robot_instance` has `get_robot_instance`. It reads the first word of an
  instance file and falls back to `RobotInstance.COMPETITION`.
- `argoslib.fs_homing` has `SwerveFSHomingStorage`, which saves and loads
  `SwerveModulePositions` as four numbers in a text file under a home directory.
- `argoslib.xbox_buttons` provides the controller layout (`Button`, `Axis`,
  `JoystickHand`), `pov_buttons` and `ButtonTracker`, which does press, release and
  debounce tracking.
- `argoslib.xbox_controller` has `XboxController`. It offers:
  - raw and debounced reads for single buttons and for button combinations;
  - trigger factories such as `trigger_raw_one_of` and `trigger_debounced_any_of`;
  - a `vibration` property that sends rumble output to the device.

## Installation

```
pip install .
```

## Examples

```python
from argoslib.angle_utils import nearest_angle
from argoslib.edge_detector import EdgeDetector, EdgeDetectSettings
from argoslib.interpolation import InterpolationMap

nearest_angle(350.0, 10.0)          # -10.0

detector = EdgeDetector(EdgeDetectSettings.DETECT_RISING, False)
detector(True)                      # True

shape = InterpolationMap([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)])
shape(1.5)                          # 2.5
shape(5.0)                          # 4.0
```

Several parts depend on time: the debouncers, the vibration patterns, `ButtonTracker` and
`XboxController`. Each of them takes a `clock` callable that returns monotonic nanoseconds.
The default is `time.monotonic_ns`. Pass a fake clock to get deterministic behaviour in
tests.

## What it does not do

The package does not talk to hardware itself.

- `XboxController` reads from any object that satisfies the `HIDDevice` protocol:
  `is_connected`, `get_raw_button`, `get_raw_axis`, `get_pov` and `set_rumble`. You
  supply that object.
- `status_frame_periods` only computes periods. It does not apply them to a motor
  controller.
- Home positions are stored only in a local file. There is no network-table storage.
- There is no PID tuning helper.
- There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```