"""Swerve drive module helpers."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, replace

from argoslib.angle_utils import inverted_angle, nearest_angle

__all__ = [
    "SwerveModulePositions",
    "SwerveModuleState",
    "TranslationSpeeds",
    "circular_interpolate",
    "optimize",
]

_ANGULAR_RATE_PREFERENCE_DEG_PER_S = 20.0


@dataclass(frozen=True)
class SwerveModuleState:
    """Drive speed and module angle in degrees."""

    speed: float = 0.0
    angle: float = 0.0


@dataclass(frozen=True)
class SwerveModulePositions:
    """Absolute encoder position of each module at home, in degrees."""

    front_left: float
    front_right: float
    rear_right: float
    rear_left: float


@dataclass(frozen=True)
class TranslationSpeeds:
    """Translation speeds as fractions of maximum output in [-1, 1]."""

    forward_speed_pct: float
    left_speed_pct: float


def _signbit(value: float) -> bool:
    return math.copysign(1.0, value) < 0


def optimize(
    desired_state: SwerveModuleState,
    current_module_angle: float,
    current_module_angular_rate: float,
    current_module_drive_vel: float,
    max_velocity: float,
) -> SwerveModuleState:
    """Choose the module state that gives the desired motion with least change.

    Angles are in degrees, the angular rate in degrees per second, and the
    velocities in any one consistent unit.
    """
    forward = replace(
        desired_state, angle=nearest_angle(desired_state.angle, current_module_angle)
    )
    inverse = SwerveModuleState(
        speed=desired_state.speed * -1.0,
        angle=inverted_angle(forward.angle, current_module_angle),
    )

    rev_turn_sign = _signbit(inverse.angle - current_module_angle)
    vel_prefer_rev = current_module_drive_vel < -max_velocity / 2
    ang_vel_has_preference = abs(current_module_angular_rate) > _ANGULAR_RATE_PREFERENCE_DEG_PER_S
    ang_vel_prefer_rev = ang_vel_has_preference and rev_turn_sign == _signbit(
        current_module_angular_rate
    )

    fwd_dist = abs(forward.angle - current_module_angle)
    rev_dist = 180.0 - fwd_dist

    if fwd_dist < rev_dist and not (vel_prefer_rev and ang_vel_prefer_rev):
        return forward
    return inverse


def circular_interpolate(
    raw_speeds: TranslationSpeeds, interp_map: Callable[[float], float]
) -> TranslationSpeeds:
    """Remap the magnitude of a joystick vector while keeping its direction."""
    magnitude = math.hypot(raw_speeds.forward_speed_pct, raw_speeds.left_speed_pct)
    angle = math.atan2(raw_speeds.left_speed_pct, raw_speeds.forward_speed_pct)
    mapped = interp_map(magnitude)
    return TranslationSpeeds(mapped * math.cos(angle), mapped * math.sin(angle))