"""Status frame update periods for motor controllers by usage preset."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

__all__ = ["MotorPresetMode", "StatusFramePeriods", "status_frame_periods"]


class MotorPresetMode(enum.Enum):
    """How a motor is used, which decides how often it reports status."""

    BASIC = "Basic"
    BASIC_FX = "BasicFX"
    LEADER = "Leader"
    LEADER_FX = "LeaderFX"
    FOLLOWER = "Follower"
    FOLLOWER_FX = "FollowerFX"
    MOTION_PROFILING = "MotionProfiling"
    MOTION_PROFILING_FX = "MotionProfilingFX"
    TUNING = "Tuning"
    TUNING_FX = "TuningFX"


@dataclass(frozen=True)
class StatusFramePeriods:
    """Period in milliseconds of each status frame."""

    general_status: int = 30
    feedback0: int = 30
    quadrature: int = 200
    ain_temp_vbat: int = 200
    misc: int = 200
    comm_status: int = 50
    pulse_width: int = 200
    motion_prof_buffer: int = 255
    motion_prof_target: int = 255
    gadgeteer: int = 255
    feedback1: int = 255
    primary_pidf: int = 200
    aux_pidf: int = 200
    firmware_api_status: int = 255
    aux_motion_prof_target: int = 255
    brushless_status: int = 255


_BASE_OVERRIDES: dict[MotorPresetMode, dict[str, int]] = {
    MotorPresetMode.BASIC: {"general_status": 125, "feedback0": 125},
    MotorPresetMode.LEADER: {},
    MotorPresetMode.FOLLOWER: {"general_status": 200, "feedback0": 200},
    MotorPresetMode.MOTION_PROFILING: {
        "motion_prof_buffer": 40,
        "motion_prof_target": 40,
        "feedback0": 100,
    },
    MotorPresetMode.TUNING: {"feedback0": 100},
}

_FX_MODES: dict[MotorPresetMode, tuple[MotorPresetMode, int]] = {
    MotorPresetMode.BASIC_FX: (MotorPresetMode.BASIC, 250),
    MotorPresetMode.LEADER_FX: (MotorPresetMode.LEADER, 200),
    MotorPresetMode.FOLLOWER_FX: (MotorPresetMode.FOLLOWER, 250),
    MotorPresetMode.MOTION_PROFILING_FX: (MotorPresetMode.MOTION_PROFILING, 200),
    MotorPresetMode.TUNING_FX: (MotorPresetMode.TUNING, 200),
}


def status_frame_periods(motor_mode: MotorPresetMode) -> StatusFramePeriods:
    """Return the status frame periods for a motor preset."""
    if motor_mode in _FX_MODES:
        base_mode, brushless = _FX_MODES[motor_mode]
        overrides = {**_BASE_OVERRIDES[base_mode], "brushless_status": brushless}
    else:
        overrides = _BASE_OVERRIDES[motor_mode]
    return replace(StatusFramePeriods(), **overrides)