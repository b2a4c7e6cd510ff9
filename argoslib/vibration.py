"""Vibration models that produce left and right rumble intensities."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

__all__ = [
    "VibrationModel",
    "VibrationStatus",
    "temporary_vibration_pattern",
    "vibration_alternate_pulse",
    "vibration_alternate_wave",
    "vibration_constant",
    "vibration_off",
    "vibration_sync_pulse",
    "vibration_sync_wave",
]

Clock = Callable[[], int]
"""A monotonic clock returning integer nanoseconds."""

_NS_PER_MS = 1_000_000


@dataclass(frozen=True)
class VibrationStatus:
    """Left and right vibration intensities in [0, 1]."""

    intensity_left: float = 0.0
    intensity_right: float = 0.0


VibrationModel = Callable[[], VibrationStatus]


def _period_ms(pulse_period_ms: float) -> int:
    period = int(pulse_period_ms)
    if period <= 0:
        raise ValueError(f"pulse period must be at least 1 ms, got {pulse_period_ms}")
    return period


def _time_in_period_ms(clock: Clock, period_ms: int) -> int:
    return (clock() // _NS_PER_MS) % period_ms


def _wave(time_in_period_ms: int, period_ms: int) -> float:
    """Raised cosine that is 1 at the start of a period and 0 halfway through."""
    progress = time_in_period_ms / period_ms
    return math.cos(math.pi * 2.0 * progress) / 2 + 0.5


def vibration_off() -> VibrationModel:
    """Model that keeps both sides still."""

    def model() -> VibrationStatus:
        return VibrationStatus(0.0, 0.0)

    return model


def vibration_constant(
    intensity_left: float, intensity_right: float | None = None
) -> VibrationModel:
    """Model with constant intensities; one value sets both sides."""
    right = intensity_left if intensity_right is None else intensity_right

    def model() -> VibrationStatus:
        return VibrationStatus(intensity_left, right)

    return model


def vibration_sync_pulse(
    pulse_period_ms: float,
    intensity_on: float,
    intensity_off: float = 0.0,
    clock: Clock = time.monotonic_ns,
) -> VibrationModel:
    """Toggle both sides together between on and off levels each half period."""
    period = _period_ms(pulse_period_ms)

    def model() -> VibrationStatus:
        on_phase = _time_in_period_ms(clock, period) < period // 2
        intensity = intensity_on if on_phase else intensity_off
        return VibrationStatus(intensity, intensity)

    return model


def vibration_alternate_pulse(
    pulse_period_ms: float,
    intensity_on: float,
    intensity_off: float = 0.0,
    clock: Clock = time.monotonic_ns,
) -> VibrationModel:
    """Toggle between levels with the left and right sides in opposite phase."""
    period = _period_ms(pulse_period_ms)

    def model() -> VibrationStatus:
        on_phase = _time_in_period_ms(clock, period) < period // 2
        if on_phase:
            return VibrationStatus(intensity_on, intensity_off)
        return VibrationStatus(intensity_off, intensity_on)

    return model


def vibration_sync_wave(
    pulse_period_ms: float,
    intensity_on: float,
    intensity_off: float = 0.0,
    clock: Clock = time.monotonic_ns,
) -> VibrationModel:
    """Move both sides smoothly between the off and on levels."""
    period = _period_ms(pulse_period_ms)

    def model() -> VibrationStatus:
        level = _wave(_time_in_period_ms(clock, period), period)
        output = intensity_off + level * (intensity_on - intensity_off)
        return VibrationStatus(output, output)

    return model


def vibration_alternate_wave(
    pulse_period_ms: float,
    intensity_on: float,
    intensity_off: float = 0.0,
    clock: Clock = time.monotonic_ns,
) -> VibrationModel:
    """Move smoothly between levels with the two sides in opposite phase."""
    period = _period_ms(pulse_period_ms)

    def model() -> VibrationStatus:
        left = _wave(_time_in_period_ms(clock, period), period)
        right = 1.0 - left
        span = intensity_on - intensity_off
        return VibrationStatus(intensity_off + left * span, intensity_off + right * span)

    return model


def temporary_vibration_pattern(
    temporary_model: VibrationModel,
    temporary_model_duration_ms: float,
    lasting_model: VibrationModel | None = None,
    clock: Clock = time.monotonic_ns,
) -> VibrationModel:
    """Run one model for a while, then another (off by default) from then on."""
    lasting = vibration_off() if lasting_model is None else lasting_model
    start = clock()

    def model() -> VibrationStatus:
        elapsed_ms = (clock() - start) / _NS_PER_MS
        if elapsed_ms > temporary_model_duration_ms:
            return lasting()
        return temporary_model()

    return model