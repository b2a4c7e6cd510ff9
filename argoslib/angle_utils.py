"""Angle normalisation helpers working in degrees."""

from __future__ import annotations

import math

__all__ = ["constrain_angle", "inverted_angle", "nearest_angle"]


def constrain_angle(in_val: float, min_val: float, max_val: float) -> float:
    """Wrap ``in_val`` into the range ``[min_val, max_val)``."""
    span = max_val - min_val
    wrapped = math.fmod(in_val - min_val, span)
    if wrapped < 0:
        wrapped += span
    return wrapped + min_val


def nearest_angle(desired_angle: float, reference_angle: float) -> float:
    """Return the alias of ``desired_angle`` closest to ``reference_angle``.

    The result lies within 180 degrees of the reference angle.
    """
    normalized_desired = constrain_angle(desired_angle, 0.0, 360.0)
    normalized_reference = constrain_angle(reference_angle, 0.0, 360.0)

    diff = normalized_desired - normalized_reference

    # The closest equivalent angle is across the discontinuity point.
    if abs(diff) > 180.0:
        diff = math.copysign(360.0 - abs(diff), -diff)

    return reference_angle + diff


def inverted_angle(desired_angle: float, reference_angle: float) -> float:
    """Return the alias of the angle opposite ``desired_angle`` nearest ``reference_angle``.

    The inverted angle is offset 180 degrees from the desired angle and lies in
    the opposite travel direction from the reference angle.
    """
    forward_dist = constrain_angle(desired_angle - reference_angle, -180.0, 180.0)
    reverse_dist_mag = 180.0 - abs(forward_dist)
    return reference_angle + math.copysign(reverse_dist_mag, -forward_dist)