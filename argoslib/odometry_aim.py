"""Aiming at a field target from an estimated robot position."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Translation2d",
    "Translation3d",
    "get_angle_to_target",
    "get_distance_to_target",
]


@dataclass(frozen=True)
class Translation2d:
    """A position on the field in metres."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Translation3d:
    """A position in field space in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


def get_angle_to_target(
    current_estimated_robot_pose: Translation2d, target_pose_on_field: Translation3d
) -> float:
    """Yaw in degrees the field-centric robot must face to point at the target."""
    yaw = math.degrees(
        math.atan2(
            target_pose_on_field.y - current_estimated_robot_pose.y,
            target_pose_on_field.x - current_estimated_robot_pose.x,
        )
    )
    return 90.0 - yaw


def get_distance_to_target(
    current_estimated_robot_pose: Translation2d, target_pose_on_field: Translation3d
) -> float:
    """Horizontal distance in metres from the robot to the target."""
    return math.hypot(
        target_pose_on_field.y - current_estimated_robot_pose.y,
        target_pose_on_field.x - current_estimated_robot_pose.x,
    )