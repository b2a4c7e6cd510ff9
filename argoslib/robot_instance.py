"""Identification of which physical robot the code is running on."""

from __future__ import annotations

import enum
import os

__all__ = ["DEFAULT_INSTANCE_FILE", "RobotInstance", "get_robot_instance"]

DEFAULT_INSTANCE_FILE = "/home/lvuser/robotInstance"


class RobotInstance(enum.Enum):
    """The robot build the software is running on."""

    COMPETITION = "Competition"
    PRACTICE = "Practice"


def get_robot_instance(
    instance_file_path: str | os.PathLike[str] = DEFAULT_INSTANCE_FILE,
) -> RobotInstance:
    """Read the robot instance from the first word of the instance file.

    Falls back to the competition robot, with a message on standard output,
    when the file cannot be read or names no known instance.
    """
    try:
        with open(instance_file_path, encoding="utf-8") as instance_file:
            words = instance_file.read().split()
    except (OSError, UnicodeDecodeError):
        words = []
    first = words[0] if words else ""
    for instance in RobotInstance:
        if first.startswith(instance.value):
            return instance
    print("[ERROR] Could not read from instance file. Defaulting to competition instance.")
    return RobotInstance.COMPETITION