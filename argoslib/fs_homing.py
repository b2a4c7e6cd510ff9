"""Swerve module home positions kept in a plain text file."""

from __future__ import annotations

import os
from pathlib import Path

from argoslib.swerve_utils import SwerveModulePositions

__all__ = ["DEFAULT_HOME_DIR", "SwerveFSHomingStorage"]

DEFAULT_HOME_DIR = "/home/lvuser"


class SwerveFSHomingStorage:
    """Saves and loads swerve home positions, in degrees, to a file under a home directory."""

    def __init__(
        self,
        swerve_homes_path: str | os.PathLike[str],
        home_dir: str | os.PathLike[str] = DEFAULT_HOME_DIR,
    ) -> None:
        self._file_path = Path(home_dir) / swerve_homes_path

    @property
    def file_path(self) -> Path:
        """Full path of the storage file."""
        return self._file_path

    def ensure_file(self) -> Path:
        """Create the storage file, and its directories, if missing; return its path."""
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.touch()
        return self._file_path

    def save(self, home_position: SwerveModulePositions) -> bool:
        """Write the home positions; return False, with a message, when writing fails."""
        values = (
            home_position.front_left,
            home_position.front_right,
            home_position.rear_right,
            home_position.rear_left,
        )
        try:
            path = self.ensure_file()
            path.write_text(" ".join(f"{value:g}" for value in values), encoding="utf-8")
        except OSError:
            print("[ERROR] Could not write to config file")
            return False
        return True

    def load(self) -> SwerveModulePositions | None:
        """Read the home positions; return None, with a message, when reading fails."""
        try:
            path = self.ensure_file()
            words = path.read_text(encoding="utf-8").split()
            if len(words) < 4:
                raise ValueError("home file holds fewer than four positions")
            front_left, front_right, rear_right, rear_left = (float(w) for w in words[:4])
        except (OSError, ValueError, UnicodeDecodeError):
            print("[ERROR] Could not read from config file")
            return None
        return SwerveModulePositions(front_left, front_right, rear_right, rear_left)