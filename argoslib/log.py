"""Tagged console logging."""

from __future__ import annotations

import enum
import sys

__all__ = ["ArgosLogger", "LogLevel"]


class LogLevel(enum.Enum):
    """Severity of a log message."""

    INFO = 0
    ERR = 1


class ArgosLogger:
    """Writes printf-style messages prefixed with a tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag

    def log(self, level: LogLevel, fmt: str, *args: object) -> None:
        """Format ``fmt % args`` and write it with the tag prefix.

        Errors go to standard error; the closing newline always goes to
        standard output.
        """
        message = fmt % args
        if level is LogLevel.ERR:
            sys.stderr.write(f"[{self.tag}_ERROR]{message}")
        else:
            sys.stdout.write(f"[{self.tag}]{message}")
        sys.stdout.write("\n")