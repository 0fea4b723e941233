"""Leveled console logging with a bit-mask filter."""

from __future__ import annotations

import sys
import time
from enum import IntFlag
from typing import TextIO

__all__ = ["LogType", "Logs", "log_type_name", "current_datetime"]


class LogType(IntFlag):
    """Log levels; each is one bit so that levels can be combined into masks."""

    DEBUG = 1
    INFO = 2
    WARNING = 4
    ERROR = 8
    FATAL = 16

    DEFAULT = INFO | WARNING | ERROR | FATAL
    ALL = DEBUG | INFO | WARNING | ERROR | FATAL


_NAMES = {
    LogType.INFO: "INFO",
    LogType.DEBUG: "DEBUG",
    LogType.WARNING: "WARNING",
    LogType.ERROR: "ERROR",
    LogType.FATAL: "FATAL",
}


def log_type_name(log_type: LogType) -> str:
    """Return the printed name of a level; presets and combinations read as INFO."""
    return _NAMES.get(LogType(log_type), "INFO")


def current_datetime() -> str:
    """Return the local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())


class Logs:
    """Writes formatted log lines for the levels enabled in its mask."""

    def __init__(self, mask: LogType | None = None, stream: TextIO | None = None) -> None:
        if mask is None:
            mask = LogType.ALL if __debug__ else LogType.DEFAULT
        self.mask = LogType(mask)
        self.stream = stream

    def is_enabled(self, log_type: LogType) -> bool:
        """Tell whether messages of this level pass the mask."""
        return bool(int(log_type) & int(self.mask))

    def format_message(
        self,
        log_type: LogType,
        filename: str,
        line: int,
        message: str,
        timestamp: str | None = None,
    ) -> str:
        """Build one log line; the current time is used when no timestamp is given."""
        if timestamp is None:
            timestamp = current_datetime()
        return f"{timestamp} {log_type_name(log_type)} [{filename}:{line}] - {message}"

    def send(self, log_type: LogType, filename: str, line: int, message: str) -> None:
        """Print the message if its level is enabled."""
        if not self.is_enabled(log_type):
            return
        stream = self.stream if self.stream is not None else sys.stdout
        print(self.format_message(log_type, filename, line, message), file=stream)