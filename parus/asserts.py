"""Checked conditions that log a fatal message and raise when they fail."""

from __future__ import annotations

import inspect
import os

from parus.logs import LogType, Logs

__all__ = ["AssertionFailed", "ensure"]


class AssertionFailed(RuntimeError):
    """Raised when a checked engine condition does not hold."""


def ensure(condition: object, message: str, logs: Logs | None = None) -> None:
    """Log ``message`` as fatal and raise AssertionFailed unless ``condition`` is true."""
    if condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        filename = os.path.basename(caller.f_code.co_filename)
        line = caller.f_lineno
    else:
        filename, line = "<unknown>", 0
    del frame, caller
    (logs if logs is not None else Logs()).send(LogType.FATAL, filename, line, message)
    raise AssertionFailed(message)