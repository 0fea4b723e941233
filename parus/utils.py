"""File helpers, string helpers and unique hash generation."""

from __future__ import annotations

import secrets
import time
from os import PathLike
from typing import Union

from parus.asserts import AssertionFailed

__all__ = [
    "read_file",
    "read_text",
    "write_file",
    "to_upper_case",
    "to_lower_case",
    "equals_ignore_case",
    "trim",
    "generate_hash",
]

PathType = Union[str, "PathLike[str]"]

_WHITESPACE = " \t\n\r\f\v"


def read_file(filename: PathType) -> bytes:
    """Return the whole file as bytes."""
    try:
        with open(filename, "rb") as file:
            return file.read()
    except OSError as error:
        raise AssertionFailed(f"Failed to open file {filename}") from error


def read_text(filename: PathType) -> str:
    """Return the whole file as text."""
    try:
        with open(filename, encoding="utf-8") as file:
            return file.read()
    except OSError as error:
        raise AssertionFailed(f"Failed to open file {filename}") from error


def write_file(filename: PathType, data: bytes | str) -> None:
    """Write ``data`` to the file, replacing its contents; text is stored as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    with open(filename, "wb") as file:
        file.write(data)


def to_upper_case(text: str) -> str:
    """Return ``text`` in upper case."""
    return text.upper()


def to_lower_case(text: str) -> str:
    """Return ``text`` in lower case."""
    return text.lower()


def equals_ignore_case(one: str, another: str) -> bool:
    """Compare two strings without regard to case."""
    return to_lower_case(one) == to_lower_case(another)


def trim(text: str) -> str:
    """Strip spaces, tabs, newlines, carriage returns, form and vertical feeds from both ends."""
    return text.strip(_WHITESPACE)


def generate_hash() -> str:
    """Return 32 hex digits: the current time in nanoseconds followed by 64 random bits."""
    return f"{time.time_ns():016x}{secrets.randbits(64):016x}"