"""Grouped key/value settings loaded from INI-style files."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Union

from parus.asserts import ensure
from parus.services import Service
from parus.utils import read_text, trim

__all__ = ["Configs"]

CONFIG_FILE_EXTENSION = ".ini"
DEFAULT_GROUP = "common"

_INT_PREFIX = re.compile(r"[ \t\n\r\f\v]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Configs(Service):
    """Settings held as group -> key -> string value."""

    def __init__(self, folder: Union[str, "PathLike[str]"] = "config") -> None:
        self.folder = Path(folder)
        self._data: dict[str, dict[str, str]] = {}

    def load_all(self) -> None:
        """Load every ``.ini`` file directly inside the config folder."""
        ensure(self.folder.is_dir(), "Config folder must exist.")
        for path in sorted(self.folder.iterdir()):
            if path.is_file() and path.suffix == CONFIG_FILE_EXTENSION:
                self.load_file(path)

    def load_file(self, path: Union[str, "PathLike[str]"]) -> None:
        """Merge the settings of one file into the store."""
        current_group = ""
        for raw_line in read_text(path).split("\n"):
            line = trim(raw_line)
            if not line or line[0] in ";#":
                continue
            if line.startswith("[") and line.endswith("]"):
                current_group = trim(line[1:-1])
                continue
            key, separator, value = line.partition("=")
            if not separator:
                continue
            if not current_group:
                current_group = DEFAULT_GROUP
            self._data.setdefault(current_group, {})[trim(key)] = trim(value)

    def get(self, group: str, key: str, default: str = "") -> str:
        """Return the value, or ``default`` when group or key is absent."""
        return self._data.get(group, {}).get(key, default)

    def write(self, group: str, key: str, value: str) -> None:
        """Set a value, creating the group if needed."""
        self._data.setdefault(group, {})[key] = value

    def get_by_group(self, group: str) -> dict[str, str]:
        """Return a copy of a group's settings; an absent group is created empty."""
        return dict(self._data.setdefault(group, {}))

    def get_as_bool(self, group: str, key: str) -> bool | None:
        """Return the value as a bool if it is exactly ``true`` or ``false``."""
        value = self.get(group, key)
        if value in ("true", "false"):
            return value == "true"
        return None

    def get_as_int(self, group: str, key: str) -> int | None:
        """Return the leading integer of the value, or None if there is none or it overflows."""
        match = _INT_PREFIX.match(self.get(group, key))
        if match is None:
            return None
        number = int(match.group(1))
        if not _INT_MIN <= number <= _INT_MAX:
            return None
        return number