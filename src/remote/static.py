"""Remote backed by a fixed mapping, for offline use."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from errors import RemoteUnavailable
from model import ConfigItem, items_from_mapping
from remote.base import RemoteSync


class StaticRemoteSync(RemoteSync):
    """Serves configurations from a {name: {parameter: value}} mapping."""

    def __init__(self, data: dict[str, dict[str, Any]]) -> None:
        self.data = data

    @classmethod
    def from_file(cls, path: Path) -> "StaticRemoteSync":
        """Load the mapping from a JSON file.

        Raises:
            RemoteUnavailable: If the file can't be read or isn't an object
        """
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise RemoteUnavailable(f"Cannot read remote file {path}: {e}") from e
        if not isinstance(data, dict):
            raise RemoteUnavailable(f"Remote file {path} must contain an object")
        return cls(data)

    def fetch(self, name: str) -> list[ConfigItem]:
        node = self.data.get(name)
        if node is None:
            return []
        if not isinstance(node, dict):
            raise RemoteUnavailable(f"Remote data for '{name}' is not an object")
        return items_from_mapping(name, node)
