"""JSON-file ConfigStore: one <name>.json file per configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from urllib.parse import quote, unquote

from errors import StoreError
from model import Configuration, configuration_from_dict, configuration_to_dict
from store.base import ConfigStore

log = logging.getLogger(__name__)


class JsonConfigStore(ConfigStore):
    """Stores each configuration as a JSON file in a directory.

    File names are the percent-encoded configuration name, so any non-empty
    name maps to exactly one file. Names are listed sorted. Writes go to a
    temporary file first and are moved into place, so a reader never sees a
    half-written configuration.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path) -> None:
        super().__init__()
        self.directory = directory

    def path_for(self, name: str) -> Path:
        """Get the file path for a configuration name."""
        return self.directory / f"{quote(name, safe='')}{self.SUFFIX}"

    def list_names(self) -> list[str]:
        if not self.directory.exists():
            return []
        names = []
        for path in self.directory.glob(f"*{self.SUFFIX}"):
            name = unquote(path.stem)
            # Only canonical file names; anything else isn't reachable through get()
            if name and self.path_for(name).name == path.name:
                names.append(name)
        return sorted(names)

    def get(self, name: str) -> Configuration | None:
        path = self.path_for(name)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise StoreError(f"Configuration file {path} is not valid JSON: {e}") from e
        return configuration_from_dict(data, expected_name=name)

    def _save(self, config: Configuration) -> None:
        path = self.path_for(config.name)
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(configuration_to_dict(config), indent=2))
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        log.debug(f"Wrote {path}")

    def _remove(self, name: str) -> None:
        self.path_for(name).unlink()
