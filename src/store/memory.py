"""In-memory ConfigStore."""

from __future__ import annotations

from model import Configuration
from store.base import ConfigStore


class MemoryConfigStore(ConfigStore):
    """Keeps configurations in a dict. Names are listed in creation order."""

    def __init__(self, configurations: list[Configuration] | None = None) -> None:
        super().__init__()
        self._configs: dict[str, Configuration] = {}
        for config in configurations or []:
            self._configs[config.name] = config

    def list_names(self) -> list[str]:
        return list(self._configs)

    def get(self, name: str) -> Configuration | None:
        return self._configs.get(name)

    def _save(self, config: Configuration) -> None:
        self._configs[config.name] = config

    def _remove(self, name: str) -> None:
        del self._configs[name]
