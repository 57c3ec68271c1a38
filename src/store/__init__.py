"""Configuration stores."""

from store.base import ConfigStore
from store.memory import MemoryConfigStore
from store.json_store import JsonConfigStore

__all__ = [
    "ConfigStore",
    "JsonConfigStore",
    "MemoryConfigStore",
]
