"""ConfigStore: persistence of named configurations with reactive reads."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from errors import NotFound
from model import ConfigItem, Configuration, Subject

log = logging.getLogger(__name__)


class ConfigStore(ABC):
    """Base class for configuration stores.

    Subclasses implement the four storage primitives (list_names, get, _save,
    _remove). The base class implements the write operations on top of them
    and keeps the observable subjects in step after every write.
    """

    def __init__(self) -> None:
        self._names_subject: Subject[tuple[str, ...]] | None = None
        self._config_subjects: dict[str, Subject[Configuration | None]] = {}

    # =========================================================================
    # Storage primitives
    # =========================================================================

    @abstractmethod
    def list_names(self) -> list[str]:
        """Return all configuration names in store order."""

    @abstractmethod
    def get(self, name: str) -> Configuration | None:
        """Return a configuration snapshot, or None if absent."""

    @abstractmethod
    def _save(self, config: Configuration) -> None:
        """Persist a whole configuration, replacing any previous version."""

    @abstractmethod
    def _remove(self, name: str) -> None:
        """Remove a configuration that is known to exist."""

    # =========================================================================
    # Writes
    # =========================================================================

    def create_empty(self, name: str) -> None:
        """Create an empty configuration. Does nothing if it already exists."""
        if self.get(name) is not None:
            return
        self._save(Configuration(name=name))
        log.info(f"Created configuration '{name}'")
        self._notify(name)

    def delete(self, name: str) -> None:
        """Delete a configuration and all its items.

        Raises:
            NotFound: If the configuration doesn't exist
        """
        if self.get(name) is None:
            raise NotFound(f"Configuration '{name}' does not exist")
        self._remove(name)
        log.info(f"Deleted configuration '{name}'")
        self._notify(name)

    def upsert_item(self, name: str, item: ConfigItem) -> None:
        """Insert or update one item, keyed by parameter.

        Raises:
            NotFound: If the configuration doesn't exist
        """
        config = self._require(name)
        updated = config.with_item(item)
        if updated == config:
            return
        self._save(updated)
        log.debug(f"Set {name}.{item.parameter}")
        self._notify(name)

    def replace_items(self, name: str, items: Iterable[ConfigItem]) -> None:
        """Overwrite every item of a configuration in one write.

        Raises:
            NotFound: If the configuration doesn't exist
        """
        config = self._require(name)
        updated = config.with_items(items)
        if updated == config:
            return
        self._save(updated)
        log.info(f"Replaced items of '{name}' ({len(updated)} item(s))")
        self._notify(name)

    def _require(self, name: str) -> Configuration:
        config = self.get(name)
        if config is None:
            raise NotFound(f"Configuration '{name}' does not exist")
        return config

    # =========================================================================
    # Observation
    # =========================================================================

    def observe_names(self) -> Subject[tuple[str, ...]]:
        """Subject of the name set. Replays the current names on subscribe."""
        if self._names_subject is None:
            self._names_subject = Subject(tuple(self.list_names()))
        return self._names_subject

    def observe(self, name: str) -> Subject[Configuration | None]:
        """Subject of one configuration. Emits None while it doesn't exist."""
        subject = self._config_subjects.get(name)
        if subject is None:
            subject = Subject(self.get(name))
            self._config_subjects[name] = subject
        return subject

    def _notify(self, name: str) -> None:
        """Push fresh snapshots to the subjects affected by a write to name."""
        if self._names_subject is not None:
            self._names_subject.publish(tuple(self.list_names()))
        subject = self._config_subjects.get(name)
        if subject is not None:
            subject.publish(self.get(name))
            # Gone and unwatched: observe() will build a fresh one if asked again
            if subject.value is None and subject.subscriber_count == 0:
                del self._config_subjects[name]
