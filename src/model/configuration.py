"""Configuration model: a named, insertion-ordered collection of ConfigItems."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator

from model.config_item import ConfigItem


@dataclass(frozen=True)
class Configuration:
    """An immutable snapshot of one named configuration.

    Items keep insertion order and are unique by parameter. Mutating helpers
    return new snapshots so a value handed to subscribers never changes under
    them.
    """

    name: str
    items: tuple[ConfigItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Configuration name must not be empty")

    def __iter__(self) -> Iterator[ConfigItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def get(self, parameter: str) -> ConfigItem | None:
        """Get an item by parameter key."""
        for item in self.items:
            if item.parameter == parameter:
                return item
        return None

    def parameters(self) -> dict[str, str]:
        """Return the items as an ordered {parameter: value} dict."""
        return {item.parameter: item.value for item in self.items}

    def with_item(self, item: ConfigItem) -> Configuration:
        """Upsert an item by parameter.

        An existing key keeps its position; a new key is appended.
        """
        item = replace(item, config_name=self.name)
        items = list(self.items)
        for i, existing in enumerate(items):
            if existing.parameter == item.parameter:
                items[i] = item
                break
        else:
            items.append(item)
        return replace(self, items=tuple(items))

    def with_items(self, items: Iterable[ConfigItem]) -> Configuration:
        """Replace every item. Duplicate parameters collapse, last one wins."""
        merged: dict[str, ConfigItem] = {}
        for item in items:
            merged[item.parameter] = replace(item, config_name=self.name)
        return replace(self, items=tuple(merged.values()))
