"""JSON-compatible conversion for Configuration snapshots.

Format:

    {"name": "main", "items": [{"parameter": "timeout", "value": "30"}, ...]}

Items are a list (not an object) so insertion order survives any JSON tool.
"""

from __future__ import annotations

from typing import Any

from errors import StoreError
from model.config_item import ConfigItem
from model.configuration import Configuration


def configuration_to_dict(config: Configuration) -> dict[str, Any]:
    """Serialize a configuration to a JSON-compatible dict."""
    return {
        "name": config.name,
        "items": [{"parameter": item.parameter, "value": item.value} for item in config.items],
    }


def configuration_from_dict(data: Any, expected_name: str | None = None) -> Configuration:
    """Deserialize a configuration.

    Args:
        data: Parsed JSON data
        expected_name: If given, the stored name must match it

    Raises:
        StoreError: If the data is malformed or the name doesn't match
    """
    if not isinstance(data, dict):
        raise StoreError("Configuration data must be an object")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise StoreError("Configuration data has no name")
    if expected_name is not None and name != expected_name:
        raise StoreError(f"Configuration name mismatch: expected '{expected_name}', found '{name}'")

    raw_items = data.get("items", [])
    if not isinstance(raw_items, list):
        raise StoreError(f"Configuration '{name}': items must be a list")

    items = []
    for i, raw in enumerate(raw_items):
        if not isinstance(raw, dict) or not isinstance(raw.get("parameter"), str):
            raise StoreError(f"Configuration '{name}': item {i} is malformed")
        value = raw.get("value", "")
        items.append(ConfigItem(config_name=name, parameter=raw["parameter"], value=str(value)))

    return Configuration(name=name).with_items(items)


def items_from_mapping(name: str, mapping: dict[str, Any]) -> list[ConfigItem]:
    """Build items from a {parameter: value} mapping, stringifying values."""
    items = []
    for parameter, value in mapping.items():
        if value is None:
            value = ""
        elif isinstance(value, bool):
            value = "true" if value else "false"
        items.append(ConfigItem(config_name=name, parameter=str(parameter), value=str(value)))
    return items
