"""Config item model: one parameter/value pair."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ConfigItem:
    """A single parameter within a configuration."""

    config_name: str  # Owning configuration's name
    parameter: str  # Key, unique within the configuration
    value: str = ""  # Empty only as a placeholder before first edit

    def __str__(self) -> str:
        return f"{self.parameter}={self.value}"

    def with_value(self, value: str) -> "ConfigItem":
        """Return a copy of this item holding a new value."""
        return replace(self, value=value)
