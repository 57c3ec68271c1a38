"""Error kinds surfaced by the configuration workflow.

Collaborator failures are converted to one of these at the view-model
boundary; the UI only ever sees a ConfigError.
"""


class ConfigError(Exception):
    """Base class for configuration workflow errors."""

    title = "Configuration error"


class NotFound(ConfigError):
    """Operation referenced a configuration or parameter absent from the store."""

    title = "Not found"


class RemoteUnavailable(ConfigError):
    """Remote fetch failed or timed out. Local state is unchanged."""

    title = "Remote unavailable"


class ValidationRejected(ConfigError):
    """Input rejected before reaching the store (blank name or value)."""

    title = "Invalid input"


class StoreError(ConfigError):
    """The store could not be read or written."""

    title = "Storage error"
