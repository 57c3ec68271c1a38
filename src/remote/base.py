"""RemoteSync: fetches authoritative configuration items from a remote source."""

from abc import ABC, abstractmethod

from model import ConfigItem


class RemoteSync(ABC):
    """A remote source of configuration snapshots, keyed by name."""

    @abstractmethod
    def fetch(self, name: str) -> list[ConfigItem]:
        """Fetch the full item set for a configuration.

        Blocking; callers run it off the UI loop.

        Raises:
            RemoteUnavailable: If the remote can't be reached or returns garbage
        """
