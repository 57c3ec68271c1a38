"""Firebase Realtime Database remote, read over the REST API."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request

from constants import SYNC_TIMEOUT
from errors import RemoteUnavailable
from model import ConfigItem, items_from_mapping
from remote.base import RemoteSync

log = logging.getLogger(__name__)


class FirebaseRemoteSync(RemoteSync):
    """Reads `<database_url>/<name>.json` and maps it to config items.

    The node must be a JSON object of parameter -> value. A missing node
    (Firebase returns `null`) is an empty configuration.
    """

    def __init__(self, database_url: str, auth_token: str | None = None, timeout: float = SYNC_TIMEOUT):
        self.database_url = database_url.rstrip("/")
        self.auth_token = auth_token
        self.timeout = timeout

    def url_for(self, name: str) -> str:
        """Build the REST URL for a configuration node."""
        url = f"{self.database_url}/{urllib.parse.quote(name, safe='')}.json"
        if self.auth_token:
            url += "?" + urllib.parse.urlencode({"auth": self.auth_token})
        return url

    def fetch(self, name: str) -> list[ConfigItem]:
        if not self.database_url:
            raise RemoteUnavailable("No remote database configured")

        url = self.url_for(name)
        log.info(f"Fetching configuration '{name}' from {self.database_url}")
        req = urllib.request.Request(url, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                data = json.loads(response.read().decode())
        except urllib.error.HTTPError as e:
            raise RemoteUnavailable(f"Remote returned HTTP {e.code} for '{name}'") from e
        except (urllib.error.URLError, TimeoutError, OSError) as e:
            raise RemoteUnavailable(f"Could not reach remote for '{name}': {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RemoteUnavailable(f"Remote sent invalid JSON for '{name}'") from e

        if data is None:
            return []
        if not isinstance(data, dict):
            raise RemoteUnavailable(f"Remote data for '{name}' is not an object")
        return items_from_mapping(name, data)
