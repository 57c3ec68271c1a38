"""ConfigViewModel: mediates between the configuration screen and its collaborators.

Reads are reactive (Subjects that replay their latest value); writes are
coroutines the UI launches as fire-and-forget workers. Mutations against the
same configuration are serialized with one asyncio.Lock per name, so an edit
issued while a sync of that configuration is in flight waits its turn instead
of being lost or dropped.

Collaborator failures never escape: they are logged and handed to on_error
as a ConfigError.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Callable, Iterator

from constants import SYNC_TIMEOUT
from controller.validators import validate_config_name, validate_parameter_value
from controller.workflow import (
    Command,
    DeleteConfiguration,
    SelectConfiguration,
    SetParameter,
    SyncConfiguration,
)
from errors import ConfigError, NotFound, RemoteUnavailable, StoreError, ValidationRejected
from model import ConfigItem, Configuration, Subject, Subscription
from remote import RemoteSync
from store import ConfigStore

log = logging.getLogger(__name__)


class ConfigViewModel:
    """View-model for the configuration screen."""

    def __init__(
        self,
        store: ConfigStore,
        remote: RemoteSync,
        on_error: Callable[[ConfigError], None] | None = None,
        sync_timeout: float = SYNC_TIMEOUT,
        initial_selection: str | None = None,
    ):
        """Initialize the view-model.

        Args:
            store: Where configurations live
            remote: Source for sync/reset
            on_error: Callback for user-visible errors
            sync_timeout: Seconds before a remote fetch counts as unavailable
            initial_selection: Configuration to select at start, if it exists
        """
        self._store = store
        self._remote = remote
        self._on_error = on_error
        self.sync_timeout = sync_timeout
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

        self._selection: str | None = None
        self._selected: Subject[Configuration | None] = Subject(None)
        self._selected_subscription: Subscription | None = None

        if initial_selection:
            with self._store_errors(f"Select '{initial_selection}'"):
                if store.get(initial_selection) is not None:
                    self._set_selection(initial_selection)

    # =========================================================================
    # Reactive reads
    # =========================================================================

    @property
    def selection(self) -> str | None:
        """Name of the selected configuration, or None."""
        return self._selection

    def observe_config_names(self) -> Subject[tuple[str, ...]]:
        """All configuration names; re-emits when the name set changes."""
        return self._store.observe_names()

    def observe_selected_config(self) -> Subject[Configuration | None]:
        """The selected configuration; re-emits on item or selection changes."""
        return self._selected

    def _set_selection(self, name: str | None) -> None:
        """Point the selected-config subject at a different configuration."""
        # Reading the store can fail; do it before touching any state
        subject = self._store.observe(name) if name is not None else None
        if self._selected_subscription is not None:
            self._selected_subscription.unsubscribe()
            self._selected_subscription = None
        self._selection = name
        log.info(f"Selection: {name}")
        if subject is None:
            self._selected.publish(None)
            return
        self._selected_subscription = subject.subscribe(
            lambda config, watched=name: self._on_selected_changed(watched, config)
        )

    def _on_selected_changed(self, name: str, config: Configuration | None) -> None:
        if name != self._selection:
            return
        self._selected.publish(config)
        # Deleted out from under us: nothing is selected any more
        if config is None and self._selected_subscription is not None:
            self._set_selection(None)

    # =========================================================================
    # Commands
    # =========================================================================

    @asynccontextmanager
    async def _serialized(self, name: str) -> AsyncIterator[None]:
        """Hold name's lock. The lock is dropped once nobody holds or awaits it."""
        lock = self._locks.get(name)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[name] = lock
        self._lock_users[name] = self._lock_users.get(name, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[name] -= 1
            if self._lock_users[name] == 0:
                del self._lock_users[name]
                del self._locks[name]

    def _exists(self, name: str, action: str) -> bool:
        """True if name is in the store. A failed read is reported and counts as absent."""
        with self._store_errors(action):
            return self._store.get(name) is not None
        return False

    def _report(self, error: ConfigError) -> None:
        log.warning(f"{error.title}: {error}")
        if self._on_error is not None:
            self._on_error(error)

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        """Convert store failures into reported ConfigErrors."""
        try:
            yield
        except NotFound as e:
            log.debug(f"{action}: {e}")
        except StoreError as e:
            log.exception(f"{action} failed")
            self._report(e)
        except (OSError, ValueError) as e:
            log.exception(f"{action} failed")
            self._report(StoreError(f"{action} failed: {e}"))

    async def execute(self, command: Command) -> None:
        """Run a command produced by the screen workflow."""
        if isinstance(command, SelectConfiguration):
            await self.select_configuration(command.name)
        elif isinstance(command, DeleteConfiguration):
            await self.delete_configuration()
        elif isinstance(command, SetParameter):
            await self.set_parameter(command.item)
        elif isinstance(command, SyncConfiguration):
            await self.sync_firebase(command.name)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    async def select_configuration(self, name: str) -> None:
        """Select a configuration, creating it empty if it doesn't exist."""
        try:
            name = validate_config_name(name)
        except ValidationRejected as e:
            self._report(e)
            return

        async with self._serialized(name):
            with self._store_errors(f"Select '{name}'"):
                if name == self._selection and self._store.get(name) is not None:
                    return
                self._store.create_empty(name)
                self._set_selection(name)

    async def delete_configuration(self) -> None:
        """Delete the selected configuration. No-op if nothing is selected."""
        name = self._selection
        if name is None:
            log.debug("delete_configuration: nothing selected")
            return

        async with self._serialized(name):
            with self._store_errors(f"Delete '{name}'"):
                self._store.delete(name)
                if self._selection == name:
                    self._set_selection(None)

    async def set_parameter(self, item: ConfigItem) -> None:
        """Upsert an item into the selected configuration.

        Blank values are discarded, matching "blank input cancels edit".
        """
        try:
            validate_parameter_value(item.value)
        except ValidationRejected:
            log.debug(f"set_parameter: blank value for '{item.parameter}' discarded")
            return

        name = self._selection
        if name is None:
            log.debug("set_parameter: nothing selected")
            return

        async with self._serialized(name):
            with self._store_errors(f"Set '{name}.{item.parameter}'"):
                self._store.upsert_item(name, item)

    async def sync_firebase(self, name: str) -> None:
        """Overwrite a configuration's items with the remote snapshot.

        The fetch runs in a thread and is bounded by sync_timeout. On any
        failure the local items are left exactly as they were.
        """
        async with self._serialized(name):
            if not self._exists(name, f"Sync '{name}'"):
                log.debug(f"sync_firebase: '{name}' not available")
                return

            try:
                items = await asyncio.wait_for(
                    asyncio.to_thread(self._remote.fetch, name),
                    timeout=self.sync_timeout,
                )
            except TimeoutError:
                self._report(
                    RemoteUnavailable(f"Sync of '{name}' timed out after {self.sync_timeout:g}s")
                )
                return
            except RemoteUnavailable as e:
                self._report(e)
                return
            except Exception as e:
                log.exception(f"Remote fetch of '{name}' failed")
                self._report(RemoteUnavailable(f"Sync of '{name}' failed: {e}"))
                return

            with self._store_errors(f"Sync '{name}'"):
                self._store.replace_items(name, items)

    def close(self) -> None:
        """Release store subscriptions held by the view-model."""
        if self._selected_subscription is not None:
            self._selected_subscription.unsubscribe()
            self._selected_subscription = None
