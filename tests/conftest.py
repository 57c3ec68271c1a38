"""Shared fixtures for localconfig tests."""

import threading

import pytest

from controller import ConfigViewModel
from model import ConfigItem, Configuration
from remote import RemoteSync
from store import MemoryConfigStore


class FakeRemote(RemoteSync):
    """RemoteSync double with canned data, failure injection and a gate.

    When `blocking` is set, fetch() waits on `release` so tests can hold a
    sync in flight.
    """

    def __init__(self, data: dict[str, dict[str, str]] | None = None) -> None:
        self.data = data or {}
        self.fail: Exception | None = None
        self.blocking = False
        self.release = threading.Event()
        self.started = threading.Event()
        self.calls: list[str] = []

    def fetch(self, name: str) -> list[ConfigItem]:
        self.calls.append(name)
        self.started.set()
        if self.blocking:
            self.release.wait(timeout=5)
        if self.fail is not None:
            raise self.fail
        return [ConfigItem(name, p, v) for p, v in self.data.get(name, {}).items()]


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep XDG config/state writes inside the test's tmp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("LOCALCONFIG_STORE_DIR", raising=False)
    monkeypatch.delenv("LOCALCONFIG_FIREBASE_URL", raising=False)
    monkeypatch.delenv("LOCALCONFIG_FIREBASE_AUTH", raising=False)
    monkeypatch.delenv("LOCALCONFIG_SYNC_TIMEOUT", raising=False)


@pytest.fixture
def store():
    """Empty in-memory store."""
    return MemoryConfigStore()


@pytest.fixture
def main_config():
    """The 'main' configuration with two parameters."""
    return Configuration(name="main").with_items([
        ConfigItem("main", "timeout", "30"),
        ConfigItem("main", "retries", "3"),
    ])


@pytest.fixture
def seeded_store(main_config):
    """Store holding 'main' and an empty 'staging'."""
    return MemoryConfigStore([main_config, Configuration(name="staging")])


@pytest.fixture
def remote():
    """Remote with a 'main' snapshot that differs from main_config."""
    return FakeRemote({"main": {"timeout": "60", "endpoint": "https://example.com"}})


@pytest.fixture
def errors():
    """List collecting errors passed to on_error."""
    return []


@pytest.fixture
def view_model(store, remote, errors):
    """View-model over an empty store."""
    vm = ConfigViewModel(store, remote, on_error=errors.append, sync_timeout=2.0)
    yield vm
    vm.close()
    remote.release.set()


@pytest.fixture
def seeded_view_model(seeded_store, remote, errors):
    """View-model over seeded_store with 'main' selected."""
    vm = ConfigViewModel(
        seeded_store, remote, on_error=errors.append, sync_timeout=2.0, initial_selection="main"
    )
    yield vm
    vm.close()
    remote.release.set()
