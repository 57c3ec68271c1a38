"""Command-line interface for localconfig."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from constants import (
    DEFAULT_CONFIG_NAME,
    ENV_FIREBASE_AUTH,
    ENV_FIREBASE_URL,
    get_store_dir,
    get_sync_timeout,
)
from controller import ConfigViewModel
from errors import ConfigError, RemoteUnavailable
from remote import FirebaseRemoteSync, RemoteSync, StaticRemoteSync
from store import ConfigStore, JsonConfigStore, MemoryConfigStore

LOCALCONFIG_VERSION = "0.1.0"

log = logging.getLogger(__name__)


def print_error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the localconfig CLI."""
    parser = argparse.ArgumentParser(
        prog="localconfig",
        description="Browse and edit named configurations, and reset them from a remote source.",
    )
    parser.add_argument("--version", action="version", version=f"localconfig {LOCALCONFIG_VERSION}")

    storage = parser.add_argument_group("storage")
    storage.add_argument("--store-dir", metavar="DIR", type=Path,
                         help="Directory holding configuration files")
    storage.add_argument("--memory", action="store_true",
                         help="Keep configurations in memory only")

    remote = parser.add_argument_group("remote")
    remote.add_argument("--firebase-url", metavar="URL",
                        help=f"Firebase Realtime Database URL (or ${ENV_FIREBASE_URL})")
    remote.add_argument("--firebase-auth", metavar="TOKEN",
                        help=f"Firebase auth token (or ${ENV_FIREBASE_AUTH})")
    remote.add_argument("--remote-file", metavar="FILE", type=Path,
                        help="Use a local JSON file of {name: {parameter: value}} as the remote")
    remote.add_argument("--timeout", metavar="SECONDS", type=float,
                        help="Remote fetch timeout")

    parser.add_argument("--select", metavar="NAME", help="Configuration to select at start")
    parser.add_argument("--list", action="store_true", help="Print configuration names and exit")
    parser.add_argument("--show", metavar="NAME", nargs="?", const=DEFAULT_CONFIG_NAME,
                        help="Print a configuration's parameters and exit")
    parser.add_argument("--reset", metavar="NAME", nargs="?", const=DEFAULT_CONFIG_NAME,
                        help="Overwrite a configuration from the remote and exit")
    return parser


def build_store(args: argparse.Namespace) -> ConfigStore:
    """Create the store selected on the command line."""
    if args.memory:
        return MemoryConfigStore()
    return JsonConfigStore(args.store_dir or get_store_dir())


def build_remote(args: argparse.Namespace) -> RemoteSync:
    """Create the remote selected on the command line.

    Raises:
        RemoteUnavailable: If --remote-file can't be loaded
    """
    if args.remote_file is not None:
        return StaticRemoteSync.from_file(args.remote_file)
    url = args.firebase_url or os.environ.get(ENV_FIREBASE_URL, "")
    auth = args.firebase_auth or os.environ.get(ENV_FIREBASE_AUTH) or None
    return FirebaseRemoteSync(url, auth_token=auth, timeout=resolve_timeout(args))


def resolve_timeout(args: argparse.Namespace) -> float:
    if args.timeout is not None and args.timeout > 0:
        return args.timeout
    return get_sync_timeout()


def list_configurations(store: ConfigStore) -> None:
    names = store.list_names()
    if not names:
        print("No configurations")
        return
    for name in names:
        print(name)


def show_configuration(store: ConfigStore, name: str) -> int:
    config = store.get(name)
    if config is None:
        print_error(f"Configuration not found: {name}")
        return 1
    for item in config:
        print(f"{item.parameter}={item.value}")
    return 0


async def reset_configuration(
    store: ConfigStore, remote: RemoteSync, name: str, timeout: float
) -> list[ConfigError]:
    """Sync one configuration headlessly. Returns the errors reported."""
    errors: list[ConfigError] = []
    view_model = ConfigViewModel(store, remote, on_error=errors.append, sync_timeout=timeout)
    try:
        await view_model.sync_firebase(name)
    finally:
        view_model.close()
    return errors


def run_reset(store: ConfigStore, remote: RemoteSync, name: str, timeout: float) -> int:
    if store.get(name) is None:
        print_error(f"Configuration not found: {name}")
        return 1
    log.info(f"Headless reset of '{name}'")
    errors = asyncio.run(reset_configuration(store, remote, name, timeout))
    if errors:
        for error in errors:
            print_error(str(error))
        return 1
    print(f"Reset {name}: {len(store.get(name) or ())} parameter(s)")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    from app import LocalConfigApp, setup_logging

    args = create_parser().parse_args(argv)
    setup_logging()

    try:
        store = build_store(args)
        remote = build_remote(args)
    except RemoteUnavailable as e:
        print_error(str(e))
        sys.exit(1)

    try:
        if args.list:
            list_configurations(store)
            sys.exit(0)
        if args.show is not None:
            sys.exit(show_configuration(store, args.show))
        if args.reset is not None:
            sys.exit(run_reset(store, remote, args.reset, resolve_timeout(args)))
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    app = LocalConfigApp(
        store,
        remote,
        version=LOCALCONFIG_VERSION,
        sync_timeout=resolve_timeout(args),
        initial_selection=args.select,
    )
    app.run()


if __name__ == "__main__":
    main()
