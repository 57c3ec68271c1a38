"""Shared constants for localconfig."""

import os
from pathlib import Path

APP_NAME = "localconfig"

# Name the single-configuration variant of the app always worked against
DEFAULT_CONFIG_NAME = "main"

# Seconds to wait for a remote fetch before treating it as unavailable
SYNC_TIMEOUT = 10.0

# Environment overrides
ENV_FIREBASE_URL = "LOCALCONFIG_FIREBASE_URL"
ENV_FIREBASE_AUTH = "LOCALCONFIG_FIREBASE_AUTH"
ENV_SYNC_TIMEOUT = "LOCALCONFIG_SYNC_TIMEOUT"
ENV_STORE_DIR = "LOCALCONFIG_STORE_DIR"

# UI labels for the overflow menu
ACTION_ADD_LABEL = "Add configuration"
ACTION_REMOVE_LABEL = "Remove configuration"
ACTION_RESET_LABEL = "Reset configuration"

ADD_DIALOG_TITLE = "Enter configuration name"
REMOVE_CONFIRM_TEXT = "Do you want to delete configuration?"
RESET_CONFIRM_TEXT = "Do you want to reset configuration?"


def get_config_home() -> Path:
    """Get the XDG config directory for localconfig."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / APP_NAME


def get_state_home() -> Path:
    """Get the XDG state directory for localconfig (logs)."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    return Path(xdg_state) / APP_NAME


def get_store_dir() -> Path:
    """Get the configuration store directory, honoring LOCALCONFIG_STORE_DIR."""
    override = os.environ.get(ENV_STORE_DIR)
    if override:
        return Path(override)
    return get_config_home() / "configurations"


def get_sync_timeout() -> float:
    """Get the sync timeout, honoring LOCALCONFIG_SYNC_TIMEOUT.

    Falls back to SYNC_TIMEOUT when the variable is unset or not a positive number.
    """
    raw = os.environ.get(ENV_SYNC_TIMEOUT, "").strip()
    if not raw:
        return SYNC_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return SYNC_TIMEOUT
    return value if value > 0 else SYNC_TIMEOUT
