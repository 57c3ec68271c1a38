"""UI module containing the screen, modals, widgets, and styles."""

from ui.widgets import ConfigActions, ConfigSelector, ParameterRow
from ui.modals import (
    ActionsModal,
    ConfigNameItem,
    ConfirmModal,
    EditParameterModal,
    InputModal,
    SelectorModal,
)
from ui.screen import ConfigScreen
from ui import ids

__all__ = [
    # Screen
    "ConfigScreen",
    # Widgets
    "ConfigActions",
    "ConfigSelector",
    "ParameterRow",
    # Modals
    "ActionsModal",
    "ConfigNameItem",
    "ConfirmModal",
    "EditParameterModal",
    "InputModal",
    "SelectorModal",
]
