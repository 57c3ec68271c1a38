"""Custom Textual widgets for localconfig."""

from ui.widgets.header import ConfigActions, ConfigSelector
from ui.widgets.parameters import ParameterRow

__all__ = [
    "ConfigActions",
    "ConfigSelector",
    "ParameterRow",
]
