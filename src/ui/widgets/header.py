"""Header widgets: ConfigSelector and ConfigActions."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Label

import ui.ids as ids


class ConfigSelector(Horizontal):
    """Dropdown button plus the selected configuration's name.

    The dropdown button is only enabled when there are names to pick from.
    """

    selected_name: str = ""

    def compose(self) -> ComposeResult:
        yield Button("▼", id=ids.SELECTOR_BTN, variant="default", disabled=True)
        yield Label("", id=ids.SELECTED_NAME, markup=False)

    def set_names(self, names: tuple[str, ...]) -> None:
        self.query_one(f"#{ids.SELECTOR_BTN}", Button).disabled = not names

    def set_selected(self, name: str | None) -> None:
        self.selected_name = name or ""
        self.query_one(f"#{ids.SELECTED_NAME}", Label).update(self.selected_name)


class ConfigActions(Horizontal):
    """Overflow menu button. Always enabled, whatever is selected."""

    def compose(self) -> ComposeResult:
        yield Button("⋮", id=ids.ACTIONS_BTN, variant="default")
