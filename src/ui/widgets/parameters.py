"""Parameter list widget: ParameterRow."""

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Static

from model import ConfigItem


class ParameterRow(Container):
    """A bordered row showing one parameter: key in bold, value, edit button.

    Clicking anywhere on the row (or the edit button) calls on_select with the item.
    """

    def __init__(self, item: ConfigItem, on_select: Callable[[ConfigItem], None]) -> None:
        super().__init__(classes="parameter-row")
        self.item = item
        self._on_select = on_select

    def compose(self) -> ComposeResult:
        yield Static(self.item.parameter, classes="parameter-name", markup=False)
        with Horizontal(classes="parameter-value-row"):
            yield Static(self.item.value, classes="parameter-value", markup=False)
            yield Button("Edit", classes="parameter-edit-btn", variant="default")

    def on_click(self) -> None:
        self._on_select(self.item)

    @on(Button.Pressed, ".parameter-edit-btn")
    def on_edit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_select(self.item)
