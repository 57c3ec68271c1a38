"""Modal dialogs for the configuration screen."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from constants import ADD_DIALOG_TITLE
from controller.workflow import Action
from model import ConfigItem
from ui.ids import css
import ui.ids as ids


class ConfigNameItem(Static):
    """A clickable configuration name in the selector."""

    def __init__(self, name: str, selected: bool = False) -> None:
        super().__init__(name, markup=False)
        self.config_name = name
        self.add_class("config-name-item")
        if selected:
            self.add_class("selected")

    def on_click(self) -> None:
        """Handle click - dismiss modal with this name."""
        self.screen.dismiss(self.config_name)


class SelectorModal(ModalScreen[str | None]):
    """Dropdown of configuration names."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, names: tuple[str, ...], selected: str | None = None) -> None:
        super().__init__()
        self.names = names
        self.selected = selected

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.SELECTOR_MODAL):
            with VerticalScroll(id=ids.SELECTOR_LIST):
                for name in self.names:
                    yield ConfigNameItem(name, selected=(name == self.selected))

    def action_cancel(self) -> None:
        self.dismiss(None)


class ActionsModal(ModalScreen[Action | None]):
    """Overflow menu: add, remove, reset."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.ACTIONS_MODAL):
            yield Button(f"{Action.ADD.label}  +", id=ids.ADD_CONFIG_BTN, classes="action-btn")
            yield Button(f"{Action.REMOVE.label}  ✕", id=ids.REMOVE_CONFIG_BTN, classes="action-btn")
            yield Button(f"{Action.RESET.label}  ↻", id=ids.RESET_CONFIG_BTN, classes="action-btn")

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.ADD_CONFIG_BTN))
    def on_add(self, event: Button.Pressed) -> None:
        self.dismiss(Action.ADD)

    @on(Button.Pressed, css(ids.REMOVE_CONFIG_BTN))
    def on_remove(self, event: Button.Pressed) -> None:
        self.dismiss(Action.REMOVE)

    @on(Button.Pressed, css(ids.RESET_CONFIG_BTN))
    def on_reset(self, event: Button.Pressed) -> None:
        self.dismiss(Action.RESET)


class InputModal(ModalScreen[str | None]):
    """Modal asking for a configuration name. Blank input keeps it open."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str = ADD_DIALOG_TITLE) -> None:
        super().__init__()
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.INPUT_MODAL):
            yield Label(self.title_text, id=ids.MODAL_TITLE)
            yield Input(placeholder="Configuration name...", id=ids.CONFIG_NAME_INPUT)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("OK", id=ids.OK_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.CONFIG_NAME_INPUT), Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.OK_BTN))
    def on_ok(self, event: Button.Pressed) -> None:
        name = self.query_one(css(ids.CONFIG_NAME_INPUT), Input).value.strip()
        if name:
            self.dismiss(name)

    @on(Input.Submitted, css(ids.CONFIG_NAME_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        name = event.value.strip()
        if name:
            self.dismiss(name)


class ConfirmModal(ModalScreen[bool]):
    """Yes/no confirmation for destructive actions."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.CONFIRM_MODAL):
            yield Label(self.text, id=ids.MODAL_TITLE)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("OK", id=ids.CONFIRM_BTN, variant="error")

    def action_cancel(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(False)

    @on(Button.Pressed, css(ids.CONFIRM_BTN))
    def on_confirm(self, event: Button.Pressed) -> None:
        self.dismiss(True)


class EditParameterModal(ModalScreen[str | None]):
    """Edit one parameter's value. The parameter name is read-only.

    Dismisses with the raw input (possibly blank) on OK/Enter, None on cancel.
    Deciding what a blank value means is left to the caller.
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, item: ConfigItem) -> None:
        super().__init__()
        self.item = item

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.EDIT_MODAL):
            yield Label(self.item.parameter, id=ids.EDIT_PARAMETER_NAME, markup=False)
            yield Input(value=self.item.value, placeholder="Value", id=ids.EDIT_VALUE_INPUT)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="default")
                yield Button("OK", id=ids.OK_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.EDIT_VALUE_INPUT), Input).focus()

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.OK_BTN))
    def on_ok(self, event: Button.Pressed) -> None:
        self.dismiss(self.query_one(css(ids.EDIT_VALUE_INPUT), Input).value)

    @on(Input.Submitted, css(ids.EDIT_VALUE_INPUT))
    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)
