"""ConfigScreen: selector, actions menu, and the parameter list."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Static

from constants import REMOVE_CONFIRM_TEXT, RESET_CONFIRM_TEXT
from controller import (
    Action,
    AddDialog,
    Command,
    ConfigViewModel,
    DeleteConfiguration,
    RemoveConfirm,
    ResetConfirm,
    ScreenWorkflow,
    SelectConfiguration,
    SetParameter,
    SyncConfiguration,
)
from model import ConfigItem, Configuration
from ui.ids import css
from ui.modals import ActionsModal, ConfirmModal, EditParameterModal, InputModal, SelectorModal
from ui.widgets import ConfigActions, ConfigSelector, ParameterRow
import ui.ids as ids

log = logging.getLogger(__name__)


class ConfigScreen(Screen):
    """Main screen: browse, select and edit configurations.

    The screen only renders what the view-model emits and forwards user
    intent. Which dialog is open is tracked by a ScreenWorkflow; each dialog's
    result is fed back into the workflow, and any resulting command is run
    on the view-model in a worker.
    """

    BINDINGS = [
        ("s", "open_selector", "Select"),
        ("m", "open_actions", "Menu"),
    ]

    def __init__(self, view_model: ConfigViewModel) -> None:
        super().__init__()
        self.view_model = view_model
        self.workflow = ScreenWorkflow(lambda: self.view_model.selection)
        self._names: tuple[str, ...] = ()
        self.status_text = ""
        self._config: Configuration | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id=ids.HEADER_CONTAINER):
            yield ConfigSelector()
            yield ConfigActions()
        yield VerticalScroll(id=ids.PARAMETERS_LIST)
        yield Static("", id=ids.STATUS_BAR)

    def on_mount(self) -> None:
        # Workers belong to this screen and are cancelled when it goes away,
        # which unsubscribes the streams.
        self.run_worker(self._watch_names(), group="observers", exit_on_error=False)
        self.run_worker(self._watch_selected(), group="observers", exit_on_error=False)

    # =========================================================================
    # Rendering
    # =========================================================================

    async def _watch_names(self) -> None:
        async for names in self.view_model.observe_config_names().stream():
            self._names = names
            try:
                self.query_one(ConfigSelector).set_names(names)
            except NoMatches:
                log.debug("Selector not mounted")

    async def _watch_selected(self) -> None:
        async for config in self.view_model.observe_selected_config().stream():
            self._config = config
            await self._render_config(config)

    async def _render_config(self, config: Configuration | None) -> None:
        try:
            self.query_one(ConfigSelector).set_selected(config.name if config else None)
            parameters = self.query_one(css(ids.PARAMETERS_LIST), VerticalScroll)
        except NoMatches:
            log.debug("Screen widgets not mounted")
            return
        await parameters.remove_children()
        if config is None:
            await parameters.mount(Static("No configuration selected", id=ids.EMPTY_HINT))
        else:
            await parameters.mount_all(
                [ParameterRow(item, self._on_parameter_selected) for item in config.items]
            )

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        self.status_text = message
        try:
            self.query_one(css(ids.STATUS_BAR), Static).update(message)
        except NoMatches:
            pass

    # =========================================================================
    # Commands
    # =========================================================================

    def _run(self, command: Command | None) -> None:
        """Hand a workflow command to the view-model without blocking the UI."""
        if command is None:
            return
        log.info(f"Running {command}")
        self.run_worker(self._execute(command), group="commands", exit_on_error=False)

    async def _execute(self, command: Command) -> None:
        pending = _describe(command)
        self._set_status(pending)
        await self.view_model.execute(command)
        # A newer command may own the status bar by now
        if self.status_text == pending:
            self._set_status("")

    # =========================================================================
    # Selector
    # =========================================================================

    @on(Button.Pressed, css(ids.SELECTOR_BTN))
    def on_selector_pressed(self, event: Button.Pressed) -> None:
        self.action_open_selector()

    def action_open_selector(self) -> None:
        if not self._names:
            return
        if self.workflow.open_selector():
            self.app.push_screen(
                SelectorModal(self._names, self.view_model.selection),
                self._on_selector_result,
            )

    def _on_selector_result(self, name: str | None) -> None:
        self._run(self.workflow.pick_name(name))

    # =========================================================================
    # Actions menu
    # =========================================================================

    @on(Button.Pressed, css(ids.ACTIONS_BTN))
    def on_actions_pressed(self, event: Button.Pressed) -> None:
        self.action_open_actions()

    def action_open_actions(self) -> None:
        if self.workflow.open_actions():
            self.app.push_screen(ActionsModal(), self._on_action_result)

    def _on_action_result(self, action: Action | None) -> None:
        self.workflow.pick_action(action)
        state = self.workflow.state
        if isinstance(state, AddDialog):
            self.app.push_screen(InputModal(), self._on_add_result)
        elif isinstance(state, RemoveConfirm):
            self.app.push_screen(ConfirmModal(REMOVE_CONFIRM_TEXT), self._on_confirm_result)
        elif isinstance(state, ResetConfirm):
            self.app.push_screen(ConfirmModal(RESET_CONFIRM_TEXT), self._on_confirm_result)

    def _on_add_result(self, name: str | None) -> None:
        if name is None:
            self.workflow.cancel()
            return
        self._run(self.workflow.submit(name))

    def _on_confirm_result(self, confirmed: bool | None) -> None:
        if not confirmed:
            self.workflow.cancel()
            return
        self._run(self.workflow.confirm())

    # =========================================================================
    # Parameter editing
    # =========================================================================

    def _on_parameter_selected(self, item: ConfigItem) -> None:
        if self.workflow.open_editor(item):
            self.app.push_screen(EditParameterModal(item), self._on_edit_result)

    def _on_edit_result(self, value: str | None) -> None:
        if value is None:
            self.workflow.cancel()
            return
        self._run(self.workflow.submit(value))


def _describe(command: Command) -> str:
    """Status bar text while a command is in flight."""
    if isinstance(command, SelectConfiguration):
        return f"Selecting {command.name}..."
    if isinstance(command, DeleteConfiguration):
        return "Removing configuration..."
    if isinstance(command, SyncConfiguration):
        return f"Resetting {command.name}..."
    if isinstance(command, SetParameter):
        return f"Setting {command.item.parameter}..."
    return ""
