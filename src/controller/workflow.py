"""Screen workflow: which dialog (if any) is open, as a single state value.

The screen is always in exactly one of these states, so two dialogs can never
be open at once:

    Browsing ──tap selector──> SelectorOpen ──pick name | dismiss──> Browsing
    Browsing ──tap actions───> ActionsOpen ──Add──> AddDialog
                                           ──Remove──> RemoveConfirm
                                           ──Reset──> ResetConfirm
                                           ──dismiss──> Browsing
    AddDialog ──submit name──> Browsing [SelectConfiguration]
    RemoveConfirm ──confirm──> Browsing [DeleteConfiguration]
    ResetConfirm ──confirm──> Browsing [SyncConfiguration]
    Browsing ──tap row──> EditDialog(item)
    EditDialog ──submit non-blank──> Browsing [SetParameter]
    any dialog ──cancel──> Browsing

Transitions return the command the view-model should run, or None. Events
that make no sense in the current state are ignored and logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from constants import ACTION_ADD_LABEL, ACTION_REMOVE_LABEL, ACTION_RESET_LABEL
from controller.validators import is_blank
from model import ConfigItem

log = logging.getLogger(__name__)


# =============================================================================
# States
# =============================================================================

@dataclass(frozen=True)
class Browsing:
    pass


@dataclass(frozen=True)
class SelectorOpen:
    pass


@dataclass(frozen=True)
class ActionsOpen:
    pass


@dataclass(frozen=True)
class AddDialog:
    pass


@dataclass(frozen=True)
class RemoveConfirm:
    pass


@dataclass(frozen=True)
class ResetConfirm:
    pass


@dataclass(frozen=True)
class EditDialog:
    item: ConfigItem  # Row being edited, with its value at the time of the tap


WorkflowState = Union[
    Browsing, SelectorOpen, ActionsOpen, AddDialog, RemoveConfirm, ResetConfirm, EditDialog
]


class Action(Enum):
    """Entries of the overflow menu."""

    ADD = ACTION_ADD_LABEL
    REMOVE = ACTION_REMOVE_LABEL
    RESET = ACTION_RESET_LABEL

    @property
    def label(self) -> str:
        return self.value


# =============================================================================
# Commands
# =============================================================================

@dataclass(frozen=True)
class SelectConfiguration:
    name: str


@dataclass(frozen=True)
class DeleteConfiguration:
    pass


@dataclass(frozen=True)
class SyncConfiguration:
    name: str


@dataclass(frozen=True)
class SetParameter:
    item: ConfigItem


Command = Union[SelectConfiguration, DeleteConfiguration, SyncConfiguration, SetParameter]


# =============================================================================
# State machine
# =============================================================================

class ScreenWorkflow:
    """Dialog state machine for the configuration screen.

    Args:
        get_selection: Returns the currently selected configuration name (or
            None). Needed by Reset, which syncs whatever is selected on confirm.
    """

    def __init__(self, get_selection: Callable[[], str | None]) -> None:
        self._get_selection = get_selection
        self.state: WorkflowState = Browsing()

    @property
    def is_browsing(self) -> bool:
        return isinstance(self.state, Browsing)

    def _ignore(self, event: str) -> None:
        log.debug(f"Ignoring '{event}' in state {type(self.state).__name__}")

    def _to(self, state: WorkflowState) -> None:
        log.debug(f"Workflow {type(self.state).__name__} -> {type(state).__name__}")
        self.state = state

    def open_selector(self) -> bool:
        """Tap on the selector. Returns True if the selector opened."""
        if not self.is_browsing:
            self._ignore("open_selector")
            return False
        self._to(SelectorOpen())
        return True

    def pick_name(self, name: str | None) -> Command | None:
        """A name was picked from the selector, or it was dismissed (None)."""
        if not isinstance(self.state, SelectorOpen):
            self._ignore("pick_name")
            return None
        self._to(Browsing())
        if name is None:
            return None
        return SelectConfiguration(name)

    def open_actions(self) -> bool:
        """Tap on the overflow menu. Returns True if the menu opened."""
        if not self.is_browsing:
            self._ignore("open_actions")
            return False
        self._to(ActionsOpen())
        return True

    def pick_action(self, action: Action | None) -> None:
        """An overflow entry was picked, or the menu was dismissed (None)."""
        if not isinstance(self.state, ActionsOpen):
            self._ignore("pick_action")
            return
        if action is Action.ADD:
            self._to(AddDialog())
        elif action is Action.REMOVE:
            self._to(RemoveConfirm())
        elif action is Action.RESET:
            self._to(ResetConfirm())
        else:
            self._to(Browsing())

    def open_editor(self, item: ConfigItem) -> bool:
        """Tap on a parameter row. Returns True if the edit dialog opened."""
        if not self.is_browsing:
            self._ignore("open_editor")
            return False
        self._to(EditDialog(item))
        return True

    def submit(self, value: str) -> Command | None:
        """Submit text from the add or edit dialog.

        A blank name keeps the add dialog open; a blank value closes the edit
        dialog without a command.
        """
        state = self.state
        if isinstance(state, AddDialog):
            if is_blank(value):
                log.debug("Blank configuration name rejected")
                return None
            self._to(Browsing())
            return SelectConfiguration(value.strip())
        if isinstance(state, EditDialog):
            self._to(Browsing())
            if is_blank(value):
                return None
            return SetParameter(state.item.with_value(value))
        self._ignore("submit")
        return None

    def confirm(self) -> Command | None:
        """Confirm the remove or reset dialog."""
        if isinstance(self.state, RemoveConfirm):
            self._to(Browsing())
            return DeleteConfiguration()
        if isinstance(self.state, ResetConfirm):
            self._to(Browsing())
            selected = self._get_selection()
            if selected is None:
                log.debug("Reset confirmed with nothing selected")
                return None
            return SyncConfiguration(selected)
        self._ignore("confirm")
        return None

    def cancel(self) -> None:
        """Dismiss whatever dialog is open."""
        if self.is_browsing:
            return
        self._to(Browsing())
