"""Controller layer: mediates between the UI and the configuration collaborators.

This package contains:
- view_model: ConfigViewModel, reactive reads and imperative commands
- workflow: ScreenWorkflow, the dialog state machine and its commands
- validators: input checks for the add/edit dialogs
"""

from controller.view_model import ConfigViewModel
from controller.workflow import (
    Action,
    ActionsOpen,
    AddDialog,
    Browsing,
    Command,
    DeleteConfiguration,
    EditDialog,
    RemoveConfirm,
    ResetConfirm,
    ScreenWorkflow,
    SelectConfiguration,
    SelectorOpen,
    SetParameter,
    SyncConfiguration,
    WorkflowState,
)

__all__ = [
    # View-model
    "ConfigViewModel",
    # Workflow
    "Action",
    "ScreenWorkflow",
    "WorkflowState",
    "Browsing",
    "SelectorOpen",
    "ActionsOpen",
    "AddDialog",
    "RemoveConfirm",
    "ResetConfirm",
    "EditDialog",
    # Commands
    "Command",
    "SelectConfiguration",
    "DeleteConfiguration",
    "SyncConfiguration",
    "SetParameter",
]
