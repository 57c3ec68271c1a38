"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Screen layout
HEADER_CONTAINER = "header-container"
SELECTOR_BTN = "selector-btn"
SELECTED_NAME = "selected-name"
ACTIONS_BTN = "actions-btn"
PARAMETERS_LIST = "parameters-list"
EMPTY_HINT = "empty-hint"
STATUS_BAR = "status-bar"

# Modal containers
SELECTOR_MODAL = "selector-modal"
ACTIONS_MODAL = "actions-modal"
INPUT_MODAL = "input-modal"
CONFIRM_MODAL = "confirm-modal"
EDIT_MODAL = "edit-modal"
MODAL_TITLE = "modal-title"
MODAL_BUTTONS = "modal-buttons"

# Modal contents
SELECTOR_LIST = "selector-list"
ADD_CONFIG_BTN = "add-config-btn"
REMOVE_CONFIG_BTN = "remove-config-btn"
RESET_CONFIG_BTN = "reset-config-btn"
CONFIG_NAME_INPUT = "config-name-input"
EDIT_PARAMETER_NAME = "edit-parameter-name"
EDIT_VALUE_INPUT = "edit-value-input"
OK_BTN = "ok-btn"
CONFIRM_BTN = "confirm-btn"
CANCEL_BTN = "cancel-btn"
