"""Validation functions for user input from the dialogs."""

from errors import ValidationRejected


def validate_config_name(value: str) -> str:
    """Validate a configuration name from the add dialog.

    Args:
        value: Raw string from the input field

    Returns:
        The stripped name

    Raises:
        ValidationRejected: If the name is blank
    """
    stripped = value.strip()
    if not stripped:
        raise ValidationRejected("Configuration name must not be blank")
    return stripped


def validate_parameter_value(value: str) -> str:
    """Validate a parameter value from the edit dialog.

    The value is returned unchanged (surrounding whitespace is kept); only an
    all-blank value is rejected, since blank input means "cancel the edit".

    Raises:
        ValidationRejected: If the value is empty or whitespace only
    """
    if not value.strip():
        raise ValidationRejected("Parameter value must not be blank")
    return value


def is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only strings."""
    return value is None or not value.strip()
