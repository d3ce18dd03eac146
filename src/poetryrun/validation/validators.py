"""
Validation functions for configuration values.

Environment variables reach the buildpack as plain strings, so these helpers
turn them into typed values or raise ValidationError naming the offending field.
"""

import os
from pathlib import Path
from typing import Any, List, Union

from .exceptions import ValidationError

# Spellings accepted for boolean environment values.
TRUE_VALUES = ("1", "t", "T", "TRUE", "true", "True")
FALSE_VALUES = ("0", "f", "F", "FALSE", "false", "False")


def validate_bool_string(value: Any, field_name: str = "value") -> bool:
    """
    Validate and convert a boolean string.

    Args:
        value: Value to validate, usually read from the environment
        field_name: Name of the field being validated

    Returns:
        The parsed boolean

    Raises:
        ValidationError: If the value is not a recognized boolean spelling
    """
    if isinstance(value, bool):
        return value
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValidationError(
        f"{field_name} must be a boolean, got {value!r}",
        field_name=field_name,
        value=value
    )


def validate_enum_choice(
    value: Any,
    valid_choices: List[str],
    field_name: str = "value",
    case_sensitive: bool = False
) -> str:
    """
    Validate that a value is one of the allowed choices.

    Args:
        value: Value to validate
        valid_choices: List of valid choices
        field_name: Name of the field being validated
        case_sensitive: Whether to compare case-sensitively

    Returns:
        The matching choice as spelled in valid_choices

    Raises:
        ValidationError: If value is not in valid choices
    """
    str_value = str(value)
    for choice in valid_choices:
        if str_value == choice or (not case_sensitive and str_value.lower() == choice.lower()):
            return choice
    raise ValidationError(
        f"{field_name} must be one of {valid_choices}, got {value!r}",
        field_name=field_name,
        value=value
    )


def validate_path_exists(path: Union[str, Path], field_name: str = "path") -> Path:
    """
    Validate that a path exists.

    Args:
        path: Path to validate
        field_name: Name of the field being validated

    Returns:
        Validated path

    Raises:
        ValidationError: If path doesn't exist
    """
    if not os.path.exists(str(path)):
        raise ValidationError(
            f"{field_name} does not exist: {path}",
            field_name=field_name,
            value=path
        )
    return Path(path)
