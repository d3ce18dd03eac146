"""
Validation and error handling for the poetryrun package.

This module provides the error taxonomy, input validation and error handling
helpers with consistent error reporting across the application.
"""

from .exceptions import (
    DetectFailure,
    ErrorSeverity,
    PoetryRunError,
    PyProjectError,
    ReloadDecisionError,
    ResolutionError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_file_error,
)

from .validators import (
    validate_bool_string,
    validate_enum_choice,
    validate_path_exists,
)

__all__ = [
    # Errors
    "DetectFailure",
    "ErrorSeverity",
    "PoetryRunError",
    "PyProjectError",
    "ReloadDecisionError",
    "ResolutionError",
    "ValidationError",
    # Handlers
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    "handle_file_error",
    # Validators
    "validate_bool_string",
    "validate_enum_choice",
    "validate_path_exists",
]
