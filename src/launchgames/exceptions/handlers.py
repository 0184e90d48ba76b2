"""Helpers for converting and presenting errors.

Low-level errors (pydantic validation, mido port failures) are translated
into LaunchGamesError subclasses here; the CLI then shows
`user_message` plus `recovery_hint` and logs `technical_message`.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import LaunchGamesError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic validation error into a configuration exception.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        ConfigFileInvalidError for JSON syntax errors, ConfigValidationError otherwise
    """
    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "json_invalid" in error_msg or "Invalid JSON" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            fields = [".".join(str(loc) for loc in err.get("loc", ())) for err in errors]
            details = "; ".join(
                f"{field}: {err.get('msg', 'validation failed')}"
                for field, err in zip(fields, errors)
            )
            return ConfigValidationError(
                field=", ".join(fields),
                value=None,
                error_msg=f"{len(errors)} errors ({details})",
                file_path=file_path,
            )

    return ConfigurationError(
        user_message="Configuration could not be loaded",
        technical_message=f"Unexpected configuration error in {file_path}: {error_msg}",
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LaunchGamesError):
        logger.debug(f"Displaying error: {error.technical_message}")
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
