"""
Configuration-specific exceptions.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

from .base import ExceptionContext, HttpFacadeError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(HttpFacadeError):
    """Base exception for configuration-related errors."""

    def __init__(self, message: str, help_text: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message, ExceptionContext(help_text=help_text, error_code=error_code))


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, reason: str):
        message = ErrorMessageTemplates.CONFIG_INVALID.format(field=field, value=repr(value), reason=reason)
        help_text = f"Please check the configuration for '{field}'"
        super().__init__(message, help_text, ErrorCodes.CONFIG_INVALID)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationFileError(ConfigurationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, file_path: Union[str, Path], details: str):
        message = ErrorMessageTemplates.CONFIG_FILE_ERROR.format(file_path=file_path, details=details)
        super().__init__(message, "Check the file exists and is valid TOML", ErrorCodes.CONFIG_FILE_ERROR)
        self.file_path = Path(file_path)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        help_text = "Fix the validation errors listed above"
        super().__init__(message, help_text, ErrorCodes.CONFIG_INVALID)
