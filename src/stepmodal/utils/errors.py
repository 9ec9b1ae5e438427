"""Centralized error definitions and handling for stepmodal."""

from enum import Enum
from typing import Any, Dict

from stepmodal.utils.logging import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    VALIDATION = "validation"
    RENDERING = "rendering"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


## Custom Exceptions


class StepModalError(Exception):
    """Base exception for all stepmodal errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise StepModalError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Validation Errors


class ValidationError(StepModalError):
    """Base exception for invalid input handed to the modal."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid input"


class EmptyScreenListError(ValidationError):
    """Raised when a modal is given no screens to show."""

    user_message = "A multi-screen modal needs at least one screen"


class InvalidScreenError(ValidationError):
    """Raised when a screen descriptor is malformed."""

    user_message = "Invalid screen descriptor"


## Rendering Errors


class RenderError(StepModalError):
    """Base exception for failures while building the widget tree."""

    category = ErrorCategory.RENDERING
    user_message = "Failed to render modal content"


class ScreenRenderError(RenderError):
    """Raised when a screen's content callback fails."""

    user_message = "Failed to render screen content"


## File System Errors


class FileSystemError(StepModalError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Configuration Errors


class ConfigurationError(StepModalError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class MissingConfigError(ConfigurationError):
    """Exception for missing configuration settings."""

    user_message = "Missing configuration settings"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = True
    ) -> Dict[str, Any]:
        """Handle errors with logging and user-friendly message."""
        if isinstance(error, StepModalError):
            _get_logger().error(f"{context}: {error.message}", extra=error.details)
            if log_traceback:
                _get_logger().exception(error)
            return error.to_dict()
        else:
            _get_logger().error(f"{context}: {str(error)}")
            if log_traceback:
                _get_logger().exception(error)
            return {
                "error_type": "UnknownError",
                "category": ErrorCategory.UNKNOWN.value,
                "message": str(error),
                "details": {"context": context},
            }


def format_error_message(error: Exception) -> str:
    """Format an error message for display."""
    if isinstance(error, StepModalError):
        return error.message
    else:
        return "An unexpected error occurred - check logs for details."
