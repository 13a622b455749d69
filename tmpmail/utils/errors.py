"""Centralized error handling module."""

from enum import Enum
from typing import Any, Dict

from tmpmail.utils.logging import get_logger

logger = get_logger(__name__)


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    DEPENDENCY = "dependency"
    NETWORK = "network"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CLI = "cli"
    SYSTEM = "system"
    FILE_SYSTEM = "file_system"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


## Custom Exceptions


class TmpmailError(Exception):
    """Base exception for all tmpmail errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise TmpmailError with optional message and details."""
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


## Dependency Errors


class DependencyMissingError(TmpmailError):
    """Exception when required external tools are not installed."""

    category = ErrorCategory.DEPENDENCY
    user_message = "Could not find required dependencies"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            f"Could not find the following dependencies: {' '.join(self.missing)}",
            details={"missing": self.missing},
        )


## Network Errors


class ProviderError(TmpmailError):
    """Exception for failures talking to the mailbox or shortening API."""

    category = ErrorCategory.NETWORK
    user_message = "Failed to reach the mail provider"


## Lookup Errors


class NotFoundError(TmpmailError):
    """Exception when a message id does not exist for the current address."""

    category = ErrorCategory.NOT_FOUND
    user_message = "Message not found"


## Address Errors


class AddressError(TmpmailError):
    """Base exception for rejected custom addresses."""

    category = ErrorCategory.VALIDATION
    user_message = "Invalid email address"


class ValidationError(AddressError):
    """Exception for usernames on the reserved-name blacklist."""

    user_message = "For security reasons, that username cannot be used"


class InvalidAddressError(AddressError):
    """Exception for malformed addresses or unsupported domains."""

    user_message = "Provided email is invalid"


## CLI Errors


class UnknownOptionError(TmpmailError):
    """Exception for unrecognised command line options."""

    category = ErrorCategory.CLI
    user_message = "Unknown option"


## System Errors


class ExternalCommandError(TmpmailError):
    """Exception when the browser or clipboard command fails."""

    category = ErrorCategory.SYSTEM
    user_message = "External command failed"


## File System Errors


class FileSystemError(TmpmailError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


class SessionStoreError(FileSystemError):
    """Exception when the session directory cannot be read or written."""

    user_message = "Failed to access the session directory"


## Configuration Errors


class ConfigurationError(TmpmailError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(error: Exception, context: str = "") -> Dict[str, Any]:
        """Log an error and return its dictionary form."""
        if isinstance(error, TmpmailError):
            # Expected failures are reported to the user by the caller
            logger.info(f"{context}: {error.message}", extra={"context": error.details})
            return error.to_dict()

        logger.error(f"{context}: {str(error)}", exc_info=error)
        return {
            "error_type": "UnknownError",
            "category": ErrorCategory.UNKNOWN.value,
            "message": str(error),
            "details": {"context": context},
        }


def format_error_message(error: Exception) -> str:
    """Format an error message for display."""
    if isinstance(error, TmpmailError):
        return error.message
    else:
        return "An unexpected error occurred - check logs for details."
