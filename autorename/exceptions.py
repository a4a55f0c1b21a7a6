"""Exceptions raised by autorename."""

from typing import Any


class AutoRenameError(Exception):
    """Base exception for autorename errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize autorename error.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class InvalidRenameError(AutoRenameError):
    """Exception raised when a rename is requested onto the same path."""

    def __init__(
        self,
        source: str,
        destination: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid rename error.

        Args:
            source: Path being renamed
            destination: Requested destination
            details: Additional error details
        """
        message = f"New file name must be different: {destination}"
        error_details = details or {}
        error_details["source"] = source
        error_details["destination"] = destination
        super().__init__(message, error_details)
        self.source = source
        self.destination = destination


class ConfigurationError(AutoRenameError):
    """Exception raised when settings cannot be loaded."""
