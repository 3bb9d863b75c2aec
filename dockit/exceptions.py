"""Custom exception hierarchy for dockit."""

from __future__ import annotations


class DockitError(Exception):
    """Base exception for all dockit-specific errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(DockitError):
    """Raised when configuration cannot be written or is unusable."""
    pass


class ValidationError(DockitError):
    """Base class for input validation errors."""
    pass


class InvalidDateError(ValidationError):
    """Raised when a date is not a real calendar date in YYYY-MM-DD form."""
    pass


class StorageError(DockitError):
    """Raised when storage operations fail."""
    pass


class UploadError(StorageError):
    """Raised when transferring a file to object storage fails."""
    pass


class OperationCancelled(DockitError):
    """Raised when the user aborts a prompt or interrupts the run."""
    pass
