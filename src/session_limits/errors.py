"""Error types raised by the session limit services."""

from __future__ import annotations


class SessionLimitError(Exception):
    """Base error carrying a stable error code."""

    error_code = "UNKNOWN_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SessionLimitError):
    """Raised when a limit value is missing or not an integer."""

    error_code = "VALIDATION_ERROR"


class NotFoundError(SessionLimitError):
    """Raised when no session limit exists for the requested id."""

    error_code = "NOT_FOUND"

    def __init__(self, record_id: int | None) -> None:
        if record_id is None:
            message = "No session limit is configured"
        else:
            message = f"Session limit {record_id} not found"
        super().__init__(message)
        self.record_id = record_id


class StorageUnavailableError(SessionLimitError):
    """Raised when the storage backend cannot be reached or times out."""

    error_code = "STORAGE_UNAVAILABLE"


__all__ = [
    "NotFoundError",
    "SessionLimitError",
    "StorageUnavailableError",
    "ValidationError",
]
