"""Session limit business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from session_limits.domain.limits import SessionLimitRecord
from session_limits.errors import NotFoundError, ValidationError

_logger = logging.getLogger(__name__)

# range of the Postgres integer column backing the limit
LIMIT_MIN = -(2**31)
LIMIT_MAX = 2**31 - 1


class SessionLimitRepository(Protocol):
    """Persistence interface for session limits."""

    def insert(self, limit: int) -> SessionLimitRecord:
        """Persist a new limit and return it with its assigned id."""

    def get(self, record_id: int) -> SessionLimitRecord | None:
        """Return a limit by id, if present."""

    def update(self, record_id: int, limit: int) -> SessionLimitRecord | None:
        """Overwrite a limit and return it, or None when the row is missing."""

    def delete(self, record_id: int) -> bool:
        """Delete a limit and return True when a row was removed."""

    def get_latest(self) -> SessionLimitRecord | None:
        """Return the limit with the highest id, if any."""

    def list_all(self) -> list[SessionLimitRecord]:
        """Return every stored limit ordered by id."""

    def count(self) -> int:
        """Return the number of stored limits."""


@dataclass
class SessionLimitService:
    """Application service for session limit records."""

    repository: SessionLimitRepository

    def create(self, limit: int | None = None) -> SessionLimitRecord:
        """Validate and persist a new session limit."""
        value = _validate_limit(limit)
        record = self.repository.insert(value)
        _logger.info("Session limit created: id=%s limit=%s", record.id, record.limit)
        return record

    def find_by_id(self, record_id: int) -> SessionLimitRecord:
        """Return the session limit for an id or raise NotFoundError."""
        record = self.repository.get(record_id)
        if record is None:
            raise NotFoundError(record_id)
        return record

    def update(self, record_id: int, limit: int | None = None) -> SessionLimitRecord:
        """Overwrite the limit of an existing record."""
        value = _validate_limit(limit)
        record = self.repository.update(record_id, value)
        if record is None:
            raise NotFoundError(record_id)
        _logger.info("Session limit updated: id=%s limit=%s", record.id, record.limit)
        return record

    def delete(self, record_id: int) -> None:
        """Remove a session limit.

        Deleting an id twice raises NotFoundError on the second call.
        """
        if not self.repository.delete(record_id):
            raise NotFoundError(record_id)
        _logger.info("Session limit deleted: id=%s", record_id)

    def list_all(self) -> list[SessionLimitRecord]:
        """Return all stored session limits."""
        return self.repository.list_all()

    def count(self) -> int:
        """Return how many session limits are stored."""
        return self.repository.count()

    def current(self) -> SessionLimitRecord:
        """Return the most recently created limit."""
        record = self.repository.get_latest()
        if record is None:
            raise NotFoundError(None)
        return record


def _validate_limit(limit: object) -> int:
    if limit is None:
        raise ValidationError("limit is required")
    # bool is an int subclass but never a meaningful limit
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError(f"limit must be an integer, got {type(limit).__name__}")
    if not LIMIT_MIN <= limit <= LIMIT_MAX:
        raise ValidationError(
            f"limit must be between {LIMIT_MIN} and {LIMIT_MAX}, got {limit}"
        )
    return limit
