"""Domain models for session limits."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SessionLimitRecord:
    """Represents the configured session limit.

    A record built in memory has no ``id`` until storage assigns one.
    """

    limit: int
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        """Return True once storage has assigned an identifier."""
        return self.id is not None

    def with_limit(self, limit: int) -> "SessionLimitRecord":
        """Return a copy carrying a different limit."""
        return replace(self, limit=limit)
