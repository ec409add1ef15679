"""Supabase-backed session limit repository."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from session_limits.domain.limits import SessionLimitRecord
from session_limits.errors import StorageUnavailableError
from session_limits.schema import DEFAULT_TABLE, ID_COLUMN, LIMIT_COLUMN
from session_limits.services.session_limits import SessionLimitRepository

_COLUMNS = f"{ID_COLUMN}, {LIMIT_COLUMN}"

# PostgREST could not reach or query the database
_UNAVAILABLE_CODES = {"PGRST000", "PGRST001", "PGRST002", "PGRST003"}
# Postgres statement timeout, shutdown and connection exception classes
_UNAVAILABLE_SQLSTATE_PREFIXES = ("57014", "57P", "08", "53300")

T = TypeVar("T")


@dataclass
class SupabaseSessionLimitRepository(SessionLimitRepository):
    """Supabase implementation for session limits."""

    client: Client
    table: str = DEFAULT_TABLE

    def insert(self, limit: int) -> SessionLimitRecord:
        """Insert a limit row and return it."""
        response = _call(
            lambda: self.client.table(self.table)
            .insert({LIMIT_COLUMN: limit})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create session limit")
        return _to_record(response.data[0])

    def get(self, record_id: int) -> SessionLimitRecord | None:
        """Return a limit by id, if present."""
        response = _call(
            lambda: self.client.table(self.table)
            .select(_COLUMNS)
            .eq(ID_COLUMN, record_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def update(self, record_id: int, limit: int) -> SessionLimitRecord | None:
        """Overwrite a limit and return the updated row."""
        response = _call(
            lambda: self.client.table(self.table)
            .update({LIMIT_COLUMN: limit})
            .eq(ID_COLUMN, record_id)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def delete(self, record_id: int) -> bool:
        """Delete a limit row."""
        response = _call(
            lambda: self.client.table(self.table)
            .delete()
            .eq(ID_COLUMN, record_id)
            .execute()
        )
        return bool(response.data)

    def get_latest(self) -> SessionLimitRecord | None:
        """Return the limit with the highest id, if any."""
        response = _call(
            lambda: self.client.table(self.table)
            .select(_COLUMNS)
            .order(ID_COLUMN, desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def list_all(self) -> list[SessionLimitRecord]:
        """Return every limit ordered by id."""
        response = _call(
            lambda: self.client.table(self.table)
            .select(_COLUMNS)
            .order(ID_COLUMN)
            .execute()
        )
        return [_to_record(row) for row in response.data or []]

    def count(self) -> int:
        """Return the number of limit rows."""
        response = _call(
            lambda: self.client.table(self.table)
            .select(ID_COLUMN, count="exact")
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])


def _call(request: Callable[[], T]) -> T:
    try:
        return request()
    except httpx.TransportError as exc:
        raise StorageUnavailableError(f"Supabase request failed: {exc}") from exc
    except APIError as exc:
        if _is_unavailable(exc):
            raise StorageUnavailableError(
                f"Supabase storage unavailable: {exc.code} {exc.message}"
            ) from exc
        raise


def _is_unavailable(exc: APIError) -> bool:
    code = str(exc.code or "")
    if code in _UNAVAILABLE_CODES or code.startswith(_UNAVAILABLE_SQLSTATE_PREFIXES):
        return True
    # non-JSON gateway responses carry the HTTP status as the code
    return code.isdigit() and len(code) == 3 and code.startswith("5")


def _to_record(row: dict[str, object]) -> SessionLimitRecord:
    return SessionLimitRecord(id=int(row[ID_COLUMN]), limit=int(row[LIMIT_COLUMN]))
