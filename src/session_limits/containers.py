"""Dependency container wiring for the session limit services."""

from dataclasses import dataclass

from supabase import create_client

from session_limits.adapters.supabase_session_limit_repository import (
    SupabaseSessionLimitRepository,
)
from session_limits.app_logging import configure_logging
from session_limits.config import Settings
from session_limits.services.session_limits import SessionLimitService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_limit_service: SessionLimitService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_limit_repository = SupabaseSessionLimitRepository(
        supabase_client, table=resolved_settings.session_limit_table
    )
    return AppContainer(
        settings=resolved_settings,
        session_limit_service=SessionLimitService(session_limit_repository),
    )
