"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from session_limits.schema import DEFAULT_TABLE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    session_limit_table: str = DEFAULT_TABLE
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
