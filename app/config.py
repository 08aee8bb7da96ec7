# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Missing required values (database connection, port) fail at startup with a
# validation error instead of surfacing on the first request.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance, or passed
    explicitly to `create_app()` in tests.
    """

    # -------------------------------------------------------------------------
    # Record Store
    # -------------------------------------------------------------------------
    # The Supabase connection is required - app won't start without it

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
    )

    FRUITS_TABLE: str = Field(
        default="fruits",
        min_length=1,
        description="Table holding fruit records"
    )

    STORE_BACKEND: Literal["supabase", "memory"] = Field(
        default="supabase",
        description="Record store implementation ('memory' keeps data in-process)"
    )

    # -------------------------------------------------------------------------
    # HTTP Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )

    PORT: int = Field(
        ...,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    ERROR_STATUS_CODES: bool = Field(
        default=False,
        description=(
            "Answer errors with their own HTTP status (404/400/503/500) "
            "instead of 200 with a JSON error body"
        )
    )

    TEMPLATES_DIR: str | None = Field(
        default=None,
        description="Override for the Jinja2 templates directory"
    )

    STATIC_DIR: str | None = Field(
        default=None,
        description="Override for the public static files directory"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
