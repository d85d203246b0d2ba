"""
Centralized configuration management using Pydantic Settings.

This module provides type-safe configuration management with validation,
loading settings from environment variables and .env files.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

PLACEHOLDERS = (
    "your-project",
    "your_supabase",
    "your-anon-key",
    "YOUR_",
    "CHANGE_ME",
)


class Settings(BaseSettings):
    """
    Settings for the backend client and logging, loaded from environment variables.

    Secrets should never be committed to code - use .env file (gitignored).
    """

    # Backend connection
    supabase_url: str = Field(
        ...,
        description="Project URL of the Supabase/PostgREST backend"
    )
    supabase_key: str = Field(
        ...,
        description="API key (anon or service role) used by the client"
    )
    supabase_schema: str = Field(
        default="public",
        description="Postgres schema the query builder targets"
    )
    client_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds, enforced by the client"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit logs as single-line JSON"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("supabase_url")
    @classmethod
    def validate_supabase_url(cls, v: str) -> str:
        """
        Validate the backend URL.

        Must be an http(s) URL and not a placeholder copied from a template.
        """
        if not v or v.strip() == "":
            raise ValueError("SUPABASE_URL is required and cannot be empty")

        v = v.strip()
        if not (v.startswith("https://") or v.startswith("http://")):
            raise ValueError(
                f"SUPABASE_URL must start with http:// or https://. Got: {v[:20]}..."
            )

        if any(p.lower() in v.lower() for p in PLACEHOLDERS):
            raise ValueError("SUPABASE_URL contains placeholder value")

        return v.rstrip("/")

    @field_validator("supabase_key")
    @classmethod
    def validate_supabase_key(cls, v: str) -> str:
        if not v or v.strip() == "":
            raise ValueError(
                "SUPABASE_KEY is required. "
                "Find it under Project Settings > API"
            )

        if any(p.lower() in v.lower() for p in PLACEHOLDERS):
            raise ValueError("SUPABASE_KEY contains placeholder value")

        return v

    @field_validator("supabase_schema")
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if not v or v.strip() == "":
            raise ValueError("SUPABASE_SCHEMA cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = (v or "").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}. Got: {v}"
            )
        return level


@lru_cache()
def get_settings() -> Settings:
    """
    Return the process-wide settings instance.

    Loaded on first use so importing the package never requires
    credentials to be present.
    """
    return Settings()
