"""
SDK settings - pydantic-settings configuration.

This module defines SDK configuration using pydantic-settings
for environment variable loading with validation and defaults.
Only AUTHWARE_* environment variables are read; no .env file is loaded.
The backend origin is fixed and deliberately not configurable.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SDK settings with AUTHWARE_* environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="AUTHWARE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Transport settings
    timeout_seconds: float = 10.0  # Connect, read, write and pool timeout
    user_agent: str = "Authware-Python/0.1.0"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
