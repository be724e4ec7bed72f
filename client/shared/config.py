"""
Centralized configuration for the WalkMate client.

All settings are loaded from environment variables prefixed with WALKMATE_
(or a local .env file) with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE_URL = "https://api.walkmate.klr.kr"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WALKMATE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: Optional[float] = None  # seconds, None disables the timeout
    dedupe_inflight_reads: bool = True

    # Device storage for userRole / onboardingCompleted
    storage_path: Path = Path.home() / ".walkmate" / "storage.json"

    # Used by the CLI when no --token is given
    auth_token: Optional[str] = None

    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
