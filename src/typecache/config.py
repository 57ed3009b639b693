"""
Configuration management using pydantic-settings.

Loads bootstrap configuration for the default file-backed cache from
environment variables (prefixed with TYPECACHE_) and .env files.
"""

from __future__ import annotations

import hashlib
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Optional:
        TYPECACHE_CACHE_DIR: Directory used by the default file store
        TYPECACHE_KEY_HASH_ALGORITHM: hashlib algorithm for physical file names
        TYPECACHE_LOG_LEVEL: Logging level
        TYPECACHE_LOG_FILE: JSON lines log file
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPECACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    CACHE_DIR: Path = Field(default=Path(".cache"), description="Cache directory")
    KEY_HASH_ALGORITHM: str = Field(
        default="md5",
        description="hashlib algorithm used to turn keys into file names",
    )

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    LOG_FILE: Path | None = Field(default=None, description="JSON lines log file")

    @field_validator("KEY_HASH_ALGORITHM")
    @classmethod
    def validate_hash_algorithm(cls, v: str) -> str:
        """Validate that the algorithm is provided by hashlib."""
        name = v.strip().lower()
        if name not in hashlib.algorithms_available:
            raise ValueError(
                f"KEY_HASH_ALGORITHM must be a hashlib algorithm, got {v!r}"
            )
        if name.startswith("shake_"):
            raise ValueError("KEY_HASH_ALGORITHM must have a fixed digest length")
        return name

    def ensure_directories(self) -> None:
        """Create the cache directory if it doesn't exist."""
        self.CACHE_DIR.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings singleton.

    Returns:
        Settings instance loaded from environment.

    Raises:
        ValidationError: If settings are invalid.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
