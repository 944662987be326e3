"""Configuration management for SoloQuest.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides.

Example:
    >>> from soloquest.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.storage.key_prefix
    'soloquest_'

Environment Variables:
    SOLOQUEST_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SOLOQUEST_STORAGE_BACKEND: Key-value backend ('sqlite' or 'memory')
    SOLOQUEST_STORAGE_DATABASE_PATH: Path to the SQLite database file
    SOLOQUEST_STORAGE_KEY_PREFIX: Prefix for collection keys
    SOLOQUEST_GAME_USE_AVERAGE_HP: Take average HP on level up instead of rolling
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from soloquest.core.constants import DEFAULT_KEY_PREFIX
from soloquest.core.exceptions import ConfigurationError


class StorageSettings(BaseSettings):
    """Configuration for the persisted record collections.

    Attributes:
        backend: Key-value store implementation.
        database_path: Path to the SQLite database file.
        key_prefix: Prefix applied to collection keys.
        max_retries: Attempts for a locked SQLite database before giving up.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLOQUEST_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Key-value store backend",
    )
    database_path: Path = Field(
        default=Path.home() / ".soloquest" / "soloquest.db",
        description="Path to SQLite database",
    )
    key_prefix: str = Field(
        default=DEFAULT_KEY_PREFIX,
        description="Prefix applied to collection keys",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts when the database is locked",
    )

    @field_validator("database_path", mode="after")
    @classmethod
    def expand_database_path(cls, value: Path) -> Path:
        """Expand a leading ``~`` in the database path."""
        return value.expanduser()

    @field_validator("key_prefix", mode="after")
    @classmethod
    def validate_key_prefix(cls, value: str) -> str:
        """Reject prefixes containing whitespace.

        Raises:
            ConfigurationError: If the prefix contains whitespace.
        """
        if any(ch.isspace() for ch in value):
            raise ConfigurationError(
                f"key_prefix must not contain whitespace, got {value!r}",
                config_key="key_prefix",
            )
        return value


class GameSettings(BaseSettings):
    """Configuration for rules engine behavior.

    Attributes:
        use_average_hp: Take the fixed average on level up rather than rolling.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLOQUEST_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    use_average_hp: bool = Field(
        default=True,
        description="Use average HP gain on level up",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        storage: Storage settings.
        game: Rules engine settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLOQUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="SoloQuest",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    game: GameSettings = Field(default_factory=GameSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "StorageSettings",
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
