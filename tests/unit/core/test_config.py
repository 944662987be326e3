"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from soloquest.core.config import (
    GameSettings,
    Settings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from soloquest.core.exceptions import ConfigurationError


class TestStorageSettings:
    """Tests for StorageSettings configuration."""

    def test_default_values(self) -> None:
        """Test default storage settings."""
        settings = StorageSettings()

        assert settings.backend == "sqlite"
        assert settings.key_prefix == "soloquest_"
        assert settings.max_retries == 3
        assert settings.database_path.name == "soloquest.db"

    def test_database_path_expands_home(self) -> None:
        """Test that a leading ~ is expanded."""
        settings = StorageSettings(database_path=Path("~/games/soloquest.db"))

        assert "~" not in str(settings.database_path)
        assert settings.database_path == Path.home() / "games" / "soloquest.db"

    def test_key_prefix_rejects_whitespace(self) -> None:
        """Test that key prefixes with whitespace are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            StorageSettings(key_prefix="solo quest_")

        assert "key_prefix" in str(exc_info.value)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading storage settings from the environment."""
        monkeypatch.setenv("SOLOQUEST_STORAGE_BACKEND", "memory")
        monkeypatch.setenv("SOLOQUEST_STORAGE_MAX_RETRIES", "5")

        settings = StorageSettings()

        assert settings.backend == "memory"
        assert settings.max_retries == 5


class TestGameSettings:
    """Tests for GameSettings configuration."""

    def test_default_values(self) -> None:
        """Test default rules settings."""
        settings = GameSettings()

        assert settings.use_average_hp is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test rolling HP can be enabled from the environment."""
        monkeypatch.setenv("SOLOQUEST_GAME_USE_AVERAGE_HP", "false")

        assert GameSettings().use_average_hp is False


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "SoloQuest"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.is_production is True

    def test_env_vars(self, mock_env_vars: dict[str, str]) -> None:
        """Test loading settings from environment variables."""
        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.is_production is False
        assert settings.storage.backend == "memory"


class TestGetSettings:
    """Tests for the settings singleton."""

    def test_singleton_pattern(self, mock_env_vars: dict[str, str]) -> None:
        """Test that get_settings returns the same instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self, mock_env_vars: dict[str, str]) -> None:
        """Test that clearing cache creates new instance."""
        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_environment_raises_configuration_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that invalid values surface as ConfigurationError."""
        monkeypatch.setenv("SOLOQUEST_LOG_LEVEL", "CHATTY")

        with pytest.raises(ConfigurationError):
            get_settings()
