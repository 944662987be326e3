"""Tests for structured logging helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from structlog.testing import capture_logs

from soloquest.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    log_context,
)
from soloquest.storage import MemoryStore, RecordStorage


@pytest.fixture
def restore_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    clear_context()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_explicit_level(self, restore_structlog: None) -> None:
        configure_logging(level="WARNING", json_format=True)
        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()

    def test_defaults_from_settings(
        self, mock_env_vars: dict[str, str], restore_structlog: None
    ) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_log_file(self, tmp_path: Path, restore_structlog: None) -> None:
        path = str(tmp_path / "soloquest.log")
        configure_logging(level="INFO", json_format=False, log_file=path)
        logging.getLogger("soloquest.test").info("written")
        for handler in logging.getLogger().handlers:
            handler.flush()
        with open(path, encoding="utf-8") as handle:
            assert "written" in handle.read()


class TestContext:
    """Tests for bound logging context."""

    def test_bind_and_clear(self, restore_structlog: None) -> None:
        bind_context(character_id="hero-1")
        assert structlog.contextvars.get_contextvars() == {"character_id": "hero-1"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_log_context_scoped(self, restore_structlog: None) -> None:
        with log_context(key="soloquest_npcs"):
            assert structlog.contextvars.get_contextvars()["key"] == "soloquest_npcs"
        assert "key" not in structlog.contextvars.get_contextvars()


class TestStorageEvents:
    """Storage recoveries are logged as warnings."""

    def test_recovery_warning(self, compendium: object) -> None:
        store = MemoryStore({"soloquest_npcs": "garbage"})
        storage = RecordStorage(store, notifier=lambda notice: None, provider=compendium)  # type: ignore[arg-type]

        with capture_logs() as entries:
            storage.read_npcs()

        warnings = [entry for entry in entries if entry["log_level"] == "warning"]
        assert warnings[0]["event"] == "Resetting corrupt collection"

    def test_get_logger(self) -> None:
        with capture_logs() as entries:
            get_logger("soloquest.test").info("Character saved", level=3)
        assert entries == [{"event": "Character saved", "level": 3, "log_level": "info"}]
