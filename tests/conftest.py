"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the SoloQuest test suite.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Callable, Generator

    from soloquest.compendium import Compendium
    from soloquest.storage import MemoryStore, RecordStorage, RecoveryNotice


FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache and storage singleton around each test."""
    from soloquest.core.config import clear_settings_cache
    from soloquest.storage import reset_record_storage

    clear_settings_cache()
    reset_record_storage()
    yield
    clear_settings_cache()
    reset_record_storage()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "SOLOQUEST_DEBUG": "true",
        "SOLOQUEST_LOG_LEVEL": "DEBUG",
        "SOLOQUEST_STORAGE_BACKEND": "memory",
        "SOLOQUEST_STORAGE_DATABASE_PATH": str(tmp_path / "test.db"),
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Reference Data Fixtures
# =============================================================================


@pytest.fixture
def compendium() -> Compendium:
    """Provide the bundled compendium."""
    from soloquest.compendium import get_compendium

    return get_compendium()


# =============================================================================
# Randomness Fixtures
# =============================================================================


class FixedRoll:
    """Random source that always returns the same face, clamped to the die."""

    def __init__(self, face: int | None = None) -> None:
        self.face = face
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if self.face is None:
            return b
        return max(a, min(b, self.face))


@pytest.fixture
def max_roll() -> FixedRoll:
    """Random source that always rolls the highest face."""
    return FixedRoll()


@pytest.fixture
def min_roll() -> FixedRoll:
    """Random source that always rolls a 1."""
    return FixedRoll(1)


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock frozen at 2026-01-01T12:00:00.000Z."""
    return lambda: FIXED_NOW


@pytest.fixture
def notices() -> list[RecoveryNotice]:
    """Collects recovery notices sent by a RecordStorage."""
    return []


@pytest.fixture
def memory_store() -> MemoryStore:
    """Provide an empty in-memory key-value store."""
    from soloquest.storage import MemoryStore

    return MemoryStore()


@pytest.fixture
def record_storage(
    memory_store: MemoryStore,
    notices: list[RecoveryNotice],
    fixed_clock: Callable[[], datetime],
    compendium: Compendium,
) -> RecordStorage:
    """RecordStorage over the memory store with a recording notifier."""
    from soloquest.storage import RecordStorage

    return RecordStorage(
        memory_store,
        notifier=notices.append,
        provider=compendium,
        clock=fixed_clock,
    )


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def sample_character_stats() -> dict[str, int]:
    """Provide sample character ability scores.

    Returns:
        Dictionary of ability scores.
    """
    return {
        "strength": 16,
        "dexterity": 14,
        "constitution": 15,
        "intelligence": 10,
        "wisdom": 12,
        "charisma": 8,
    }


@pytest.fixture
def sample_character_record(sample_character_stats: dict[str, int]) -> dict[str, Any]:
    """Provide a stored level 1 Fighter as raw JSON.

    Returns:
        Dictionary in the persisted camelCase shape.
    """
    return {
        "id": "char-1",
        "system": "dnd5e",
        "createdAt": "2026-01-01T00:00:00.000Z",
        "updatedAt": "2026-01-01T00:00:00.000Z",
        "data": {
            "id": "char-1",
            "name": "Test Fighter",
            "race": "Human",
            "class": "Fighter",
            "level": 1,
            "abilityScores": sample_character_stats,
            "experiencePoints": 0,
            "hitPoints": {"current": 12, "max": 12},
            "hitDice": {"current": 1, "max": 1},
            "inventory": [],
            "preparedSpells": [],
        },
    }


@pytest.fixture
def legacy_character_record() -> dict[str, Any]:
    """Provide a character saved before cross-references existed.

    Returns:
        Dictionary lacking classId, raceId, inventory and sourceSpellId.
    """
    return {
        "id": "char-legacy",
        "system": "dnd5e",
        "createdAt": "2025-06-01T00:00:00.000Z",
        "updatedAt": "2025-06-01T00:00:00.000Z",
        "data": {
            "id": "char-legacy",
            "name": "Old Mage",
            "race": "elf",
            "class": " Wizard ",
            "level": 3,
            "abilityScores": {
                "strength": 8,
                "dexterity": 14,
                "constitution": 12,
                "intelligence": 17,
                "wisdom": 12,
                "charisma": 10,
            },
            "experiencePoints": 900,
            "hitPoints": {"current": 14, "max": 14},
            "preparedSpells": [
                {"id": "p1", "name": "  magic missile ", "level": 1},
                {"id": "p2", "name": "Homebrew Zap", "level": 1},
                {"id": "p3", "name": "Shield", "level": 1, "sourceSpellId": "custom-shield"},
            ],
        },
    }


@pytest.fixture
def sample_npc() -> dict[str, Any]:
    """Provide a stored NPC as raw JSON."""
    return {
        "id": "npc-1",
        "name": "Goblin",
        "type": "enemy",
        "hitPoints": 7,
        "armorClass": 15,
        "initiativeBonus": 2,
        "abilities": [{"name": "Nimble Escape", "description": "Disengage or Hide as a bonus action."}],
        "createdAt": "2026-01-01T00:00:00.000Z",
    }


@pytest.fixture
def sample_journal_entry() -> dict[str, Any]:
    """Provide a stored journal entry as raw JSON."""
    return {
        "id": "entry-1",
        "characterId": "char-1",
        "timestamp": "2026-01-01T00:00:00.000Z",
        "title": "Into the Mines",
        "content": "We found the entrance to Wave Echo Cave.",
        "tags": [{"type": "location", "value": "Wave Echo Cave"}],
        "sessionNumber": 1,
    }
