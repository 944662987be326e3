"""Integration tests for the character lifecycle.

Create a character, save it, earn XP, level up through an ASI, and read it
back through the guarded storage path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from soloquest.compendium import Compendium
from soloquest.engine import (
    SplitASI,
    can_level_up,
    create_character_record,
    is_asi_level,
    level_up_character,
    xp_progress,
)
from soloquest.models import Ability, CharacterRecord
from soloquest.storage import RecordStorage, SQLiteStore


pytestmark = pytest.mark.integration


class TestCharacterLifecycle:
    """Test a character from creation to level 4."""

    def test_create_save_and_reload(self, record_storage: RecordStorage, compendium: Compendium) -> None:
        """Saved characters come back unchanged."""
        hero = create_character_record(
            {"name": "Mira", "race": "Halfling", "class": "Rogue"}, compendium
        )
        record_storage.write_characters([hero])

        (stored,) = record_storage.read_characters()
        assert CharacterRecord.from_record(stored) == hero

    def test_level_up_to_four(self, record_storage: RecordStorage, compendium: Compendium) -> None:
        """Level a Cleric from 1 to 4, applying the level 4 ASI."""
        hero = create_character_record(
            {
                "name": "Brother Aldric",
                "race": "Human",
                "class": "Cleric",
                "abilityScores": {"wisdom": 15, "constitution": 14},
            },
            compendium,
        )
        features = compendium.require_class("Cleric").features
        hero = hero.replace_data(experience_points=2700)
        assert xp_progress(hero.data.experience_points).level == 4

        while can_level_up(hero.data.level, hero.data.experience_points):
            target = hero.data.level + 1
            asi = None
            if is_asi_level(features, target):
                asi = SplitASI(ability1=Ability.WIS, ability2=Ability.CON)
            result = level_up_character(hero, compendium, use_average=True, asi=asi)
            hero = result.record
            record_storage.write_characters([hero])

        assert hero.data.level == 4
        assert hero.data.ability_scores.wisdom == 16
        assert hero.data.ability_scores.constitution == 15
        # 8 + 2 at level 1, then 3 x (5 + 2) at the pre-ASI CON modifier
        assert hero.data.hit_points.max == 10 + 3 * 7
        assert hero.data.hit_dice.max == 4
        assert hero.data.spell_slots.maxima()[:2] == [4, 3]

        (stored,) = record_storage.read_characters()
        assert stored["data"]["level"] == 4
        assert stored["data"]["abilityScores"]["wisdom"] == 16


class TestSQLiteCharacterStorage:
    """Test characters persisted to a SQLite file."""

    def test_survives_reopen(
        self, tmp_path: Path, compendium: Compendium, fixed_clock: Any
    ) -> None:
        path = tmp_path / "campaign.db"
        hero = create_character_record({"name": "Kael", "race": "Tiefling", "class": "Warlock"}, compendium)

        RecordStorage(SQLiteStore(path), provider=compendium, clock=fixed_clock).write_characters([hero])
        reopened = RecordStorage(SQLiteStore(path), provider=compendium, clock=fixed_clock)

        (stored,) = reopened.read_characters()
        assert stored["id"] == hero.id
        assert stored["data"]["spellSlots"]["level1"] == {"current": 1, "max": 1}

    def test_corruption_recovered_on_disk(
        self, tmp_path: Path, compendium: Compendium, fixed_clock: Any
    ) -> None:
        store = SQLiteStore(tmp_path / "campaign.db")
        store.set_item("soloquest_characters", '[{"id": "half-written"')
        notices: list[Any] = []

        storage = RecordStorage(store, notifier=notices.append, provider=compendium, clock=fixed_clock)

        assert storage.read_characters() == []
        assert store.get_item("soloquest_characters") == "[]"
        assert storage.backup_keys("soloquest_characters") == [
            "soloquest_characters_corrupt_2026-01-01T12:00:00.000Z"
        ]
        assert len(notices) == 1
