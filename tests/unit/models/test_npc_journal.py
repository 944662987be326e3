"""Tests for NPC and journal entry models."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from soloquest.models import NPC, JournalEntry, JournalTagType, NPCType
from soloquest.storage.validators import is_npc_record


class TestNPC:
    """Tests for NPC model."""

    def test_from_record(self, sample_npc: dict[str, Any]) -> None:
        npc = NPC.from_record(sample_npc)
        assert npc.type is NPCType.ENEMY
        assert npc.hit_points == 7
        assert npc.armor_class == 15
        assert npc.abilities[0].name == "Nimble Escape"

    def test_round_trip(self, sample_npc: dict[str, Any]) -> None:
        assert NPC.from_record(sample_npc).to_record() == sample_npc

    def test_optional_fields_omitted(self) -> None:
        npc = NPC(id="n", name="Barkeep", hit_points=4, armor_class=10, created_at="2026-01-01T00:00:00.000Z")
        stored = npc.to_record()
        assert stored["type"] == "neutral"
        assert "initiativeBonus" not in stored
        assert "notes" not in stored

    def test_fractional_numbers_accepted(self, sample_npc: dict[str, Any]) -> None:
        """Any number that passes the stored-shape check loads as a model."""
        stored = {**sample_npc, "hitPoints": 7.5, "armorClass": 13.0}
        assert is_npc_record(stored)
        npc = NPC.from_record(stored)
        assert npc.hit_points == 7.5
        assert npc.to_record()["hitPoints"] == 7.5
        assert NPC.from_record(sample_npc).to_record()["hitPoints"] == 7

    def test_negative_hit_points_rejected(self, sample_npc: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            NPC.from_record({**sample_npc, "hitPoints": -1})


class TestJournalEntry:
    """Tests for JournalEntry model."""

    def test_from_record(self, sample_journal_entry: dict[str, Any]) -> None:
        entry = JournalEntry.from_record(sample_journal_entry)
        assert entry.character_id == "char-1"
        assert entry.session_number == 1
        assert entry.tags[0].type is JournalTagType.LOCATION

    def test_round_trip(self, sample_journal_entry: dict[str, Any]) -> None:
        assert JournalEntry.from_record(sample_journal_entry).to_record() == sample_journal_entry

    def test_has_tag(self, sample_journal_entry: dict[str, Any]) -> None:
        entry = JournalEntry.from_record(sample_journal_entry)
        assert entry.has_tag("location") is True
        assert entry.has_tag(JournalTagType.LOCATION, "Wave Echo Cave") is True
        assert entry.has_tag(JournalTagType.LOCATION, "Phandalin") is False
        assert entry.has_tag(JournalTagType.LOOT) is False

    def test_unknown_tag_type_rejected(self, sample_journal_entry: dict[str, Any]) -> None:
        bad = {**sample_journal_entry, "tags": [{"type": "weather", "value": "rain"}]}
        with pytest.raises(ValidationError):
            JournalEntry.from_record(bad)
