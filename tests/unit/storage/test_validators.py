"""Tests for stored record shape predicates."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from soloquest.storage.validators import (
    is_character_record,
    is_journal_entry_record,
    is_npc_record,
)


ALL_PREDICATES = [is_character_record, is_npc_record, is_journal_entry_record]


class TestMalformedInput:
    """Every predicate rejects non-objects without raising."""

    @pytest.mark.parametrize("predicate", ALL_PREDICATES)
    @pytest.mark.parametrize("value", [None, [], [{}], 0, 3.5, "record", True, {}, set()])
    def test_rejects(self, predicate: Callable[[Any], bool], value: Any) -> None:
        assert predicate(value) is False


class TestIsCharacterRecord:
    """Tests for the character predicate."""

    def test_valid(self, sample_character_record: dict[str, Any]) -> None:
        assert is_character_record(sample_character_record) is True

    @pytest.mark.parametrize("field", ["id", "system", "createdAt", "updatedAt"])
    def test_missing_envelope_field(self, sample_character_record: dict[str, Any], field: str) -> None:
        del sample_character_record[field]
        assert is_character_record(sample_character_record) is False

    @pytest.mark.parametrize("field", ["name", "class", "race"])
    def test_missing_sheet_field(self, sample_character_record: dict[str, Any], field: str) -> None:
        del sample_character_record["data"][field]
        assert is_character_record(sample_character_record) is False

    def test_non_string_name(self, sample_character_record: dict[str, Any]) -> None:
        sample_character_record["data"]["name"] = 42
        assert is_character_record(sample_character_record) is False

    @pytest.mark.parametrize("data", [None, [], "Fighter"])
    def test_data_must_be_object(self, sample_character_record: dict[str, Any], data: Any) -> None:
        sample_character_record["data"] = data
        assert is_character_record(sample_character_record) is False


class TestIsNPCRecord:
    """Tests for the NPC predicate."""

    def test_valid(self, sample_npc: dict[str, Any]) -> None:
        assert is_npc_record(sample_npc) is True

    def test_minimal(self) -> None:
        npc = {"id": "n", "name": "Guard", "type": "neutral", "hitPoints": 11.0, "armorClass": 16, "createdAt": "t"}
        assert is_npc_record(npc) is True

    @pytest.mark.parametrize("field", ["id", "name", "type", "createdAt", "hitPoints", "armorClass"])
    def test_missing_field(self, sample_npc: dict[str, Any], field: str) -> None:
        del sample_npc[field]
        assert is_npc_record(sample_npc) is False

    @pytest.mark.parametrize("value", ["7", None, True])
    def test_hit_points_must_be_numeric(self, sample_npc: dict[str, Any], value: Any) -> None:
        sample_npc["hitPoints"] = value
        assert is_npc_record(sample_npc) is False


class TestIsJournalEntryRecord:
    """Tests for the journal entry predicate."""

    def test_valid(self, sample_journal_entry: dict[str, Any]) -> None:
        assert is_journal_entry_record(sample_journal_entry) is True

    def test_empty_tags_valid(self, sample_journal_entry: dict[str, Any]) -> None:
        sample_journal_entry["tags"] = []
        assert is_journal_entry_record(sample_journal_entry) is True

    @pytest.mark.parametrize("field", ["id", "characterId", "timestamp", "title", "content", "tags"])
    def test_missing_field(self, sample_journal_entry: dict[str, Any], field: str) -> None:
        del sample_journal_entry[field]
        assert is_journal_entry_record(sample_journal_entry) is False

    def test_tags_must_be_list(self, sample_journal_entry: dict[str, Any]) -> None:
        sample_journal_entry["tags"] = {"type": "loot"}
        assert is_journal_entry_record(sample_journal_entry) is False
