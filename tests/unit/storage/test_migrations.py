"""Tests for stored payload migrations."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from soloquest.compendium import Compendium
from soloquest.storage.migrations import (
    MigrationRegistry,
    is_versioned_payload,
    migrate_character,
)


class TestIsVersionedPayload:
    """Tests for envelope detection."""

    @pytest.mark.parametrize(
        "value",
        [{"version": 1, "data": []}, {"version": 2.5, "data": None}],
    )
    def test_envelopes(self, value: Any) -> None:
        assert is_versioned_payload(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            [],
            {"data": []},
            {"version": "1", "data": []},
            {"version": True, "data": []},
            {"version": 1},
            None,
        ],
    )
    def test_not_envelopes(self, value: Any) -> None:
        assert is_versioned_payload(value) is False


class TestMigrationRegistry:
    """Tests for version dispatch."""

    def test_identity_by_default(self) -> None:
        registry = MigrationRegistry()
        payload = [{"id": "1"}]
        assert registry.unwrap({"version": 1, "data": payload}) is payload
        assert registry.unwrap(payload) is payload

    def test_dispatch_by_version(self) -> None:
        registry = MigrationRegistry()
        registry.register(1, lambda items: [{**item, "migrated": True} for item in items])

        assert 1 in registry
        assert registry.unwrap({"version": 1, "data": [{"id": "a"}]}) == [{"id": "a", "migrated": True}]
        assert registry.unwrap({"version": 2, "data": [{"id": "a"}]}) == [{"id": "a"}]

    def test_bare_payload_not_migrated(self) -> None:
        registry = MigrationRegistry({1: lambda items: []})
        assert registry.unwrap([{"id": "a"}]) == [{"id": "a"}]

    def test_float_version(self) -> None:
        registry = MigrationRegistry({3: lambda items: "upgraded"})
        assert registry.migrate([], 3.0) == "upgraded"

    @pytest.mark.parametrize("version", [float("inf"), float("-inf"), float("nan"), 1.5])
    def test_unusable_versions_pass_through(self, version: float) -> None:
        registry = MigrationRegistry({1: lambda items: "upgraded"})
        assert registry.migrate(["kept"], version) == ["kept"]


class TestMigrateCharacter:
    """Tests for the character post-read backfill."""

    def test_backfills_reference_ids(
        self, legacy_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        migrated = migrate_character(legacy_character_record, compendium)
        assert migrated["data"]["classId"] == "wizard"
        assert migrated["data"]["raceId"] == "elf"

    def test_defaults_inventory(
        self, legacy_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        assert migrate_character(legacy_character_record, compendium)["data"]["inventory"] == []

    def test_defaults_prepared_spells(
        self, legacy_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        del legacy_character_record["data"]["preparedSpells"]
        assert migrate_character(legacy_character_record, compendium)["data"]["preparedSpells"] == []

    def test_backfills_source_spell_ids(
        self, legacy_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        spells = migrate_character(legacy_character_record, compendium)["data"]["preparedSpells"]
        assert spells[0]["sourceSpellId"] == "magic-missile"
        assert "sourceSpellId" not in spells[1]
        assert spells[2]["sourceSpellId"] == "custom-shield"

    def test_existing_ids_kept(
        self, sample_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        sample_character_record["data"]["classId"] = "homebrew-fighter"
        migrated = migrate_character(sample_character_record, compendium)
        assert migrated["data"]["classId"] == "homebrew-fighter"
        assert migrated["data"]["raceId"] == "human"

    def test_unknown_names_left_absent(
        self, sample_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        sample_character_record["data"]["class"] = "Artificer"
        migrated = migrate_character(sample_character_record, compendium)
        assert "classId" not in migrated["data"]

    def test_input_not_mutated(
        self, legacy_character_record: dict[str, Any], compendium: Compendium
    ) -> None:
        before = copy.deepcopy(legacy_character_record)
        migrate_character(legacy_character_record, compendium)
        assert legacy_character_record == before

    def test_idempotent(self, legacy_character_record: dict[str, Any], compendium: Compendium) -> None:
        once = migrate_character(legacy_character_record, compendium)
        assert migrate_character(once, compendium) == once
