"""Schema migrations for stored collections.

Two seams:

* :class:`MigrationRegistry` upgrades the payload of a versioned envelope
  (``{"version": n, "data": [...]}``) before validation. No versions are
  registered yet, so every payload passes through unchanged.
* :func:`migrate_character` runs on each character after validation and
  backfills cross-references added after the record was first saved.

Both return new objects; the parsed input is never mutated.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Callable
from typing import Any

from soloquest.compendium.provider import (
    ReferenceDataProvider,
    build_spell_index,
    normalize_name,
)
from soloquest.core.logging import get_logger


logger = get_logger(__name__)

Migration = Callable[[Any], Any]


def is_versioned_payload(value: Any) -> bool:
    """Check for a ``{"version": <number>, "data": ...}`` envelope."""
    if not isinstance(value, dict) or "data" not in value:
        return False
    version = value.get("version")
    return isinstance(version, int | float) and not isinstance(version, bool)


class MigrationRegistry:
    """Maps a stored envelope version to a pure payload transform.

    Example:
        >>> registry = MigrationRegistry()
        >>> registry.register(1, lambda items: [dict(item, system="dnd5e") for item in items])
        >>> registry.unwrap({"version": 1, "data": [{}]})
        [{'system': 'dnd5e'}]
    """

    def __init__(self, migrations: dict[int, Migration] | None = None) -> None:
        self._migrations: dict[int, Migration] = dict(migrations or {})

    def register(self, version: int, migration: Migration) -> None:
        """Register the transform applied to payloads stored at ``version``."""
        self._migrations[version] = migration

    def migrate(self, payload: Any, version: int | float | None = None) -> Any:
        """Upgrade a payload stored at ``version``; unknown versions pass through."""
        if version is None:
            return payload
        if not math.isfinite(version) or version != int(version):
            return payload
        migration = self._migrations.get(int(version))
        if migration is None:
            return payload
        logger.debug("Migrating stored payload", version=version)
        return migration(payload)

    def unwrap(self, parsed: Any) -> Any:
        """Unwrap a versioned envelope and migrate it, or return ``parsed`` as is."""
        if is_versioned_payload(parsed):
            return self.migrate(parsed["data"], parsed["version"])
        return self.migrate(parsed)

    def __contains__(self, version: object) -> bool:
        return version in self._migrations


def migrate_character(record: dict[str, Any], provider: ReferenceDataProvider) -> dict[str, Any]:
    """Backfill missing cross-references on a stored character.

    * ``classId`` / ``raceId`` from class and species name lookups.
    * ``sourceSpellId`` on prepared spells, matched by trimmed, case-insensitive
      name against the provider's spells.
    * ``inventory`` / ``preparedSpells`` default to empty lists.

    Existing values are never overwritten.

    Args:
        record: A character that already passed shape validation.
        provider: Reference data for the lookups.

    Returns:
        A migrated deep copy of ``record``.
    """
    migrated = copy.deepcopy(record)
    data = migrated["data"]

    if not data.get("classId"):
        found_class = provider.get_class_by_name(data["class"])
        if found_class is not None:
            data["classId"] = found_class.id
    if not data.get("raceId"):
        found_race = provider.get_race_by_name(data["race"])
        if found_race is not None:
            data["raceId"] = found_race.id

    if not isinstance(data.get("inventory"), list):
        data["inventory"] = []

    prepared = data.get("preparedSpells")
    if not isinstance(prepared, list):
        data["preparedSpells"] = []
    elif prepared:
        spell_ids = build_spell_index(provider.get_all_spells())
        for spell in prepared:
            if not isinstance(spell, dict) or spell.get("sourceSpellId"):
                continue
            name = spell.get("name")
            if isinstance(name, str) and name.strip():
                spell_id = spell_ids.get(normalize_name(name))
                if spell_id is not None:
                    spell["sourceSpellId"] = spell_id

    return migrated


__all__ = ["Migration", "MigrationRegistry", "is_versioned_payload", "migrate_character"]
