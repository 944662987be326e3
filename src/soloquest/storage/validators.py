"""Structural predicates for persisted records.

Each predicate is applied to untyped parsed JSON before it is trusted. They
are total: any malformed input (``None``, lists, numbers, missing fields,
wrong field types) yields ``False``, never an exception.
"""

from __future__ import annotations

from typing import Any


def _is_object(value: Any) -> bool:
    return isinstance(value, dict)


def _has_strings(value: dict[str, Any], *keys: str) -> bool:
    return all(isinstance(value.get(key), str) for key in keys)


def _has_numbers(value: dict[str, Any], *keys: str) -> bool:
    # bool is an int subclass but never a number on the wire
    return all(
        isinstance(value.get(key), int | float) and not isinstance(value.get(key), bool)
        for key in keys
    )


def is_character_record(value: Any) -> bool:
    """Check the shape of a stored character envelope.

    Requires string ``id``, ``system``, ``createdAt`` and ``updatedAt``, and a
    ``data`` object with string ``name``, ``class`` and ``race``.
    """
    if not _is_object(value):
        return False
    if not _has_strings(value, "id", "system", "createdAt", "updatedAt"):
        return False
    data = value.get("data")
    return _is_object(data) and _has_strings(data, "name", "class", "race")


def is_npc_record(value: Any) -> bool:
    """Check the shape of a stored NPC."""
    if not _is_object(value):
        return False
    return _has_strings(value, "id", "name", "type", "createdAt") and _has_numbers(
        value, "hitPoints", "armorClass"
    )


def is_journal_entry_record(value: Any) -> bool:
    """Check the shape of a stored journal entry."""
    if not _is_object(value):
        return False
    return _has_strings(
        value, "id", "characterId", "timestamp", "title", "content"
    ) and isinstance(value.get("tags"), list)


__all__ = ["is_character_record", "is_npc_record", "is_journal_entry_record"]
