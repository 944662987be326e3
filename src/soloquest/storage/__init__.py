"""Persistence for SoloQuest record collections.

Submodules:
    backends: Key-value text stores (in-memory, SQLite)
    validators: Shape predicates for stored records
    migrations: Envelope version migrations and character backfills
    records: RecordStorage with corruption recovery
"""

from __future__ import annotations

from soloquest.storage.backends import KeyValueStore, MemoryStore, SQLiteStore, create_store
from soloquest.storage.migrations import MigrationRegistry, is_versioned_payload, migrate_character
from soloquest.storage.records import (
    JSON_PARSE_FAILED,
    RECOVERY_TITLE,
    SHAPE_VALIDATION_FAILED,
    STORAGE_KEYS,
    Notifier,
    RecordStorage,
    RecoveryNotice,
    get_record_storage,
    log_notifier,
    reset_record_storage,
    storage_keys,
)
from soloquest.storage.validators import (
    is_character_record,
    is_journal_entry_record,
    is_npc_record,
)


__all__ = [
    # Backends
    "KeyValueStore",
    "MemoryStore",
    "SQLiteStore",
    "create_store",
    # Validators
    "is_character_record",
    "is_npc_record",
    "is_journal_entry_record",
    # Migrations
    "MigrationRegistry",
    "is_versioned_payload",
    "migrate_character",
    # Records
    "STORAGE_KEYS",
    "JSON_PARSE_FAILED",
    "SHAPE_VALIDATION_FAILED",
    "RECOVERY_TITLE",
    "RecoveryNotice",
    "Notifier",
    "RecordStorage",
    "storage_keys",
    "log_notifier",
    "get_record_storage",
    "reset_record_storage",
]
