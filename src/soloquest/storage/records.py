"""Versioned, self-healing storage for record collections.

Each logical collection (characters, NPCs, journal entries) is one JSON
array under one key of a :class:`KeyValueStore`. Reads tolerate a versioned
envelope and never raise: unparseable or wrongly shaped data is backed up
under a timestamped key, the collection is reset to ``[]`` and the user is
told once per key. Writes always overwrite the whole array.

Example:
    >>> storage = RecordStorage(MemoryStore())
    >>> storage.write_npcs([goblin])
    >>> storage.read_npcs()[0]["name"]
    'Goblin'
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel

from soloquest.compendium.provider import ReferenceDataProvider, get_compendium
from soloquest.core.config import get_settings
from soloquest.core.constants import CORRUPT_BACKUP_INFIX, DEFAULT_KEY_PREFIX
from soloquest.core.exceptions import CorruptDataError, StorageError
from soloquest.core.logging import get_logger, log_context
from soloquest.models.base import RecordModel, isoformat_utc
from soloquest.storage.backends import KeyValueStore, create_store
from soloquest.storage.migrations import MigrationRegistry, migrate_character
from soloquest.storage.validators import (
    is_character_record,
    is_journal_entry_record,
    is_npc_record,
)


logger = get_logger(__name__)

JSON_PARSE_FAILED = "JSON parsing failed."
SHAPE_VALIDATION_FAILED = "Shape validation failed."
RECOVERY_TITLE = "Recovered Invalid Saved Data"

COLLECTIONS = ("characters", "npcs", "journal")


def storage_keys(prefix: str = DEFAULT_KEY_PREFIX) -> dict[str, str]:
    """Map each logical collection to its storage key."""
    return {collection: f"{prefix}{collection}" for collection in COLLECTIONS}


STORAGE_KEYS = storage_keys()


@dataclass(frozen=True)
class RecoveryNotice:
    """A user-facing warning that a collection was reset."""

    key: str
    backup_key: str
    reason: str
    title: str
    message: str


Notifier = Callable[[RecoveryNotice], None]
Validator = Callable[[Any], bool]
PostRead = Callable[[dict[str, Any]], dict[str, Any]]


def log_notifier(notice: RecoveryNotice) -> None:
    """Default notifier: report the recovery as a warning log entry."""
    logger.warning(
        notice.title,
        key=notice.key,
        backup_key=notice.backup_key,
        reason=notice.reason,
        notice=notice.message,
    )


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _to_json_value(item: Any) -> Any:
    if isinstance(item, RecordModel):
        return item.to_record()
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True)
    return item


class RecordStorage:
    """Reads and writes record collections with corruption recovery.

    Args:
        store: The key-value store holding the collections.
        notifier: Called at most once per key for this instance when a
            collection is recovered. Defaults to a warning log entry.
        migrations: Envelope version migrations. Defaults to none registered.
        provider: Reference data for character backfills. Defaults to the
            bundled compendium.
        clock: Source of the current time for backup keys.
        key_prefix: Prefix of the collection keys.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        notifier: Notifier | None = None,
        migrations: MigrationRegistry | None = None,
        provider: ReferenceDataProvider | None = None,
        clock: Callable[[], datetime] | None = None,
        key_prefix: str = DEFAULT_KEY_PREFIX,
    ) -> None:
        self.store = store
        self.notifier = notifier or log_notifier
        self.migrations = migrations or MigrationRegistry()
        self.provider = provider or get_compendium()
        self.clock = clock or (lambda: datetime.now(tz=UTC))
        self.key_prefix = key_prefix
        self.keys = storage_keys(key_prefix)
        self.notified_keys: set[str] = set()

    # -------------------------------------------------------------------------
    # Core Read/Write
    # -------------------------------------------------------------------------

    def safe_read_array(
        self,
        key: str,
        validate: Validator,
        *,
        post_read: PostRead | None = None,
    ) -> list[dict[str, Any]]:
        """Read a collection, recovering from corrupt or mis-shaped data.

        Args:
            key: Storage key of the collection.
            validate: Shape predicate every element must satisfy.
            post_read: Per-item migration applied after validation.

        Returns:
            The stored records, or ``[]`` when absent, empty or recovered.
        """
        try:
            raw = self.store.get_item(key)
        except StorageError as exc:
            logger.error("Failed to read collection", key=key, error=str(exc))
            return []
        if not raw:
            return []

        try:
            parsed = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            logger.debug("Stored collection is not valid JSON", key=key, error=str(exc))
            self._recover(key, raw, JSON_PARSE_FAILED)
            return []

        try:
            payload = self.migrations.unwrap(parsed)
        except Exception as exc:
            logger.warning("Stored collection migration failed", key=key, error=repr(exc))
            self._recover(key, raw, JSON_PARSE_FAILED)
            return []

        if not isinstance(payload, list) or not all(validate(item) for item in payload):
            self._recover(key, raw, SHAPE_VALIDATION_FAILED)
            return []

        if post_read is not None:
            payload = [post_read(item) for item in payload]

        logger.debug("Collection read", key=key, count=len(payload))
        return payload

    def safe_write_array(self, key: str, items: Sequence[Any]) -> None:
        """Overwrite a collection with ``items`` as a plain JSON array.

        Raises:
            StorageError: If the items cannot be serialized or stored.
        """
        try:
            text = json.dumps(
                [_to_json_value(item) for item in items], separators=(",", ":"), allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Could not serialize collection: {exc}", key=key) from exc
        self.store.set_item(key, text)
        logger.debug("Collection written", key=key, count=len(items))

    def _recover(self, key: str, raw: str, reason: str) -> None:
        """Back up the bad text, reset the key and notify once."""
        backup_key = f"{key}{CORRUPT_BACKUP_INFIX}{isoformat_utc(self.clock())}"
        error = CorruptDataError(
            "Recovered invalid saved data", key=key, backup_key=backup_key, reason=reason
        )
        with log_context(key=key, backup_key=backup_key):
            logger.warning("Resetting corrupt collection", error=str(error))

            try:
                self.store.set_item(backup_key, raw)
            except StorageError as exc:
                logger.warning("Backup write failed", error=str(exc))

            try:
                self.store.set_item(key, "[]")
            except StorageError as exc:
                logger.warning("Collection reset failed", error=str(exc))

        if key in self.notified_keys:
            return
        self.notified_keys.add(key)
        label = key.removeprefix(self.key_prefix)
        self.notifier(
            RecoveryNotice(
                key=key,
                backup_key=backup_key,
                reason=reason,
                title=RECOVERY_TITLE,
                message=(
                    f"Some saved {label} data was invalid and has been reset. "
                    f"A backup was created ({backup_key}). {reason}"
                ),
            )
        )

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def read_characters(self) -> list[dict[str, Any]]:
        return self.safe_read_array(
            self.keys["characters"],
            is_character_record,
            post_read=lambda record: migrate_character(record, self.provider),
        )

    def write_characters(self, characters: Sequence[Any]) -> None:
        self.safe_write_array(self.keys["characters"], characters)

    def read_npcs(self) -> list[dict[str, Any]]:
        return self.safe_read_array(self.keys["npcs"], is_npc_record)

    def write_npcs(self, npcs: Sequence[Any]) -> None:
        self.safe_write_array(self.keys["npcs"], npcs)

    def read_journal_entries(self) -> list[dict[str, Any]]:
        return self.safe_read_array(self.keys["journal"], is_journal_entry_record)

    def write_journal_entries(self, entries: Sequence[Any]) -> None:
        self.safe_write_array(self.keys["journal"], entries)

    def backup_keys(self, key: str) -> list[str]:
        """List the corrupt-data backups made for ``key``, oldest first."""
        prefix = f"{key}{CORRUPT_BACKUP_INFIX}"
        return sorted(name for name in self.store.keys() if name.startswith(prefix))


# =============================================================================
# Singleton Instance
# =============================================================================


_storage_instance: RecordStorage | None = None


def get_record_storage() -> RecordStorage:
    """Get the global record storage, built from settings on first use."""
    global _storage_instance

    if _storage_instance is None:
        settings = get_settings()
        _storage_instance = RecordStorage(
            create_store(settings.storage),
            key_prefix=settings.storage.key_prefix,
        )

    return _storage_instance


def reset_record_storage() -> None:
    """Drop the global record storage so the next call rebuilds it."""
    global _storage_instance
    _storage_instance = None


__all__ = [
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
