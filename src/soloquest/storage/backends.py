"""Key-value text stores backing the record collections.

The storage layer only needs a flat ``key -> text`` store with get, set and
remove. :class:`MemoryStore` keeps everything in a dict; :class:`SQLiteStore`
persists to a single table.

Storage location (default): ~/.soloquest/soloquest.db
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Protocol, runtime_checkable

from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from soloquest.core.config import StorageSettings
from soloquest.core.exceptions import StorageError
from soloquest.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """A synchronous text key-value store."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...

    def clear(self) -> None: ...


def _is_locked_error(exc: BaseException) -> bool:
    return isinstance(exc, sqlite3.OperationalError) and "locked" in str(exc).lower()


# =============================================================================
# In-Memory Store
# =============================================================================


class MemoryStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items


# =============================================================================
# SQLite Store
# =============================================================================


class SQLiteStore:
    """SQLite-backed store with one ``kv`` table.

    Each call opens its own connection. A locked database is retried with
    exponential backoff; any other SQLite failure surfaces as
    :class:`StorageError`.
    """

    def __init__(self, db_path: str | Path | None = None, *, max_retries: int = 3) -> None:
        """Initialize the store.

        Args:
            db_path: Path to the database file. If None, uses the default location.
            max_retries: Attempts for a locked database before giving up.
        """
        self.db_path = Path(db_path) if db_path is not None else self._get_default_path()
        self.max_retries = max_retries

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

        logger.info("Key-value store initialized", path=str(self.db_path))

    @staticmethod
    def _get_default_path() -> Path:
        """Get default database path."""
        return Path.home() / ".soloquest" / "soloquest.db"

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with proper cleanup."""
        conn = sqlite3.connect(str(self.db_path))
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _execute(self, key: str | None, sql: str, params: tuple[str, ...] = ()) -> list[tuple[str, ...]]:
        """Run one statement, retrying while the database is locked."""
        retrying = Retrying(
            retry=retry_if_exception(_is_locked_error),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
            reraise=True,
        )
        rows: list[tuple[str, ...]] = []
        try:
            for attempt in retrying:
                with attempt, self._get_connection() as conn:
                    rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            logger.error("SQLite operation failed", key=key, error=str(exc))
            raise StorageError(
                f"SQLite operation failed: {exc}",
                key=key,
                details={"db_path": str(self.db_path)},
            ) from exc
        return rows

    def _init_schema(self) -> None:
        """Initialize database schema."""
        self._execute(
            None,
            """
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
            """,
        )

    def get_item(self, key: str) -> str | None:
        rows = self._execute(key, "SELECT value FROM kv WHERE key = ?", (key,))
        return rows[0][0] if rows else None

    def set_item(self, key: str, value: str) -> None:
        self._execute(key, "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)", (key, value))

    def remove_item(self, key: str) -> None:
        self._execute(key, "DELETE FROM kv WHERE key = ?", (key,))

    def keys(self) -> list[str]:
        return [row[0] for row in self._execute(None, "SELECT key FROM kv ORDER BY key")]

    def clear(self) -> None:
        self._execute(None, "DELETE FROM kv")


def create_store(settings: StorageSettings) -> KeyValueStore:
    """Build the configured key-value store."""
    if settings.backend == "memory":
        return MemoryStore()
    return SQLiteStore(settings.database_path, max_retries=settings.max_retries)


__all__ = ["KeyValueStore", "MemoryStore", "SQLiteStore", "create_store"]
