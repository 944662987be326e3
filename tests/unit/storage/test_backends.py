"""Tests for key-value store backends."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from soloquest.core.config import StorageSettings
from soloquest.core.exceptions import StorageError
from soloquest.storage.backends import KeyValueStore, MemoryStore, SQLiteStore, create_store


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> KeyValueStore:
    if request.param == "memory":
        return MemoryStore()
    return SQLiteStore(tmp_path / "store.db", max_retries=1)


class TestKeyValueStore:
    """Behavior shared by every backend."""

    def test_protocol(self, store: KeyValueStore) -> None:
        assert isinstance(store, KeyValueStore)

    def test_missing_key(self, store: KeyValueStore) -> None:
        assert store.get_item("absent") is None

    def test_set_and_get(self, store: KeyValueStore) -> None:
        store.set_item("soloquest_npcs", '[{"id": "1"}]')
        assert store.get_item("soloquest_npcs") == '[{"id": "1"}]'

    def test_overwrite(self, store: KeyValueStore) -> None:
        store.set_item("k", "one")
        store.set_item("k", "two")
        assert store.get_item("k") == "two"

    def test_remove(self, store: KeyValueStore) -> None:
        store.set_item("k", "v")
        store.remove_item("k")
        store.remove_item("never-set")
        assert store.get_item("k") is None

    def test_keys_and_clear(self, store: KeyValueStore) -> None:
        store.set_item("b", "2")
        store.set_item("a", "1")
        assert sorted(store.keys()) == ["a", "b"]
        store.clear()
        assert store.keys() == []

    def test_empty_string_value(self, store: KeyValueStore) -> None:
        store.set_item("k", "")
        assert store.get_item("k") == ""


class TestSQLiteStore:
    """SQLite-specific behavior."""

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "soloquest.db"
        SQLiteStore(path).set_item("k", "v")
        assert SQLiteStore(path).get_item("k") == "v"

    def test_sqlite_errors_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        store = SQLiteStore(tmp_path / "store.db", max_retries=2)

        def broken_connect(*args: object, **kwargs: object) -> sqlite3.Connection:
            raise sqlite3.OperationalError("database is locked")

        monkeypatch.setattr(sqlite3, "connect", broken_connect)
        with pytest.raises(StorageError) as exc_info:
            store.set_item("soloquest_npcs", "[]")

        assert exc_info.value.details["key"] == "soloquest_npcs"
        assert isinstance(exc_info.value.__cause__, sqlite3.OperationalError)

    def test_locked_database_retried(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        store = SQLiteStore(tmp_path / "store.db", max_retries=3)
        real_connect = sqlite3.connect
        attempts: list[int] = []

        def flaky_connect(*args: object, **kwargs: object) -> sqlite3.Connection:
            attempts.append(1)
            if len(attempts) < 3:
                raise sqlite3.OperationalError("database is locked")
            return real_connect(*args, **kwargs)  # type: ignore[arg-type]

        monkeypatch.setattr(sqlite3, "connect", flaky_connect)
        store.set_item("k", "v")

        assert len(attempts) == 3
        monkeypatch.setattr(sqlite3, "connect", real_connect)
        assert store.get_item("k") == "v"

    def test_other_operational_errors_not_retried(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        store = SQLiteStore(tmp_path / "store.db", max_retries=3)
        attempts: list[int] = []

        def unopenable(*args: object, **kwargs: object) -> sqlite3.Connection:
            attempts.append(1)
            raise sqlite3.OperationalError("unable to open database file")

        monkeypatch.setattr(sqlite3, "connect", unopenable)
        with pytest.raises(StorageError):
            store.get_item("k")

        assert len(attempts) == 1


class TestCreateStore:
    """Tests for backend selection."""

    def test_memory(self) -> None:
        assert isinstance(create_store(StorageSettings(backend="memory")), MemoryStore)

    def test_sqlite(self, tmp_path: Path) -> None:
        settings = StorageSettings(backend="sqlite", database_path=tmp_path / "app.db", max_retries=4)
        store = create_store(settings)
        assert isinstance(store, SQLiteStore)
        assert store.db_path == tmp_path / "app.db"
        assert store.max_retries == 4
