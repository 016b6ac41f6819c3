"""Tests for the SQLite key-value database and progress store."""

import sqlite3

import pytest

from config.exceptions import ProgressLoadError, ProgressSaveError


class TestKeyValueCRUD:
    def test_get_missing_returns_none(self, db):
        assert db.get_value("nothing") is None

    def test_set_and_get(self, db):
        db.set_value("a", "1")
        assert db.get_value("a") == "1"

    def test_set_overwrites(self, db):
        db.set_value("a", "1")
        db.set_value("a", "2")
        assert db.get_value("a") == "2"

    def test_delete(self, db):
        db.set_value("a", "1")
        assert db.delete_value("a") is True
        assert db.delete_value("a") is False
        assert db.get_value("a") is None

    def test_values_survive_reopen(self, tmp_db_path):
        from models.database import Database
        Database(tmp_db_path).set_value("k", "v")
        assert Database(tmp_db_path).get_value("k") == "v"


class TestSqliteProgressStore:
    def test_absent_returns_none(self, sqlite_store):
        assert sqlite_store.load() is None

    def test_save_then_load(self, sqlite_store):
        sqlite_store.save({"Genesis-2", "Genesis-1"})
        assert sqlite_store.load() == {"Genesis-1", "Genesis-2"}

    def test_saved_as_sorted_json_list(self, sqlite_store, db):
        sqlite_store.save({"Exodus-1", "Genesis-1"})
        assert db.get_value("completed_units") == '["Exodus-1", "Genesis-1"]'

    def test_keys_are_isolated(self, db):
        from progress.store import SqliteProgressStore
        SqliteProgressStore(db, key="alice").save({"Genesis-1"})
        assert SqliteProgressStore(db, key="bob").load() is None

    def test_accepts_path(self, tmp_db_path):
        from progress.store import SqliteProgressStore
        SqliteProgressStore(tmp_db_path).save({"Jude-1"})
        assert SqliteProgressStore(tmp_db_path).load() == {"Jude-1"}

    @pytest.mark.parametrize("raw", ["{not json", '{"a": 1}', "[1, 2]", '"Genesis-1"'])
    def test_malformed_value_raises_load_error(self, sqlite_store, db, raw):
        db.set_value("completed_units", raw)
        with pytest.raises(ProgressLoadError):
            sqlite_store.load()

    def test_sqlite_failure_on_save(self, sqlite_store, monkeypatch):
        def boom(key, value):
            raise sqlite3.OperationalError("database is locked")
        monkeypatch.setattr(sqlite_store.db, "set_value", boom)
        with pytest.raises(ProgressSaveError):
            sqlite_store.save({"Genesis-1"})

    def test_tracker_recovers_from_corrupt_store(self, small_canon, sqlite_store, db):
        from progress.tracker import ProgressTracker
        db.set_value("completed_units", "garbage")
        tracker = ProgressTracker(small_canon, sqlite_store)
        assert tracker.aggregate_percentage() == 0
        tracker.toggle("Genesis-1")
        assert sqlite_store.load() == {"Genesis-1"}

    def test_stale_ids_from_store_not_counted(self, small_canon, sqlite_store):
        from progress.tracker import ProgressTracker
        sqlite_store.save({"Leviticus-1"})
        tracker = ProgressTracker(small_canon, sqlite_store)
        assert tracker.aggregate_percentage() == 0

    def test_clear_removes_stored_set(self, sqlite_store):
        sqlite_store.save({"Genesis-1"})
        assert sqlite_store.clear() is True
        assert sqlite_store.load() is None
        assert sqlite_store.clear() is False


class TestCorruptDatabaseFile:
    @pytest.fixture
    def garbage_path(self, tmp_path):
        path = tmp_path / "garbage.db"
        path.write_bytes(b"garbage" * 1000)
        return path

    def test_construction_does_not_touch_file(self, garbage_path):
        from progress.store import SqliteProgressStore
        store = SqliteProgressStore(garbage_path)
        assert store.db_path == garbage_path

    def test_load_raises_load_error(self, garbage_path):
        from progress.store import SqliteProgressStore
        with pytest.raises(ProgressLoadError):
            SqliteProgressStore(garbage_path).load()

    def test_save_raises_save_error(self, garbage_path):
        from progress.store import SqliteProgressStore
        with pytest.raises(ProgressSaveError):
            SqliteProgressStore(garbage_path).save({"Genesis-1"})

    def test_tracker_starts_empty(self, small_canon, garbage_path):
        from progress.store import SqliteProgressStore
        from progress.tracker import ProgressTracker
        tracker = ProgressTracker(small_canon, SqliteProgressStore(garbage_path))
        assert tracker.completed_ids() == frozenset()
        assert tracker.aggregate_percentage() == 0

    def test_toggle_keeps_memory_state_when_file_unwritable(self, small_canon, garbage_path):
        from progress.store import SqliteProgressStore
        from progress.tracker import ProgressTracker
        tracker = ProgressTracker(small_canon, SqliteProgressStore(garbage_path))
        with pytest.raises(ProgressSaveError):
            tracker.toggle("Genesis-1")
        assert tracker.is_complete("Genesis-1")
