"""Persistence adapters for the completed-unit set."""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from config.exceptions import ProgressLoadError, ProgressSaveError
from models.database import Database

logger = logging.getLogger(__name__)


@runtime_checkable
class ProgressStore(Protocol):
    """Durable home for one completed-unit set.

    ``load`` returns None when nothing has been written yet and raises
    ProgressLoadError when the stored value is unreadable. ``save`` replaces
    the stored set and raises ProgressSaveError on failure.
    """

    def load(self) -> Optional[set[str]]:
        ...

    def save(self, unit_ids: set[str]) -> None:
        ...


class MemoryProgressStore:
    """In-process store for ephemeral sessions and tests."""

    def __init__(self, initial: Optional[set[str]] = None):
        self._data: Optional[frozenset[str]] = frozenset(initial) if initial is not None else None
        self.save_count = 0

    def load(self) -> Optional[set[str]]:
        return set(self._data) if self._data is not None else None

    def save(self, unit_ids: set[str]) -> None:
        self._data = frozenset(unit_ids)
        self.save_count += 1


class SqliteProgressStore:
    """Stores the completed set as a JSON list under one key of the kv table.

    The database is opened on first use, so an unreadable file surfaces as
    ProgressLoadError / ProgressSaveError instead of failing construction.
    """

    def __init__(self, db: Database | str | Path, key: str = "completed_units"):
        self._db: Optional[Database] = db if isinstance(db, Database) else None
        self.db_path = self._db.db_path if self._db is not None else Path(db)
        self.key = key

    @property
    def db(self) -> Database:
        if self._db is None:
            self._db = Database(self.db_path)
        return self._db

    def load(self) -> Optional[set[str]]:
        try:
            raw = self.db.get_value(self.key)
        except sqlite3.Error as e:
            raise ProgressLoadError("Progress store unreadable", {"key": self.key, "error": e}) from e
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ProgressLoadError("Progress value is not valid JSON", {"key": self.key}) from e

        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise ProgressLoadError("Progress value must be a list of strings", {"key": self.key})
        return set(data)

    def save(self, unit_ids: set[str]) -> None:
        # Sorted so identical sets always serialize identically
        payload = json.dumps(sorted(unit_ids), ensure_ascii=False)
        try:
            self.db.set_value(self.key, payload)
        except sqlite3.Error as e:
            raise ProgressSaveError("Failed to persist progress", {"key": self.key, "error": e}) from e
        logger.debug("Saved %d completed units under '%s'", len(unit_ids), self.key)

    def clear(self) -> bool:
        """Drop the stored set. Returns False when nothing was stored."""
        try:
            return self.db.delete_value(self.key)
        except sqlite3.Error as e:
            raise ProgressSaveError("Failed to clear progress", {"key": self.key, "error": e}) from e
