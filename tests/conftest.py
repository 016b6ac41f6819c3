"""Shared pytest fixtures for the scriptura test suite."""

import pytest


# ---------------------------------------------------------------------------
# Canon fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def small_books():
    """Two-book table: Genesis (3 chapters), Exodus (2 chapters)."""
    from models.book import Book
    from models.enums import Category, Theme
    return [
        Book(name="Genesis", chapters=3, category=Category.PENTATEUCH, theme=Theme.CREATION),
        Book(name="Exodus", chapters=2, category=Category.PENTATEUCH, theme=Theme.WILDERNESS),
    ]


@pytest.fixture
def small_canon(small_books):
    """Return a CanonIndex over the five-chapter table."""
    from canon.index import CanonIndex
    return CanonIndex(small_books)


@pytest.fixture
def canon():
    """Return the default 66-book CanonIndex."""
    from canon.index import CanonIndex
    return CanonIndex()


# ---------------------------------------------------------------------------
# Database / store fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_db_path(tmp_path):
    """Return a temporary SQLite database path."""
    return tmp_path / "test_scriptura.db"


@pytest.fixture
def db(tmp_db_path):
    """Return an initialized Database instance backed by a temp file."""
    from models.database import Database
    return Database(tmp_db_path)


@pytest.fixture
def sqlite_store(db):
    from progress.store import SqliteProgressStore
    return SqliteProgressStore(db)


@pytest.fixture
def memory_store():
    from progress.store import MemoryProgressStore
    return MemoryProgressStore()


@pytest.fixture
def tracker(small_canon, memory_store):
    """Return a ProgressTracker over the small canon with an empty in-memory store."""
    from progress.tracker import ProgressTracker
    return ProgressTracker(small_canon, memory_store)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    """Return a Settings instance with all paths pointing to tmp_path."""
    from config.settings import Settings
    return Settings(
        _env_file=None,
        sqlite_db_path=tmp_path / "scriptura.db",
        log_dir=tmp_path / "logs",
        plan_horizon_days=30,
        units_per_period=5,
    )
