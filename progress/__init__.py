"""Progress package — completed-unit tracking and its persistence."""

from progress.store import MemoryProgressStore, ProgressStore, SqliteProgressStore
from progress.tracker import ProgressSummary, ProgressTracker

__all__ = [
    "ProgressStore",
    "MemoryProgressStore",
    "SqliteProgressStore",
    "ProgressTracker",
    "ProgressSummary",
]
