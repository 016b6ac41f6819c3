"""Progress tracker: completed-unit state and derived completion views."""

import logging
import threading
from dataclasses import dataclass
from typing import Iterable, Optional

from canon.index import CanonIndex
from config.exceptions import PersistenceError, ProgressSaveError
from models.plan import Plan, SchedulePeriod
from progress.store import ProgressStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressSummary:
    completed_units: int
    total_units: int
    percentage: int
    completed_periods: int
    total_periods: int
    next_period: Optional[int]  # first incomplete period, None when all done


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


class ProgressTracker:
    """Owns one session's completed-unit set.

    The in-memory set is the source of truth; the store is best-effort
    durability. Mutations and their persistence write happen under one lock
    so concurrent toggles cannot lose updates.
    """

    def __init__(self, canon: CanonIndex, store: ProgressStore):
        self.canon = canon
        self.store = store
        self._lock = threading.Lock()
        self._completed: set[str] = self._load()

    def _load(self) -> set[str]:
        try:
            loaded = self.store.load()
        except PersistenceError as e:
            logger.warning("Progress store unreadable, starting empty: %s", e)
            return set()
        if loaded is None:
            logger.info("No saved progress found, starting empty")
            return set()
        stale = len(loaded - self.canon.all_unit_ids())
        if stale:
            logger.info("Loaded progress contains %d ids not in the current canon", stale)
        logger.info("Loaded %d completed units", len(loaded))
        return set(loaded)

    def _persist(self) -> None:
        """Write the current set; caller holds the lock.

        Ids that are not in the current canon are dropped before writing so
        they do not linger in the store.
        """
        stale = self._completed - self.canon.all_unit_ids()
        if stale:
            logger.info("Dropping %d stored ids not in the current canon", len(stale))
            self._completed -= stale
        try:
            self.store.save(set(self._completed))
        except PersistenceError as e:
            logger.error("Progress write failed (in-memory state kept): %s", e)
            if isinstance(e, ProgressSaveError):
                raise
            raise ProgressSaveError(e.message, e.details) from e

    # ---- Mutations ----

    def toggle(self, unit_id: str) -> bool:
        """Flip completion of ``unit_id`` and persist. Returns the new state.

        Raises:
            InvalidUnitIdError / UnknownBookError / ChapterOutOfRangeError:
                ``unit_id`` does not name a unit in the canon. Nothing changes.
            ProgressSaveError: the write failed. The flip is kept in memory.
        """
        self.canon.parse_unit_id(unit_id)
        with self._lock:
            if unit_id in self._completed:
                self._completed.discard(unit_id)
                now_complete = False
            else:
                self._completed.add(unit_id)
                now_complete = True
            logger.debug("Toggled %s -> %s", unit_id, now_complete)
            self._persist()
        return now_complete

    def set_complete(self, unit_ids: Iterable[str], complete: bool = True) -> int:
        """Mark several units complete (or incomplete) in one persisted write.

        Returns the number of units whose state changed. No write happens when
        nothing changed.
        """
        ids = list(unit_ids)
        for unit_id in ids:
            self.canon.parse_unit_id(unit_id)
        with self._lock:
            before = len(self._completed)
            if complete:
                self._completed.update(ids)
            else:
                self._completed.difference_update(ids)
            changed = abs(len(self._completed) - before)
            if changed:
                self._persist()
        return changed

    def mark_complete(self, unit_id: str) -> bool:
        return self.set_complete([unit_id], True) > 0

    def mark_incomplete(self, unit_id: str) -> bool:
        return self.set_complete([unit_id], False) > 0

    def mark_period(self, period: SchedulePeriod, complete: bool = True) -> int:
        return self.set_complete(period.unit_ids, complete)

    # ---- Views ----

    def is_complete(self, unit_id: str) -> bool:
        return unit_id in self._completed

    def completed_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._completed)

    def period_completion(self, period: SchedulePeriod) -> bool:
        """True iff every unit of ``period`` is complete (vacuously true when empty)."""
        completed = self.completed_ids()
        return all(unit_id in completed for unit_id in period.unit_ids)

    def completed_count(self) -> int:
        # Stale ids from an older canon are ignored
        return len(self.completed_ids() & self.canon.all_unit_ids())

    def aggregate_percentage(self) -> int:
        """Whole-number percentage of canon units completed, within [0, 100]."""
        total = self.canon.total_chapters()
        if total <= 0:
            return 0
        pct = _round_half_up(100 * self.completed_count() / total)
        return max(0, min(100, pct))

    def summary(self, plan: Plan) -> ProgressSummary:
        done_periods = [self.period_completion(p) for p in plan.periods]
        next_period = next(
            (p.index for p, done in zip(plan.periods, done_periods) if not done),
            None,
        )
        return ProgressSummary(
            completed_units=self.completed_count(),
            total_units=self.canon.total_chapters(),
            percentage=self.aggregate_percentage(),
            completed_periods=sum(done_periods),
            total_periods=len(plan.periods),
            next_period=next_period,
        )
