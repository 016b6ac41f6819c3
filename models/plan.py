"""Schedule data models produced by the plan generator."""

import json
from dataclasses import dataclass, field
from typing import Optional

from config.exceptions import PeriodNotFoundError
from models.book import ReadingUnit
from models.enums import PeriodKind


@dataclass(frozen=True)
class SchedulePeriod:
    """One day or month of the plan with its ordered reading units."""
    index: int
    kind: PeriodKind
    units: tuple[ReadingUnit, ...]
    title: str
    label: Optional[str] = None  # month name for monthly plans

    @property
    def unit_ids(self) -> list[str]:
        return [u.unit_id for u in self.units]

    def to_dict(self) -> dict:
        data = {
            "index": self.index,
            "title": self.title,
            "units": [u.to_dict() for u in self.units],
        }
        if self.label:
            data["label"] = self.label
        return data


@dataclass(frozen=True)
class Plan:
    """A full partition of the canon into ordered periods.

    Immutable after generation. ``unscheduled`` counts trailing units that did
    not fit inside ``horizon`` periods of ``units_per_period`` each.
    """
    kind: PeriodKind
    horizon: int
    units_per_period: int
    total_units: int
    periods: tuple[SchedulePeriod, ...] = field(default_factory=tuple)
    unscheduled: int = 0

    def __len__(self) -> int:
        return len(self.periods)

    def __iter__(self):
        return iter(self.periods)

    def period(self, index: int) -> SchedulePeriod:
        """Return the period with the given 1-based index."""
        if 1 <= index <= len(self.periods):
            return self.periods[index - 1]
        raise PeriodNotFoundError(index, len(self.periods))

    def units(self) -> list[ReadingUnit]:
        return [u for p in self.periods for u in p.units]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "horizon": self.horizon,
            "units_per_period": self.units_per_period,
            "total_units": self.total_units,
            "unscheduled": self.unscheduled,
            "periods": [p.to_dict() for p in self.periods],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
