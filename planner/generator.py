"""Reading plan generator: partitions the canon into ordered periods."""

import calendar
import logging
import math
from typing import Sequence, Union

from canon.index import CanonIndex
from config.exceptions import InvalidHorizonError, InvalidPeriodSizeError
from models.book import ReadingUnit
from models.enums import PeriodKind
from models.plan import Plan, SchedulePeriod

logger = logging.getLogger(__name__)

AUTO = "auto"
MONTHS_PER_YEAR = 12

# Separates the two ends of a period that crosses a book boundary
BOOK_SPAN_SEPARATOR = " – "

UnitsPerPeriod = Union[int, str]


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def resolve_units_per_period(total_units: int, horizon: int, units_per_period: UnitsPerPeriod) -> int:
    """Return the effective per-period count, computing ``ceil(T / N)`` for 'auto'."""
    if not _is_positive_int(horizon):
        raise InvalidHorizonError(horizon)
    if units_per_period == AUTO:
        return max(1, math.ceil(total_units / horizon))
    if not _is_positive_int(units_per_period):
        raise InvalidPeriodSizeError(units_per_period)
    return units_per_period


def format_period_title(units: Sequence[ReadingUnit]) -> str:
    """Build a display title for a run of consecutive units.

    Examples: "Genesis 1", "Genesis 1-3", "Genesis 50 – Exodus 2".
    """
    if not units:
        return ""
    first, last = units[0], units[-1]
    if len(units) == 1:
        return f"{first.book} {first.chapter}"
    if first.book == last.book:
        return f"{first.book} {first.chapter}-{last.chapter}"
    return f"{first.book} {first.chapter}{BOOK_SPAN_SEPARATOR}{last.book} {last.chapter}"


def _period_label(kind: PeriodKind, index: int) -> str | None:
    if kind == PeriodKind.MONTH and index <= MONTHS_PER_YEAR:
        return calendar.month_name[index]
    return None


def partition_units(
    units: Sequence[ReadingUnit],
    horizon: int,
    units_per_period: int,
) -> list[tuple[ReadingUnit, ...]]:
    """Split ``units`` into at most ``horizon`` consecutive groups.

    A single cursor walks the sequence once. When the units run out before the
    horizon is reached the remaining periods are simply absent.
    """
    groups = []
    cursor = 0
    total = len(units)
    for _ in range(horizon):
        if cursor >= total:
            break
        end = min(cursor + units_per_period, total)
        groups.append(tuple(units[cursor:end]))
        cursor = end
    return groups


def generate_plan(
    canon: CanonIndex,
    horizon: int,
    units_per_period: UnitsPerPeriod = AUTO,
    kind: PeriodKind = PeriodKind.DAY,
) -> Plan:
    """Partition the canon into ``horizon`` ordered periods.

    Args:
        canon: Canon index supplying the flattened unit sequence.
        horizon: Maximum number of periods (e.g. 365 days or 12 months).
        units_per_period: Units assigned to each period, or "auto" for
            ``ceil(total / horizon)``.
        kind: Whether periods are days or months.

    Returns:
        An immutable Plan. Identical arguments always produce equal plans.

    Raises:
        InvalidHorizonError: horizon is not a positive integer.
        InvalidPeriodSizeError: units_per_period is not positive and not "auto".
    """
    units = canon.flatten()
    per_period = resolve_units_per_period(len(units), horizon, units_per_period)
    kind = PeriodKind(kind)

    groups = partition_units(units, horizon, per_period)
    periods = tuple(
        SchedulePeriod(
            index=i,
            kind=kind,
            units=group,
            title=format_period_title(group),
            label=_period_label(kind, i),
        )
        for i, group in enumerate(groups, start=1)
    )

    scheduled = sum(len(p.units) for p in periods)
    unscheduled = len(units) - scheduled
    if unscheduled:
        logger.warning(
            "Horizon %d x %d units leaves %d units unscheduled",
            horizon, per_period, unscheduled,
        )
    logger.debug(
        "Generated %s plan: %d periods, %d units/period, %d units",
        kind.value, len(periods), per_period, scheduled,
    )

    return Plan(
        kind=kind,
        horizon=horizon,
        units_per_period=per_period,
        total_units=len(units),
        periods=periods,
        unscheduled=unscheduled,
    )


def generate_monthly_plan(canon: CanonIndex, units_per_period: UnitsPerPeriod = AUTO) -> Plan:
    """Twelve-month plan; with 'auto' every chapter fits in the year."""
    return generate_plan(canon, MONTHS_PER_YEAR, units_per_period, kind=PeriodKind.MONTH)
