"""Map a calendar date onto a plan period index."""

from datetime import date

from config.exceptions import InvalidHorizonError
from models.enums import PeriodKind


def period_index_for_date(on_date: date, horizon: int, kind: PeriodKind = PeriodKind.DAY) -> int:
    """Return the 1-based period index for ``on_date``.

    Days use the day of the year, months the calendar month. Both are clamped
    to ``horizon``, so Dec 31 of a leap year lands on day 365 of a 365-day plan.
    The date is always passed in; this never reads the clock.
    """
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 1:
        raise InvalidHorizonError(horizon)
    if PeriodKind(kind) == PeriodKind.MONTH:
        position = on_date.month
    else:
        position = on_date.timetuple().tm_yday
    return min(position, horizon)
