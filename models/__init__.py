"""Models package — database, data models, and enums."""

from models.database import Database
from models.book import Book, ReadingUnit, UNIT_ID_SEPARATOR
from models.plan import Plan, SchedulePeriod
from models.enums import Category, Theme, PeriodKind

__all__ = [
    "Database",
    "Book",
    "ReadingUnit",
    "UNIT_ID_SEPARATOR",
    "Plan",
    "SchedulePeriod",
    "Category",
    "Theme",
    "PeriodKind",
]
