"""Custom exception hierarchy for the reading plan core."""

from typing import Optional


class ScripturaError(Exception):
    """Base exception for all scriptura errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# ---- Validation Errors ----

class ValidationError(ScripturaError):
    """Input validation failed at a call boundary."""


class InvalidHorizonError(ValidationError):
    """Plan horizon is not a positive integer."""

    def __init__(self, horizon):
        super().__init__("Horizon must be a positive integer", {"horizon": horizon})
        self.horizon = horizon


class InvalidPeriodSizeError(ValidationError):
    """Units-per-period is neither a positive integer nor 'auto'."""

    def __init__(self, units_per_period):
        super().__init__(
            "Units per period must be a positive integer or 'auto'",
            {"units_per_period": units_per_period},
        )
        self.units_per_period = units_per_period


class UnknownBookError(ValidationError):
    """Book name is not part of the canon."""

    def __init__(self, book: str):
        super().__init__(f"Unknown book: {book}", {"book": book})
        self.book = book


class ChapterOutOfRangeError(ValidationError):
    """Chapter number outside [1, chapter count] for its book."""

    def __init__(self, book: str, chapter, max_chapter: int):
        super().__init__(
            f"{book} has no chapter {chapter}",
            {"book": book, "chapter": chapter, "max": max_chapter},
        )
        self.book = book
        self.chapter = chapter


class InvalidUnitIdError(ValidationError):
    """Reading unit identifier cannot be parsed."""

    def __init__(self, unit_id):
        super().__init__(f"Malformed unit id: {unit_id!r}")
        self.unit_id = unit_id


class InvalidConfigError(ValidationError):
    """Configuration value is invalid."""


# ---- Canon Errors ----

class CanonError(ScripturaError):
    """The static book table is inconsistent."""


# ---- Plan Errors ----

class PlanError(ScripturaError):
    """Base exception for schedule lookups."""


class PeriodNotFoundError(PlanError):
    """Requested period index is not part of the plan."""

    def __init__(self, index: int, available: int):
        super().__init__(
            f"Period {index} not in plan",
            {"index": index, "available": available},
        )
        self.index = index


# ---- Persistence Errors ----

class PersistenceError(ScripturaError):
    """Base exception for progress store failures."""


class ProgressLoadError(PersistenceError):
    """Persisted progress is unreadable or malformed."""


class ProgressSaveError(PersistenceError):
    """Writing progress to durable storage failed.

    The in-memory completed set has already been updated when this is raised.
    """


# ---- Scene Errors ----

class SceneFetchError(ScripturaError):
    """Scene-description endpoint failed or returned an unusable payload."""
