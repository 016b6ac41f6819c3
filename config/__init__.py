"""Configuration package — settings, logging, and exceptions."""

from config.exceptions import (
    ScripturaError,
    ValidationError,
    InvalidHorizonError,
    InvalidPeriodSizeError,
    UnknownBookError,
    ChapterOutOfRangeError,
    InvalidUnitIdError,
    InvalidConfigError,
    CanonError,
    PlanError,
    PeriodNotFoundError,
    PersistenceError,
    ProgressLoadError,
    ProgressSaveError,
    SceneFetchError,
)
from config.logging_config import setup_logging
from config.settings import Settings

__all__ = [
    "Settings",
    "setup_logging",
    "ScripturaError",
    "ValidationError",
    "InvalidHorizonError",
    "InvalidPeriodSizeError",
    "UnknownBookError",
    "ChapterOutOfRangeError",
    "InvalidUnitIdError",
    "InvalidConfigError",
    "CanonError",
    "PlanError",
    "PeriodNotFoundError",
    "PersistenceError",
    "ProgressLoadError",
    "ProgressSaveError",
    "SceneFetchError",
]
