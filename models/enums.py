"""Enumerations for canon classification and plan periods."""

from enum import Enum


class Category(str, Enum):
    PENTATEUCH = "pentateuch"
    HISTORY = "history"
    POETRY = "poetry"
    PROPHETS = "prophets"
    GOSPELS = "gospels"
    EPISTLES = "epistles"
    APOCALYPSE = "apocalypse"


class Theme(str, Enum):
    """Visual/tonal tag consumed by scene renderers."""
    CREATION = "creation"
    WILDERNESS = "wilderness"
    KINGDOM = "kingdom"
    WISDOM = "wisdom"
    PROPHECY = "prophecy"
    GOSPEL = "gospel"
    CHURCH = "church"
    REVELATION = "revelation"


class PeriodKind(str, Enum):
    DAY = "day"
    MONTH = "month"
