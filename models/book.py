"""Book and reading unit data models."""

from dataclasses import dataclass

from models.enums import Category, Theme

# Reserved: no book name may contain it, so ids split unambiguously.
UNIT_ID_SEPARATOR = "-"


@dataclass(frozen=True)
class Book:
    """A canonical book and its chapter count."""
    name: str
    chapters: int
    category: Category
    theme: Theme


@dataclass(frozen=True)
class ReadingUnit:
    """One chapter of one book, the smallest schedulable item."""
    book: str
    chapter: int

    @property
    def unit_id(self) -> str:
        return f"{self.book}{UNIT_ID_SEPARATOR}{self.chapter}"

    def to_dict(self) -> dict:
        return {"book": self.book, "chapter": self.chapter, "id": self.unit_id}

    def __str__(self) -> str:
        return f"{self.book} {self.chapter}"
