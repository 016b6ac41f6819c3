"""Canon index: ordered book table and its flattened chapter sequence."""

import logging
from typing import Iterable, Optional

from canon.data import DEFAULT_BOOKS
from config.exceptions import (
    CanonError,
    ChapterOutOfRangeError,
    InvalidUnitIdError,
    UnknownBookError,
)
from models.book import UNIT_ID_SEPARATOR, Book, ReadingUnit
from models.enums import Category

logger = logging.getLogger(__name__)


class CanonIndex:
    """Immutable, ordered catalog of books.

    The chapter total is always derived from the table, never assumed.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: tuple[Book, ...] = tuple(DEFAULT_BOOKS if books is None else books)
        self._validate()
        self._by_name = {b.name: b for b in self._books}
        self._units: Optional[tuple[ReadingUnit, ...]] = None
        self._unit_ids: Optional[frozenset[str]] = None

    def _validate(self):
        if not self._books:
            raise CanonError("Canon must contain at least one book")
        seen = set()
        for book in self._books:
            if book.name in seen:
                raise CanonError("Duplicate book name", {"book": book.name})
            if UNIT_ID_SEPARATOR in book.name:
                raise CanonError(
                    f"Book name may not contain reserved separator '{UNIT_ID_SEPARATOR}'",
                    {"book": book.name},
                )
            if isinstance(book.chapters, bool) or not isinstance(book.chapters, int) or book.chapters < 1:
                raise CanonError(
                    "Chapter count must be a positive integer",
                    {"book": book.name, "chapters": book.chapters},
                )
            seen.add(book.name)

    # ---- Books ----

    def list_books(self) -> tuple[Book, ...]:
        return self._books

    def get_book(self, name: str) -> Book:
        book = self._by_name.get(name)
        if book is None:
            raise UnknownBookError(name)
        return book

    def books_in_category(self, category: Category) -> list[Book]:
        return [b for b in self._books if b.category == category]

    def total_chapters(self) -> int:
        return sum(b.chapters for b in self._books)

    # ---- Units ----

    def flatten(self) -> tuple[ReadingUnit, ...]:
        """Return every (book, chapter) unit in canon order.

        Books are visited in table order and chapters in increasing order.
        The result is cached; it is a tuple so callers cannot alter it.
        """
        if self._units is None:
            self._units = tuple(
                ReadingUnit(book=b.name, chapter=ch)
                for b in self._books
                for ch in range(1, b.chapters + 1)
            )
            logger.debug("Flattened canon: %d books, %d units", len(self._books), len(self._units))
        return self._units

    def all_unit_ids(self) -> frozenset[str]:
        if self._unit_ids is None:
            self._unit_ids = frozenset(u.unit_id for u in self.flatten())
        return self._unit_ids

    def unit_id(self, book: str, chapter: int) -> str:
        """Return the stable identifier for a valid (book, chapter) pair."""
        found = self.get_book(book)
        if isinstance(chapter, bool) or not isinstance(chapter, int) or not 1 <= chapter <= found.chapters:
            raise ChapterOutOfRangeError(book, chapter, found.chapters)
        return ReadingUnit(book=book, chapter=chapter).unit_id

    def parse_unit_id(self, unit_id: str) -> tuple[str, int]:
        """Inverse of unit_id(); validates the result against the canon."""
        if not isinstance(unit_id, str):
            raise InvalidUnitIdError(unit_id)
        book, sep, chapter_str = unit_id.rpartition(UNIT_ID_SEPARATOR)
        if not sep or not book or not (chapter_str.isascii() and chapter_str.isdigit()):
            raise InvalidUnitIdError(unit_id)
        chapter = int(chapter_str)
        # Re-validate and reject non-canonical spellings such as "Genesis-01"
        if self.unit_id(book, chapter) != unit_id:
            raise InvalidUnitIdError(unit_id)
        return book, chapter

    def is_valid_unit_id(self, unit_id: str) -> bool:
        return unit_id in self.all_unit_ids()
