"""Canon package — static book table and flattened chapter index."""

from canon.data import DEFAULT_BOOKS
from canon.index import CanonIndex

__all__ = [
    "DEFAULT_BOOKS",
    "CanonIndex",
]
