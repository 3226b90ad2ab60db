"""
Lending Analytics Models.

This package contains Pydantic models for the entities the analytics engine
reads and the rows it produces. All models are immutable snapshots: the
engine never mutates or persists them.

The models represent:
- Author: Book authors
- Book: Library catalog items
- Patron: Library members who borrow books
- Loan: One book lent to one patron over a date range
- Results: Ranked entries, co-borrow rows, associations and pace rows
"""

from .author import Author
from .book import Book
from .loan import Loan
from .patron import Patron
from .results import AssociationEntry, CoBorrowCount, PatronPace, RankedEntry

__all__ = [
    "AssociationEntry",
    "Author",
    "Book",
    "CoBorrowCount",
    "Loan",
    "Patron",
    "PatronPace",
    "RankedEntry",
]
