"""
Result rows produced by the analytics engine.

These are the ordered statistics handed back to callers, who render them
however their transport requires.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .book import Book
from .patron import Patron

ItemType = TypeVar("ItemType")


class RankedEntry(BaseModel, Generic[ItemType]):
    """One group of a ranking: the grouped item and how often it occurred."""

    rank: int = Field(..., description="Position in the ranking (1 = highest count)", ge=1)
    item: ItemType = Field(..., description="Representative item of the group")
    count: int = Field(..., description="Number of inputs in the group", ge=1)

    model_config = ConfigDict(frozen=True)


class CoBorrowCount(BaseModel):
    """Loans of one book among the patrons who borrowed a target book."""

    book: Book = Field(..., description="The co-borrowed book")
    count: int = Field(..., description="Number of co-borrowing loans", ge=0)

    model_config = ConfigDict(frozen=True)


class AssociationEntry(BaseModel):
    """A book associated with a target book through shared borrowers."""

    book: Book = Field(..., description="The associated book")
    co_borrow_count: int = Field(..., description="Loans of this book by the target's borrowers")
    ratio: float = Field(
        ...,
        description="Co-borrow count divided by the target book's own loan count",
    )

    model_config = ConfigDict(frozen=True)


class PatronPace(BaseModel):
    """Aggregate reading pace of one patron."""

    patron: Patron = Field(..., description="The patron")
    pages_per_day: float = Field(..., description="Pages read per day across returned loans")

    model_config = ConfigDict(frozen=True)
