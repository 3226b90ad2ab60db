"""
Loan model for the lending analytics engine.

A loan records one book lent to one patron. The book and patron references
are optional because upstream data can be incomplete; analytics that need a
missing field skip the loan instead of treating it as zero.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .book import Book
from .patron import Patron


class Loan(BaseModel):
    """
    Represents one book lent to one patron.

    Invariant: ``is_returned`` is true exactly when ``return_date`` is set.
    """

    id: int = Field(
        ...,
        description="Unique identifier for the loan",
        ge=1,
        examples=[1, 5012],
    )

    book: Book | None = Field(
        None,
        description="The borrowed book, if it could be resolved",
    )

    patron: Patron | None = Field(
        None,
        description="The borrowing patron, if it could be resolved",
    )

    loan_date: datetime = Field(
        ...,
        description="Date and time when the book was lent",
    )

    due_date: datetime = Field(
        ...,
        description="Date and time when the book is due back",
    )

    return_date: datetime | None = Field(
        None,
        description="Actual date and time when the book was returned",
    )

    is_returned: bool = Field(
        default=False,
        description="Whether the book has been returned",
    )

    @model_validator(mode="after")
    def validate_return(self) -> "Loan":
        """Validate the returned flag against the return date."""
        if self.is_returned != (self.return_date is not None):
            raise ValueError("is_returned must be true exactly when return_date is set")

        if self.return_date is not None and self.return_date < self.loan_date:
            raise ValueError("Return date cannot be before loan date")

        return self

    @property
    def book_id(self) -> int | None:
        """Id of the borrowed book, if known."""
        return self.book.id if self.book is not None else None

    @property
    def patron_id(self) -> int | None:
        """Id of the borrowing patron, if known."""
        return self.patron.id if self.patron is not None else None

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "loan_date": "2024-01-01T10:00:00",
                "due_date": "2024-01-15T10:00:00",
                "return_date": "2024-01-11T16:30:00",
                "is_returned": True,
            }
        },
    )
