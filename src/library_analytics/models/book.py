"""
Book model for the lending analytics engine.

Books arrive embedded in loan records. The page count is optional: a book
without one has an unknown reading pace, never a pace of zero.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """
    Represents a book in the library catalog.

    Books are grouped by ``id`` when ranking loans; two instances with the
    same id count as the same book.
    """

    id: int = Field(
        ...,
        description="Unique identifier for the book",
        ge=1,
        examples=[1, 1024],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        min_length=1,
        max_length=500,
        examples=["The Great Gatsby", "To Kill a Mockingbird"],
    )

    author_id: int | None = Field(
        None,
        description="Identifier of the book's author, if known",
        ge=1,
    )

    isbn: str | None = Field(
        None,
        description="International Standard Book Number (ISBN-10 or ISBN-13)",
        pattern=r"^[\d\-]+X?$",
        examples=["978-0-134-68547-9", "9780134685479"],
    )

    publication_year: int | None = Field(
        None,
        description="Year the book was published",
        ge=1450,  # After Gutenberg printing press
        le=datetime.now().year + 1,
        examples=[1925, 1960, 2023],
    )

    page_count: int | None = Field(
        None,
        description="Number of pages; unknown when absent",
        ge=1,
        examples=[180, 336],
    )

    is_available_for_loan: bool = Field(
        default=True,
        description="Whether the book can currently be borrowed",
    )

    @field_validator("isbn")
    @classmethod
    def normalize_isbn(cls, v: str | None) -> str | None:
        """Normalize ISBN by removing hyphens for consistent comparison."""
        if v is None:
            return v
        normalized = v.replace("-", "")
        if len(normalized) not in (10, 13):
            raise ValueError("ISBN must be 10 or 13 characters")
        return normalized

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The Great Gatsby",
                "author_id": 1,
                "isbn": "9780743273565",
                "publication_year": 1925,
                "page_count": 180,
                "is_available_for_loan": True,
            }
        },
    )
