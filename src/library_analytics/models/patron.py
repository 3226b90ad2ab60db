"""
Patron model for the lending analytics engine.

Patron identity is the ``id`` alone. Grouping code keys patrons with an
explicit ``patron.id`` extractor rather than relying on model equality.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class Patron(BaseModel):
    """Represents a library member who borrows books."""

    id: int = Field(
        ...,
        description="Unique identifier for the patron",
        ge=1,
        examples=[1, 77],
    )

    first_name: str = Field(
        default="",
        description="Given name of the patron",
        max_length=100,
        examples=["Alice", "Bob"],
    )

    last_name: str = Field(
        default="",
        description="Family name of the patron",
        max_length=100,
        examples=["Johnson", "Smith"],
    )

    email: EmailStr = Field(
        ...,
        description="Email address of the patron",
        examples=["alice.johnson@example.com"],
    )

    phone: str | None = Field(
        None,
        description="Phone number of the patron",
        pattern=r"^\+?[\d\s\-\(\)]+$",
        examples=["+1234567890", "555-123-4567"],
    )

    membership_date: date = Field(
        ...,
        description="Date when the patron joined the library",
        examples=["2023-01-15"],
    )

    is_active: bool = Field(
        default=True,
        description="Whether the membership is active",
    )

    @field_validator("phone")
    @classmethod
    def normalize_phone(cls, v: str | None) -> str | None:
        """Normalize phone number by removing common formatting."""
        if v is None:
            return v
        return v.replace("-", "").replace(" ", "").replace("(", "").replace(")", "")

    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        return f"{self.first_name} {self.last_name}".strip()

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "first_name": "Alice",
                "last_name": "Johnson",
                "email": "alice.johnson@example.com",
                "membership_date": "2023-01-15",
                "is_active": True,
            }
        },
    )
