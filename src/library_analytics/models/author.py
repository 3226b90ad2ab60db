"""
Author model for the lending analytics engine.

Books refer to their author by id; the author record itself is only needed
by callers that render results.
"""

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """Represents an author in the library catalog."""

    id: int = Field(
        ...,
        description="Unique identifier for the author",
        ge=1,
        examples=[1, 42],
    )

    given_name: str | None = Field(
        None,
        description="Given name of the author",
        max_length=200,
        examples=["Harper", "George"],
    )

    surname: str = Field(
        ...,
        description="Family name of the author",
        min_length=1,
        max_length=200,
        examples=["Lee", "Orwell"],
    )

    @property
    def name(self) -> str:
        """Display name, given name first when known."""
        if self.given_name:
            return f"{self.given_name} {self.surname}"
        return self.surname

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "given_name": "Harper",
                "surname": "Lee",
            }
        },
    )
