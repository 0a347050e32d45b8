"""
Data models for Acronify.

Records serialize with the camelCase keys of the stored JSON format
(Id, originalText, createdAt, isFavorite) and expose snake_case attributes.
"""

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from acronify.errors import ValidationError

DEFAULT_CATEGORY = "General"


class BreakdownItem(BaseModel):
    """One letter of an acronym and the word it stands for."""

    letter: str = Field(min_length=1, max_length=1)
    word: str = Field(min_length=1)


class AcronymResult(BaseModel):
    """Output of acronym generation."""

    acronym: str
    breakdown: list[BreakdownItem]


class SummaryResult(BaseModel):
    """Output of summary generation."""

    summary: str


class Record(BaseModel):
    """A saved acronym or summary."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="Id", ge=1)
    original_text: str = Field(alias="originalText")
    created_at: datetime = Field(alias="createdAt")
    is_favorite: bool = Field(default=False, alias="isFavorite")
    category: str = DEFAULT_CATEGORY
    acronym: str | None = None
    breakdown: list[BreakdownItem] | None = None
    summary: str | None = None

    @model_validator(mode="after")
    def _check_content(self) -> "Record":
        if (self.acronym is None) == (self.summary is None):
            raise ValueError("record must have exactly one of acronym or summary")
        if self.acronym is not None and self.breakdown is None:
            raise ValueError("acronym record needs a breakdown")
        return self

    @property
    def kind(self) -> str:
        """Either 'acronym' or 'summary'."""
        return "acronym" if self.acronym is not None else "summary"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """Build a record, reporting bad payloads as ValidationError."""
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid record: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict using the stored key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
