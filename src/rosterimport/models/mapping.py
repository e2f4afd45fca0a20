"""Column mapping models exchanged with the mapping service."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Selection value meaning "do not import this column"
SKIP_TARGET = "none"


class FieldSemantic(StrEnum):
    IDENTITY = "identity"
    RELATED_PERSON = "related_person"
    SCHEDULE_DAY = "schedule_day"
    SCHEDULE_TIME = "schedule_time"
    CONTACT = "contact"
    OTHER = "other"


class TargetField(BaseModel):
    """A destination field a CSV column can be mapped onto."""

    model_config = ConfigDict(frozen=True)

    name: str
    required: bool = False
    description: str = ""
    semantic: Optional[FieldSemantic] = None


class ColumnMapping(BaseModel):
    """Mapping from one CSV column to at most one target field."""

    csv_header: str
    target_field: Optional[str] = None
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    @property
    def is_mapped(self) -> bool:
        return bool(self.target_field)


class MappingRequest(BaseModel):
    """Body sent to the mapping service."""

    model_config = ConfigDict(populate_by_name=True)

    headers: list[str]
    sample_rows: list[list[str]] = Field(default_factory=list, alias="sampleRows")
    source_hint: Optional[str] = Field(default=None, alias="sourceSoftware")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class MappingSuggestion(BaseModel):
    """Mapping service response."""

    mappings: list[ColumnMapping] = Field(default_factory=list)
    target_fields: list[TargetField] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    has_lesson_data: bool = False
    detected_source: Optional[str] = None

    @field_validator("mappings", "target_fields", "warnings", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("has_lesson_data", mode="before")
    @classmethod
    def _none_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("detected_source", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        return value or None
