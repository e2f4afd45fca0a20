"""Import draft: the reconciled bundle handed to the commit step."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from rosterimport.models.mapping import ColumnMapping, TargetField
from rosterimport.models.sources import AUTO_DETECT
from rosterimport.models.table import RawTable


class Summary(BaseModel):
    """Aggregate counts derived from rows and mappings. Never stored on its own."""

    entities_count: int = Field(default=0, ge=0)
    sub_entities_count: int = Field(default=0, ge=0)
    schedule_entries_count: int = Field(default=0, ge=0)


class ImportDraft(BaseModel):
    """Rows, mappings and summary of one import session.

    While the user is still mapping columns, ``summary`` is ``None``. It is
    filled in when the mapping is confirmed.
    """

    source_software: str = AUTO_DETECT
    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
    mappings: list[ColumnMapping] = Field(default_factory=list)
    target_fields: list[TargetField] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    detected_source: Optional[str] = None
    import_lessons: bool = False
    summary: Optional[Summary] = None

    @property
    def table(self) -> RawTable:
        return RawTable(headers=list(self.headers), rows=[list(r) for r in self.rows])
