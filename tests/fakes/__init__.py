"""Shared test doubles and sample data."""

from __future__ import annotations

from rosterimport.ingest.uploads import InMemoryUpload
from rosterimport.models.mapping import ColumnMapping, FieldSemantic, MappingSuggestion, TargetField
from rosterimport.persistence.memory_backend import MemoryDraftSink, MemoryDraftStore
from rosterimport.services.credentials import StaticCredentialProvider
from rosterimport.services.mock_mapping import MockMappingService

STUDENT_CATALOG = [
    TargetField(name="student_name", required=True, semantic=FieldSemantic.IDENTITY),
    TargetField(name="guardian_email", semantic=FieldSemantic.RELATED_PERSON),
    TargetField(name="guardian_name", semantic=FieldSemantic.RELATED_PERSON),
    TargetField(name="lesson_day", semantic=FieldSemantic.SCHEDULE_DAY),
    TargetField(name="instrument"),
]

ROSTER_HEADERS = ["Student", "Guardian Email", "Lesson Day"]

ROSTER_CSV = (
    "Student,Guardian Email,Lesson Day\r\n"
    "Ann Lee,ann.mum@example.com,Monday\r\n"
    "Ben Cho,,Tuesday\r\n"
    "Cy Ortiz,cy.dad@example.com,\r\n"
)


def roster_suggestion() -> MappingSuggestion:
    return MappingSuggestion(
        mappings=[
            ColumnMapping(csv_header="Student", target_field="student_name", confidence=0.9),
            ColumnMapping(csv_header="Guardian Email", target_field="guardian_email", confidence=0.5),
            ColumnMapping(csv_header="Lesson Day", target_field="lesson_day", confidence=0.95),
        ],
        target_fields=list(STUDENT_CATALOG),
        warnings=["'Lesson Day' may contain free text"],
        has_lesson_data=True,
        detected_source="mymusicstaff",
    )


def roster_upload(name: str = "students.csv") -> InMemoryUpload:
    return InMemoryUpload(name, ROSTER_CSV.encode("utf-8"))


__all__ = [
    "MemoryDraftSink",
    "MemoryDraftStore",
    "MockMappingService",
    "ROSTER_CSV",
    "ROSTER_HEADERS",
    "STUDENT_CATALOG",
    "StaticCredentialProvider",
    "roster_suggestion",
    "roster_upload",
]
