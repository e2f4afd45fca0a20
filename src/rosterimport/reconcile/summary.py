"""Summary projector: aggregate counts from the current rows and mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from rosterimport.models.draft import Summary
from rosterimport.models.mapping import ColumnMapping, FieldSemantic, TargetField
from rosterimport.models.table import column_index


def resolve_semantics(
    target_fields: Iterable[TargetField], defaults: Mapping[str, FieldSemantic]
) -> dict[str, FieldSemantic]:
    """Semantic tag per target field name. An explicit tag beats the default table."""
    resolved = dict(defaults)
    for field in target_fields:
        if field.semantic is not None:
            resolved[field.name] = field.semantic
    return resolved


def _first_column(
    mappings: Sequence[ColumnMapping],
    semantics: Mapping[str, FieldSemantic],
    wanted: FieldSemantic,
    headers: Sequence[str] | None,
) -> int | None:
    # Only the first matching mapping counts, even if several columns match.
    for idx, mapping in enumerate(mappings):
        if mapping.target_field and semantics.get(mapping.target_field) == wanted:
            return column_index(idx, mapping.csv_header, headers)
    return None


def _count_populated(rows: Sequence[Sequence[str]], column: int | None) -> int:
    if column is None:
        return 0
    return sum(1 for row in rows if column < len(row) and row[column].strip())


def project(
    mappings: Sequence[ColumnMapping],
    rows: Sequence[Sequence[str]],
    semantics: Mapping[str, FieldSemantic],
    headers: Sequence[str] | None = None,
) -> Summary | None:
    """Pure projection of the summary.

    Returns ``None`` (not a zero summary) when there are no rows or no column
    is mapped. Columns are located by header position when ``headers`` is
    given, otherwise by mapping position.
    """
    if not rows or not any(m.target_field for m in mappings):
        return None
    return Summary(
        entities_count=len(rows),
        sub_entities_count=_count_populated(
            rows, _first_column(mappings, semantics, FieldSemantic.RELATED_PERSON, headers)
        ),
        schedule_entries_count=_count_populated(
            rows, _first_column(mappings, semantics, FieldSemantic.SCHEDULE_DAY, headers)
        ),
    )
