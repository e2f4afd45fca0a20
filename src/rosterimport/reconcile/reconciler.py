"""MappingReconciler: owns column -> target assignments for one import session.

Two invariants gate the wizard:

* uniqueness: a human edit can never assign a target already held by another
  column. It is enforced on edits only. Whatever the mapping service proposes
  is accepted as-is and duplicates are surfaced as warnings.
* completeness: every required target field is assigned to some column.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from rosterimport.core.exceptions import (
    DuplicateHeaderError,
    TargetUnavailableError,
    UnknownColumnError,
    UnknownTargetFieldError,
)
from rosterimport.models.mapping import SKIP_TARGET, ColumnMapping, MappingSuggestion, TargetField
from rosterimport.models.table import column_index, repeated_names

logger = logging.getLogger(__name__)

HUMAN_CONFIDENCE = 1.0


class MappingReconciler:
    """Mutable working set of mappings. Holds private copies of its inputs."""

    def __init__(self, mappings: Iterable[ColumnMapping], target_fields: Iterable[TargetField]) -> None:
        self._mappings = [m.model_copy() for m in mappings]
        self._target_fields = list(target_fields)
        self._catalog = {f.name: f for f in self._target_fields}

    @classmethod
    def from_suggestion(
        cls, headers: Sequence[str], suggestion: MappingSuggestion
    ) -> tuple["MappingReconciler", list[str]]:
        """Seed one mapping per header, in header order.

        Returns the reconciler and the service warnings extended with one
        warning per target the service assigned to more than one column.
        Raises DuplicateHeaderError when ``headers`` repeats a name.
        """
        repeated = repeated_names(headers)
        if repeated:
            raise DuplicateHeaderError(repeated)
        proposed: dict[str, ColumnMapping] = {}
        for mapping in suggestion.mappings:
            if mapping.csv_header not in headers:
                logger.warning("Dropping suggested mapping for unknown column %r", mapping.csv_header)
                continue
            proposed.setdefault(mapping.csv_header, mapping)

        seeded = [
            proposed.get(header) or ColumnMapping(csv_header=header, target_field=None, confidence=0.0)
            for header in headers
        ]
        reconciler = cls(seeded, suggestion.target_fields)

        warnings = list(suggestion.warnings)
        for target, columns in reconciler.duplicate_targets().items():
            quoted = ", ".join(repr(c) for c in columns)
            warnings.append(f"Columns {quoted} are all mapped to {target!r}; keep only one")
        return reconciler, warnings

    @property
    def mappings(self) -> list[ColumnMapping]:
        return [m.model_copy() for m in self._mappings]

    @property
    def target_fields(self) -> list[TargetField]:
        return list(self._target_fields)

    def mapping_for(self, csv_header: str) -> ColumnMapping:
        for mapping in self._mappings:
            if mapping.csv_header == csv_header:
                return mapping
        raise UnknownColumnError(csv_header)

    def _holder_of(self, target: str, excluding: str) -> str | None:
        for mapping in self._mappings:
            if mapping.csv_header != excluding and mapping.target_field == target:
                return mapping.csv_header
        return None

    def available_targets(self, csv_header: str) -> list[TargetField]:
        """Targets not assigned to any column other than ``csv_header``."""
        self.mapping_for(csv_header)
        used = {
            m.target_field
            for m in self._mappings
            if m.csv_header != csv_header and m.target_field
        }
        return [f for f in self._target_fields if f.name not in used]

    def set_target(self, csv_header: str, target_field: str | None) -> ColumnMapping:
        """Apply a human edit. ``None`` or ``"none"`` means skip the column."""
        mapping = self.mapping_for(csv_header)
        target = None if target_field in (None, "", SKIP_TARGET) else target_field

        if target is not None and target != mapping.target_field:
            if target not in self._catalog:
                raise UnknownTargetFieldError(target)
            holder = self._holder_of(target, excluding=csv_header)
            if holder is not None:
                raise TargetUnavailableError(target, holder)

        mapping.target_field = target
        mapping.confidence = HUMAN_CONFIDENCE
        logger.debug("Column %r mapped to %r", csv_header, target)
        return mapping.model_copy()

    def is_complete(self) -> bool:
        return not self.missing_required()

    def missing_required(self) -> list[str]:
        mapped = {m.target_field for m in self._mappings if m.target_field}
        return [f.name for f in self._target_fields if f.required and f.name not in mapped]

    def duplicate_targets(self) -> dict[str, list[str]]:
        holders: dict[str, list[str]] = {}
        for mapping in self._mappings:
            if mapping.target_field:
                holders.setdefault(mapping.target_field, []).append(mapping.csv_header)
        return {target: cols for target, cols in holders.items() if len(cols) > 1}

    def mapped_count(self) -> int:
        return sum(1 for m in self._mappings if m.target_field)

    def transform_rows(
        self, rows: Iterable[Sequence[str]], headers: Sequence[str] | None = None
    ) -> list[dict[str, str]]:
        """Re-key each row by target field. Unmapped columns and empty cells are left out.

        Cells are located the same way the summary locates them: by header
        position when ``headers`` is given, otherwise by mapping position.
        """
        columns = [
            (mapping.target_field, column_index(idx, mapping.csv_header, headers))
            for idx, mapping in enumerate(self._mappings)
            if mapping.target_field
        ]
        out: list[dict[str, str]] = []
        for row in rows:
            record: dict[str, str] = {}
            for target, col in columns:
                if col is not None and col < len(row) and row[col]:
                    record[target] = row[col]
            out.append(record)
        return out

    def commit_mappings(self) -> dict[str, str]:
        """CSV header -> target field for every mapped column."""
        return {m.csv_header: m.target_field for m in self._mappings if m.target_field}
