"""Raw tokenized table, before any column has a meaning."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field


class RawTable(BaseModel):
    """Header row plus data rows of a CSV upload.

    Rows are ragged-tolerant: a row may be shorter or longer than ``headers``.
    Consumers index by position and read missing cells as ``""``.
    """

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.headers or not self.rows

    @property
    def duplicate_headers(self) -> list[str]:
        """Header names that occur more than once, in first-seen order."""
        return repeated_names(self.headers)

    def cell(self, row: list[str], index: int) -> str:
        if 0 <= index < len(row):
            return row[index]
        return ""

    def sample(self, count: int) -> list[list[str]]:
        return [list(r) for r in self.rows[:count]]


def repeated_names(headers: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    repeated: list[str] = []
    for header in headers:
        if header in seen and header not in repeated:
            repeated.append(header)
        seen.add(header)
    return repeated


def column_index(position: int, csv_header: str, headers: Sequence[str] | None) -> int | None:
    """Row index of a mapped column.

    With ``headers`` the column is found by name; without, ``position`` (the
    mapping's own index) is used.
    """
    if headers is None:
        return position
    try:
        return list(headers).index(csv_header)
    except ValueError:
        return None
