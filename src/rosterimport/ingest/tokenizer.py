"""Tokenizer: CSV text to a raw header row and data rows.

This is deliberately not an RFC-4180 parser. A ``"`` only toggles the
in-quotes flag, so a doubled ``""`` inside a quoted field is read as two
toggles and never as a literal quote character.
"""

from __future__ import annotations

import re

from rosterimport.models.table import RawTable

_LINE_BREAK = re.compile(r"\r?\n")


def split_fields(line: str) -> list[str]:
    """Split one line on commas that are outside double quotes."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def tokenize(content: str) -> RawTable:
    """Tokenize CSV text. Blank lines are dropped; the first line is the header.

    Returns an empty table (not an error) when nothing survives.
    """
    lines = [line for line in _LINE_BREAK.split(content) if line.strip()]
    if not lines:
        return RawTable(headers=[], rows=[])
    return RawTable(
        headers=split_fields(lines[0]),
        rows=[split_fields(line) for line in lines[1:]],
    )


def _render_field(value: str) -> str:
    return f'"{value}"' if "," in value else value


def render(table: RawTable) -> str:
    """Write a table back as CSV text that ``tokenize`` reads identically."""
    lines = [",".join(_render_field(v) for v in table.headers)]
    lines.extend(",".join(_render_field(v) for v in row) for row in table.rows)
    return "\n".join(lines) + "\n"
