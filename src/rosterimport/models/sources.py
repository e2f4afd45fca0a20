"""Catalog of third-party tools an export may come from."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

AUTO_DETECT = "auto"


class SourceOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    description: str = ""


DEFAULT_SOURCE_OPTIONS: tuple[SourceOption, ...] = (
    SourceOption(value=AUTO_DETECT, label="Auto-detect", description="Let the mapping service figure it out"),
    SourceOption(value="mymusicstaff", label="My Music Staff", description="Most popular music teaching platform"),
    SourceOption(value="opus1", label="Opus 1", description="Music school management"),
    SourceOption(value="teachworks", label="Teachworks", description="Tutoring management software"),
    SourceOption(value="duetpartner", label="Duet Partner", description="Music teaching app"),
    SourceOption(value="fons", label="Fons", description="Client management for teachers"),
    SourceOption(value="jackrabbit", label="Jackrabbit Music", description="Music school software"),
    SourceOption(value="generic", label="Other / Generic CSV", description="Any CSV spreadsheet"),
)


def source_label(value: str | None, options: tuple[SourceOption, ...] | list[SourceOption] = DEFAULT_SOURCE_OPTIONS) -> str | None:
    """Human label for a source value, falling back to the raw value."""
    if not value:
        return None
    for opt in options:
        if opt.value == value:
            return opt.label
    return value


def source_hint(value: str) -> str | None:
    """Value to send as the mapping service hint; ``None`` for auto-detect."""
    return None if not value or value == AUTO_DETECT else value
