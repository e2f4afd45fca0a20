"""Wizard phase and state models."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from rosterimport.models.draft import ImportDraft
from rosterimport.models.sources import AUTO_DETECT


class WizardPhase(StrEnum):
    SELECTION = "selection"
    UPLOAD = "upload"
    MAPPING = "mapping"
    READY = "ready"


class MigrationChoice(StrEnum):
    IMPORT = "import"
    FRESH = "fresh"
    LATER = "later"


class WizardState(BaseModel):
    """Everything the wizard knows, as one immutable value."""

    model_config = ConfigDict(frozen=True)

    phase: WizardPhase = WizardPhase.SELECTION
    choice: Optional[MigrationChoice] = None
    source_software: str = AUTO_DETECT
    working: Optional[ImportDraft] = None  # mapping in progress, summary unset
    draft: Optional[ImportDraft] = None  # last confirmed snapshot
    stale: bool = False
    loading: bool = False
    pending_error: Optional[str] = None
    finished: bool = False

    @property
    def can_upload(self) -> bool:
        return self.phase == WizardPhase.UPLOAD and not self.loading and not self.finished


class WizardResult(BaseModel):
    """What the caller's sink receives when the wizard exits."""

    choice: MigrationChoice
    draft: Optional[ImportDraft] = None
