"""Events accepted by the wizard state machine."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from rosterimport.models.mapping import MappingSuggestion
from rosterimport.models.table import RawTable
from rosterimport.models.wizard import MigrationChoice


class WizardEvent(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChooseImport(WizardEvent):
    pass


class ChooseSkip(WizardEvent):
    choice: MigrationChoice


class BackToSelection(WizardEvent):
    pass


class SelectSource(WizardEvent):
    value: str


class UploadStarted(WizardEvent):
    pass


class UploadFailed(WizardEvent):
    message: str


class UploadSucceeded(WizardEvent):
    table: RawTable
    suggestion: MappingSuggestion


class SetTarget(WizardEvent):
    csv_header: str
    target_field: Optional[str] = None


class BackToUpload(WizardEvent):
    pass


class Confirm(WizardEvent):
    pass


class EditMappings(WizardEvent):
    pass


class Continue(WizardEvent):
    pass


class DismissError(WizardEvent):
    pass
