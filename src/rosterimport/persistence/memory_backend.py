"""In-memory backends for unit tests and single-process use."""

from __future__ import annotations

from rosterimport.models.draft import ImportDraft
from rosterimport.models.wizard import WizardResult


class MemoryDraftStore:
    """Dict-backed IDraftStore. Drafts are copied in and out."""

    def __init__(self) -> None:
        self._drafts: dict[str, ImportDraft] = {}

    def save(self, session_id: str, draft: ImportDraft) -> None:
        self._drafts[session_id] = draft.model_copy(deep=True)

    def load(self, session_id: str) -> ImportDraft | None:
        draft = self._drafts.get(session_id)
        return draft.model_copy(deep=True) if draft else None

    def discard(self, session_id: str) -> None:
        self._drafts.pop(session_id, None)


class MemoryDraftSink:
    """IDraftSink that keeps every result it receives."""

    def __init__(self) -> None:
        self.results: list[WizardResult] = []

    def accept(self, result: WizardResult) -> None:
        self.results.append(result)

    @property
    def last(self) -> WizardResult | None:
        return self.results[-1] if self.results else None
