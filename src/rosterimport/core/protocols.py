"""Protocol interfaces for everything rosterimport consumes or produces.

The wizard only talks to collaborators through these Protocols, so tests can
swap in the in-memory implementations from ``rosterimport.persistence``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rosterimport.core.types import SessionId
from rosterimport.models.draft import ImportDraft
from rosterimport.models.mapping import MappingRequest, MappingSuggestion
from rosterimport.models.wizard import WizardResult


# ---------------------------------------------------------------------------
# Mapping service
# ---------------------------------------------------------------------------

@runtime_checkable
class IMappingService(Protocol):
    """Proposes column mappings from headers and sample rows."""

    async def suggest(self, request: MappingRequest, access_token: str) -> MappingSuggestion: ...


@runtime_checkable
class ICredentialProvider(Protocol):
    """Supplies the bearer token for the mapping service."""

    def get_access_token(self) -> str | None: ...


# ---------------------------------------------------------------------------
# File source
# ---------------------------------------------------------------------------

@runtime_checkable
class IUploadedFile(Protocol):
    """Byte-addressable upload with a filename."""

    name: str

    def read(self) -> bytes: ...


# ---------------------------------------------------------------------------
# Draft hand-off
# ---------------------------------------------------------------------------

@runtime_checkable
class IDraftSink(Protocol):
    """Receives the wizard result when it reaches a terminal state."""

    def accept(self, result: WizardResult) -> None: ...


@runtime_checkable
class IDraftStore(Protocol):
    """Session-scoped draft storage used to resume a wizard."""

    def save(self, session_id: SessionId, draft: ImportDraft) -> None: ...

    def load(self, session_id: SessionId) -> ImportDraft | None: ...

    def discard(self, session_id: SessionId) -> None: ...
