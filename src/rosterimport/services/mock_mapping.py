"""Mock mapping service for local development and testing.

Returns canned suggestions. No network calls.
"""

from __future__ import annotations

from rosterimport.core.exceptions import TransportError
from rosterimport.models.mapping import ColumnMapping, MappingRequest, MappingSuggestion, TargetField


class MockMappingService:
    """IMappingService returning deterministic suggestions and recording requests."""

    def __init__(self, target_fields: list[TargetField] | None = None) -> None:
        self._target_fields = list(target_fields or [])
        self._canned: dict[tuple[str, ...], MappingSuggestion] = {}
        self._failure: TransportError | None = None
        self.requests: list[MappingRequest] = []
        self.tokens: list[str] = []

    def set_response(self, headers: list[str], suggestion: MappingSuggestion) -> None:
        """Register a canned suggestion for an exact header row."""
        self._canned[tuple(headers)] = suggestion

    def fail_with(self, error: TransportError | None) -> None:
        """Make every subsequent call raise ``error`` (``None`` to stop)."""
        self._failure = error

    async def suggest(self, request: MappingRequest, access_token: str) -> MappingSuggestion:
        self.requests.append(request)
        self.tokens.append(access_token)
        if self._failure is not None:
            raise self._failure
        canned = self._canned.get(tuple(request.headers))
        if canned is not None:
            return canned.model_copy(deep=True)
        return MappingSuggestion(
            mappings=[ColumnMapping(csv_header=h, target_field=None, confidence=0.0) for h in request.headers],
            target_fields=list(self._target_fields),
        )
