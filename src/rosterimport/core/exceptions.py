"""rosterimport exception hierarchy.

Every error here is recoverable from the wizard's point of view: upload
failures keep the wizard in the upload phase, edit failures are recorded on the
state, and only caller bugs (``InvalidTransitionError``) surface as raises.
"""

from __future__ import annotations


class RosterImportError(Exception):
    """Base exception for all rosterimport errors."""


class InputShapeError(RosterImportError):
    """The uploaded file cannot be turned into a usable table."""


class InvalidFileTypeError(InputShapeError):
    """Uploaded file does not carry the accepted extension."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        super().__init__("Please upload a CSV file")


class EmptyTableError(InputShapeError):
    """Tokenized file has no header row or no data rows."""

    def __init__(self) -> None:
        super().__init__("CSV file is empty or invalid")


class DuplicateHeaderError(InputShapeError):
    """Header row names the same column more than once."""

    def __init__(self, headers: list[str]) -> None:
        self.headers = headers
        quoted = ", ".join(repr(h) for h in headers)
        super().__init__(f"CSV file repeats column names: {quoted}")


class TransportError(RosterImportError):
    """Talking to the mapping service failed."""


class AuthenticationRequiredError(TransportError):
    """No usable credential is available for the mapping service."""

    def __init__(self, message: str = "Please sign in again") -> None:
        super().__init__(message)


class SessionExpiredError(AuthenticationRequiredError):
    """Mapping service rejected the credential."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__("Your session has expired. Please sign in again")


class MappingServiceError(TransportError):
    """Mapping service call failed or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class MappingEditError(RosterImportError):
    """A mapping edit was rejected."""


class UnknownColumnError(MappingEditError):
    """No mapping exists for the given CSV header."""

    def __init__(self, csv_header: str) -> None:
        self.csv_header = csv_header
        super().__init__(f"Unknown column {csv_header!r}")


class UnknownTargetFieldError(MappingEditError):
    """Target field name is not in the session's catalog."""

    def __init__(self, target_field: str) -> None:
        self.target_field = target_field
        super().__init__(f"Unknown target field {target_field!r}")


class TargetUnavailableError(MappingEditError):
    """Target field is already assigned to another column."""

    def __init__(self, target_field: str, held_by: str) -> None:
        self.target_field = target_field
        self.held_by = held_by
        super().__init__(f"{target_field!r} is already mapped from column {held_by!r}")


class InvalidTransitionError(RosterImportError):
    """Event is not accepted in the wizard's current phase."""

    def __init__(self, phase: str, event: str) -> None:
        self.phase = phase
        self.event = event
        super().__init__(f"{event} is not allowed in phase {phase!r}")


class DraftStoreError(RosterImportError):
    """Session draft store operation failed."""
