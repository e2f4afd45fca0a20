"""Credential providers implementing ICredentialProvider."""

from __future__ import annotations

from collections.abc import Callable


class StaticCredentialProvider:
    """Returns a fixed token. ``None`` models a signed-out user."""

    def __init__(self, token: str | None) -> None:
        self._token = token

    def get_access_token(self) -> str | None:
        return self._token or None


class CallableCredentialProvider:
    """Wraps a zero-argument callable, e.g. a session lookup in the host app."""

    def __init__(self, fetch: Callable[[], str | None]) -> None:
        self._fetch = fetch

    def get_access_token(self) -> str | None:
        return self._fetch() or None
