"""Redis draft store implementing IDraftStore."""

from __future__ import annotations

import logging

import redis
from pydantic import ValidationError

from rosterimport.core.exceptions import DraftStoreError
from rosterimport.models.draft import ImportDraft

logger = logging.getLogger(__name__)


class RedisDraftStore:
    """Session-scoped IDraftStore backed by Redis. Entries expire after ``ttl``."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 ttl: int = 14400, key_prefix: str = "import-draft") -> None:
        self._ttl = ttl
        self._key_prefix = key_prefix
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def _key(self, session_id: str) -> str:
        return f"{self._key_prefix}:{session_id}"

    def save(self, session_id: str, draft: ImportDraft) -> None:
        key = self._key(session_id)
        try:
            self._client.setex(key, self._ttl, draft.model_dump_json())
        except Exception as exc:
            raise DraftStoreError(f"Redis SETEX failed for key={key!r}: {exc}") from exc

    def load(self, session_id: str) -> ImportDraft | None:
        key = self._key(session_id)
        try:
            raw = self._client.get(key)
        except Exception as exc:
            raise DraftStoreError(f"Redis GET failed for key={key!r}: {exc}") from exc
        if raw is None:
            return None
        try:
            return ImportDraft.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding unreadable draft at %r", key)
            raise DraftStoreError(f"Stored draft at {key!r} is not a valid import draft") from exc

    def discard(self, session_id: str) -> None:
        key = self._key(session_id)
        try:
            self._client.delete(key)
        except Exception as exc:
            raise DraftStoreError(f"Redis DELETE failed for key={key!r}: {exc}") from exc
