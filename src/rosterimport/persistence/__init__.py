"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from rosterimport.core.config import AppSettings
from rosterimport.persistence.redis_backend import RedisDraftStore
from rosterimport.persistence.s3_backend import S3UploadStore


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (draft_store, upload_store).
    """
    if settings is None:
        settings = AppSettings()

    draft_store = RedisDraftStore(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
        ttl=settings.drafts.ttl_seconds,
        key_prefix=settings.drafts.key_prefix,
    )

    upload_store = S3UploadStore(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
    )

    return draft_store, upload_store
