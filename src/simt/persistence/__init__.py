"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from simt.core.config import AppSettings
from simt.persistence.redis_backend import RedisKeyValueStore
from simt.persistence.repository import TalentRepository
from simt.persistence.s3_backend import S3FileStore


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (repository, store, file_store).
    """
    if settings is None:
        settings = AppSettings()

    store = RedisKeyValueStore(
        host=settings.redis.host,
        port=settings.redis.port,
        db=settings.redis.db,
    )

    file_store = S3FileStore(
        bucket=settings.s3.bucket,
        region=settings.s3.region,
        endpoint_url=settings.s3.endpoint_url,
    )

    return TalentRepository(store), store, file_store
