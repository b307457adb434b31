"""Redis backend implementing IKeyValueStore."""

from __future__ import annotations

import logging
from collections.abc import Callable

import redis

from simt.core.exceptions import StorageError

logger = logging.getLogger(__name__)

MAX_UPDATE_ATTEMPTS = 10


class RedisKeyValueStore:
    """Production IKeyValueStore backed by Redis."""

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0) -> None:
        self._client = redis.Redis(
            host=host, port=port, db=db, decode_responses=True,
        )

    def get(self, key: str) -> str | None:
        try:
            return self._client.get(key)
        except Exception as exc:
            raise StorageError(f"Redis GET failed for key={key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except Exception as exc:
            raise StorageError(f"Redis SET failed for key={key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._client.delete(key)
        except Exception as exc:
            raise StorageError(f"Redis DELETE failed for key={key!r}: {exc}") from exc

    def update(self, key: str, mutate: Callable[[str | None], str]) -> str:
        """Optimistic WATCH/MULTI read-modify-write, retried when ``key`` changes underneath.

        Exceptions raised by ``mutate`` propagate unchanged.
        """
        try:
            with self._client.pipeline() as pipe:
                for attempt in range(1, MAX_UPDATE_ATTEMPTS + 1):
                    try:
                        pipe.watch(key)
                        value = mutate(pipe.get(key))
                        pipe.multi()
                        pipe.set(key, value)
                        pipe.execute()
                        return value
                    except redis.WatchError:
                        logger.debug("Concurrent write to %r, retrying (attempt %d)", key, attempt)
        except redis.RedisError as exc:
            raise StorageError(f"Redis UPDATE failed for key={key!r}: {exc}") from exc
        raise StorageError(f"Redis UPDATE for key={key!r} kept conflicting after {MAX_UPDATE_ATTEMPTS} attempts")

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except Exception as exc:
            raise StorageError(f"Redis PING failed: {exc}") from exc
