"""In-memory backends for unit tests: dict-backed fakes."""

from __future__ import annotations

import threading
from collections.abc import Callable


class MemoryKeyValueStore:
    """Dict-backed IKeyValueStore for unit tests."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> str | None:
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        self._store[key] = value

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def update(self, key: str, mutate: Callable[[str | None], str]) -> str:
        with self._lock:
            value = mutate(self.get(key))
            self.set(key, value)
            return value

    def ping(self) -> bool:
        return True


class MemoryFileStore:
    """Dict-backed IFileStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        return self._files[path]

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        self._files[path] = data
        return path

    def list_files(self, prefix: str) -> list[str]:
        return [k for k in self._files if k.startswith(prefix)]
