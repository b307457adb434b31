"""Protocol interfaces for all SIMT abstractions.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Model Provider
# ---------------------------------------------------------------------------

@runtime_checkable
class IModelProvider(Protocol):
    """Abstraction over generative text providers (mock, Gemini)."""

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str: ...

    def structured_output(
        self, messages: list[dict[str, str]], response_model: type[T], **kwargs: Any
    ) -> T: ...


# ---------------------------------------------------------------------------
# Persistence: Key/Value Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IKeyValueStore(Protocol):
    """Redis-compatible string store holding serialized collections."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def update(self, key: str, mutate: Callable[[str | None], str]) -> str:
        """Atomically replace the value at ``key`` with ``mutate(current)``."""
        ...

    def ping(self) -> bool: ...


# ---------------------------------------------------------------------------
# Persistence: File Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IFileStore(Protocol):
    """S3-compatible file storage interface."""

    def read(self, path: str) -> bytes: ...

    def write(self, path: str, data: bytes, content_type: str = "application/octet-stream") -> str: ...

    def list_files(self, prefix: str) -> list[str]: ...
