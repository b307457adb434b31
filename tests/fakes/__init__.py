"""Shared test doubles: re-export memory backends and the mock model provider."""

from __future__ import annotations

from datetime import date

from simt.model_providers.mock_provider import MockModelProvider
from simt.persistence.memory_backend import MemoryFileStore, MemoryKeyValueStore

TODAY = date(2026, 10, 19)


def nip_for(birth: date, female: bool = False, rest: str = "2010011001") -> str:
    """Build an 18-digit NIP encoding ``birth`` (day + 40 for female)."""
    day = birth.day + 40 if female else birth.day
    return f"{birth.year:04d}{birth.month:02d}{day:02d}{rest}"


__all__ = ["MemoryFileStore", "MemoryKeyValueStore", "MockModelProvider", "TODAY", "nip_for"]
