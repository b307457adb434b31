"""Education level check against the S1/D4 minimum."""

from __future__ import annotations

BELOW_STANDARD_LEVELS = frozenset({
    "SMA", "SMK", "MA",
    "D3", "D-III", "DIPLOMA 3",
    "D2", "D-II", "DIPLOMA 2",
    "D1", "D-I", "DIPLOMA 1",
})


def is_education_below_standard(pendidikan: str | None) -> bool:
    """True for high-school or D1-D3 levels, including "... sederajat" variants."""
    if not pendidikan:
        return False
    level = pendidikan.strip().upper()
    return level in BELOW_STANDARD_LEVELS or "SEDERAJAT" in level
