"""ScoreScaler: maps raw 1-100 scores onto the 3-tier 9-box axes.

Performance and potential share thresholds; only the labels differ.
Scores are not validated here, range checks belong to the model layer.
"""

from __future__ import annotations

HIGH_THRESHOLD = 90
MEDIUM_THRESHOLD = 70

LOW, MEDIUM, HIGH = 1, 2, 3

PERFORMANCE_LABELS: dict[int, str] = {
    LOW: "Di Bawah Ekspektasi",
    MEDIUM: "Sesuai Ekspektasi",
    HIGH: "Di Atas Ekspektasi",
}

POTENTIAL_LABELS: dict[int, str] = {
    LOW: "Rendah",
    MEDIUM: "Menengah",
    HIGH: "Tinggi",
}


def scale(score: float) -> int:
    """Return 3 for scores >= 90, 2 for 70-89, otherwise 1."""
    if score >= HIGH_THRESHOLD:
        return HIGH
    if score >= MEDIUM_THRESHOLD:
        return MEDIUM
    return LOW


def performance_scale(score: float) -> int:
    return scale(score)


def potential_scale(score: float) -> int:
    return scale(score)


def performance_label(score: float) -> str:
    return PERFORMANCE_LABELS[performance_scale(score)]


def potential_label(score: float) -> str:
    return POTENTIAL_LABELS[potential_scale(score)]
