"""RetirementCalculator: birth date from the NIP and BUP (batas usia pensiun).

The NIP starts with the birth date as YYYYMMDD. Female employees have 40
added to the day of month. Retirement age depends on the role tier, which
arrives as free text; it is bucketed into a closed ``RetirementBracket`` by
case-sensitive containment so existing labels such as
"JPT Pratama (Eselon II)" keep working.

All predicates take ``now`` explicitly and return False when the birth
date is unknown.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Optional

FEMALE_DAY_OFFSET = 40


class RetirementBracket(StrEnum):
    AHLI_UTAMA = "AHLI_UTAMA"  # Fungsional Ahli Utama
    PIMPINAN_TINGGI = "PIMPINAN_TINGGI"  # JPT Utama/Madya/Pratama, Fungsional Ahli Madya
    UMUM = "UMUM"  # Administrator, Pengawas, junior functional, Pelaksana, Staf


RETIREMENT_AGES: dict[RetirementBracket, int] = {
    RetirementBracket.AHLI_UTAMA: 65,
    RetirementBracket.PIMPINAN_TINGGI: 60,
    RetirementBracket.UMUM: 58,
}

# Checked in order; first containing match wins.
_BRACKET_MARKERS: tuple[tuple[RetirementBracket, tuple[str, ...]], ...] = (
    (RetirementBracket.AHLI_UTAMA, ("Fungsional Ahli Utama",)),
    (
        RetirementBracket.PIMPINAN_TINGGI,
        ("JPT Utama", "JPT Madya", "JPT Pratama", "Fungsional Ahli Madya"),
    ),
)


def _digits(segment: str) -> Optional[int]:
    if len(segment) == 0 or not (segment.isascii() and segment.isdigit()):
        return None
    return int(segment)


def parse_birth_date(nip: Optional[str]) -> Optional[date]:
    """Extract the birth date encoded in the first 8 characters of a NIP.

    Returns None for short, non-numeric or impossible dates (e.g. 31 April).
    """
    if not nip or len(nip) < 8:
        return None

    year = _digits(nip[0:4])
    month = _digits(nip[4:6])
    day = _digits(nip[6:8])
    if year is None or month is None or day is None:
        return None

    if day > FEMALE_DAY_OFFSET:
        day -= FEMALE_DAY_OFFSET

    if not (1 <= month <= 12) or not (1 <= day <= 31):
        return None

    try:
        return date(year, month, day)
    except ValueError:
        return None


def add_years(value: date, years: int) -> date:
    """Shift a date by whole years; 29 Feb rolls to 1 Mar in common years."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return date(value.year + years, 3, 1)


def retirement_bracket(eselon: str) -> RetirementBracket:
    for bracket, markers in _BRACKET_MARKERS:
        if any(marker in eselon for marker in markers):
            return bracket
    return RetirementBracket.UMUM


def retirement_age(eselon: str) -> int:
    """Statutory retirement age for a role-tier label."""
    return RETIREMENT_AGES[retirement_bracket(eselon)]


def retirement_date(birth_date: date, eselon: str) -> date:
    return add_years(birth_date, retirement_age(eselon))


def is_approaching_retirement(birth_date: Optional[date], eselon: str, now: date) -> bool:
    """True when retirement falls after ``now`` but within the next year."""
    if birth_date is None:
        return False
    retires_on = retirement_date(birth_date, eselon)
    return now < retires_on <= add_years(now, 1)


def is_past_retirement_age(birth_date: Optional[date], eselon: str, now: date) -> bool:
    """True when the retirement date is on or before ``now``."""
    if birth_date is None:
        return False
    return retirement_date(birth_date, eselon) <= now
