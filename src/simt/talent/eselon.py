"""EselonRanker plus the search and sort helpers of the employee table."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from simt.models.employee import Employee

ESELON_ORDER: tuple[str, ...] = (
    "JPT Utama (Eselon I.a)",
    "JPT Madya (Eselon I.b)",
    "JPT Pratama (Eselon II)",
    "Administrator (Eselon III)",
    "Pengawas (Eselon IV)",
    "Fungsional Ahli Utama",
    "Fungsional Ahli Madya",
    "Fungsional Ahli Muda",
    "Fungsional Ahli Pertama",
    "Fungsional Terampil",
    "Pelaksana",
    "Staf",
)

_RANKS = {label: index for index, label in enumerate(ESELON_ORDER)}


def eselon_rank(eselon: str) -> int:
    """Position in ``ESELON_ORDER`` (0 = highest); unknown labels sort last."""
    return _RANKS.get(eselon, len(ESELON_ORDER))


_SORT_FIELDS: dict[str, Callable[[Employee], Any]] = {
    "eselon": lambda emp: eselon_rank(emp.eselon),
    "name": lambda emp: emp.name.lower(),
    "performance": lambda emp: emp.performance,
    "potential": lambda emp: emp.potential,
    "competency": lambda emp: emp.competency or 0,
}


def sort_employees(employees: Iterable[Employee], sort_key: str = "eselon-desc") -> list[Employee]:
    """Sort for display. ``sort_key`` is ``default`` or ``<field>-<asc|desc>``.

    For eselon, ``desc`` means most senior first.
    """
    employees = list(employees)
    if sort_key == "default":
        return employees

    field, _, direction = sort_key.partition("-")
    if field not in _SORT_FIELDS or direction not in ("asc", "desc"):
        raise ValueError(f"Unknown sort key {sort_key!r}")

    descending = direction == "desc"
    if field == "eselon":
        # Lower rank number is the more senior tier.
        descending = not descending
    return sorted(employees, key=_SORT_FIELDS[field], reverse=descending)


def search_employees(employees: Iterable[Employee], term: str) -> list[Employee]:
    """Case-insensitive match on name, jabatan, unit kerja or email; substring on NIP."""
    employees = list(employees)
    if not term:
        return employees
    needle = term.lower()
    return [
        emp for emp in employees
        if needle in emp.name.lower()
        or needle in emp.jabatan.lower()
        or needle in emp.unit_kerja.lower()
        or (emp.email and needle in emp.email.lower())
        or needle in emp.nip
    ]
