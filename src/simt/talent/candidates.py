"""CandidateMatcher: ranked successors for a critical job."""

from __future__ import annotations

from collections.abc import Iterable

from simt.models.critical_job import CriticalJob
from simt.models.employee import Employee
from simt.talent.nine_box import TOP_TALENT_BOXES, box_number


def normalize_title(title: str | None) -> str:
    return (title or "").strip().lower()


def _ranking_key(employee: Employee) -> tuple[int, int]:
    return (-box_number(employee.performance, employee.potential), -employee.performance)


def rank_talents(employees: Iterable[Employee]) -> list[Employee]:
    """Stable sort by box descending, then performance descending."""
    return sorted(employees, key=_ranking_key)


def is_top_talent(employee: Employee) -> bool:
    return box_number(employee.performance, employee.potential) in TOP_TALENT_BOXES


def find_candidates(job: CriticalJob, employees: Iterable[Employee]) -> list[Employee]:
    """Top talents (boxes 7-9) whose target position matches the job title exactly."""
    target = normalize_title(job.title)
    matches = [
        emp for emp in employees
        if normalize_title(emp.critical_position) == target and is_top_talent(emp)
    ]
    return rank_talents(matches)


def top_talents(employees: Iterable[Employee], limit: int = 5) -> list[Employee]:
    return rank_talents(emp for emp in employees if is_top_talent(emp))[:limit]
