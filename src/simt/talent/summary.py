"""Dashboard statistics and per-box talent-pool summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from simt.models.critical_job import CriticalJob
from simt.models.employee import Employee, SuccessionStatus
from simt.models.talent import BoxGroup, BoxMember, DashboardSummary
from simt.talent.candidates import top_talents
from simt.talent.nine_box import CATEGORIES, box_number

TOP_TALENT_LIMIT = 5


def dashboard_summary(
    employees: Sequence[Employee], critical_jobs: Sequence[CriticalJob]
) -> DashboardSummary:
    """Aggregate counts shown on the dashboard landing page.

    Succession counts use each employee's stored status.
    """
    box_counts = Counter(box_number(e.performance, e.potential) for e in employees)
    status_counts = Counter(str(e.succession_status) for e in employees)
    return DashboardSummary(
        total_employees=len(employees),
        total_critical_jobs=len(critical_jobs),
        total_vacancies=sum(job.vacancies for job in critical_jobs),
        ready_now_count=status_counts.get(str(SuccessionStatus.READY_NOW), 0),
        box_counts=dict(box_counts),
        succession_status_counts=dict(status_counts),
        top_talents=top_talents(employees, limit=TOP_TALENT_LIMIT),
    )


def talent_pool_summary(employees: Sequence[Employee]) -> dict[int, BoxGroup]:
    """Members of boxes 1-9; unclassifiable employees are left out."""
    groups = {
        number: BoxGroup(box_number=number, category=CATEGORIES[number])
        for number in range(1, 10)
    }
    for emp in employees:
        group = groups.get(box_number(emp.performance, emp.potential))
        if group is None:
            continue
        group.count += 1
        group.members.append(BoxMember(name=emp.name, jabatan=emp.jabatan))
    return groups
