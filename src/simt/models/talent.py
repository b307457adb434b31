"""Classification outputs: 9-box placement and dashboard aggregates."""

from __future__ import annotations

from pydantic import BaseModel, Field

from simt.models.employee import Employee


class BoxInfo(BaseModel):
    """Placement of one employee on the 9-box matrix."""

    box_number: int  # 1..9, or 0 when unclassifiable
    category: str
    recommendation: str = ""


class BoxMember(BaseModel):
    name: str
    jabatan: str = ""


class BoxGroup(BaseModel):
    """Employees sitting in one box, as fed to the talent-pool narrative."""

    box_number: int
    category: str
    count: int = 0
    members: list[BoxMember] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    """Headline statistics for the dashboard landing page."""

    total_employees: int = 0
    total_critical_jobs: int = 0
    total_vacancies: int = 0
    ready_now_count: int = 0
    box_counts: dict[int, int] = Field(default_factory=dict)
    succession_status_counts: dict[str, int] = Field(default_factory=dict)
    top_talents: list[Employee] = Field(default_factory=list)
