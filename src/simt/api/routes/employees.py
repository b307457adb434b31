"""Employee CRUD, talent profile, workbook import and report export."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from simt.api.deps import get_exporter, get_repository
from simt.models.employee import Employee, SuccessionStatus
from simt.models.talent import BoxInfo
from simt.persistence.repository import TalentRepository
from simt.services.importer import import_into
from simt.services.reports import ReportExporter
from simt.talent.education import is_education_below_standard
from simt.talent.eselon import search_employees, sort_employees
from simt.talent.nine_box import classify_employee
from simt.talent.retirement import (
    is_approaching_retirement,
    is_past_retirement_age,
    retirement_age,
    retirement_date,
)
from simt.talent.succession import resolve_birth_date

router = APIRouter(tags=["employees"])


class TalentProfile(BaseModel):
    """Derived view of one employee: box, retirement flags, education flag."""

    employee_id: str
    box: BoxInfo
    succession_status: SuccessionStatus
    birth_date: Optional[date] = None
    retirement_age: int
    retirement_date: Optional[date] = None
    approaching_retirement: bool
    past_retirement_age: bool
    education_below_standard: bool


class ImportSummary(BaseModel):
    added: int
    updated: int
    warnings: list[str]


@router.get("", response_model=list[Employee])
def list_employees(
    search: str = "",
    sort: str = "eselon-desc",
    repository: TalentRepository = Depends(get_repository),
) -> list[Employee]:
    employees = search_employees(repository.load_employees(), search)
    try:
        return sort_employees(employees, sort)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.post("/import", response_model=ImportSummary)
def import_employees(
    sheets: dict[str, list[dict[str, Any]]],
    repository: TalentRepository = Depends(get_repository),
) -> ImportSummary:
    result = import_into(repository, sheets)
    return ImportSummary(added=result.added, updated=result.updated, warnings=result.warnings)


@router.post("/reports")
def export_report(
    repository: TalentRepository = Depends(get_repository),
    exporter: ReportExporter = Depends(get_exporter),
) -> dict[str, str]:
    return {"path": exporter.export(repository.load_employees())}


@router.get("/reports")
def list_reports(exporter: ReportExporter = Depends(get_exporter)) -> list[str]:
    return exporter.list_reports()


@router.get("/reports/{name}")
def download_report(name: str, exporter: ReportExporter = Depends(get_exporter)) -> Response:
    return Response(
        content=exporter.read_report(name),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: str, repository: TalentRepository = Depends(get_repository)) -> Employee:
    return repository.get_employee(employee_id)


@router.put("/{employee_id}", response_model=Employee)
def put_employee(
    employee_id: str,
    employee: Employee,
    repository: TalentRepository = Depends(get_repository),
) -> Employee:
    return repository.upsert_employee(employee.model_copy(update={"id": employee_id}))


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: str, repository: TalentRepository = Depends(get_repository)) -> Response:
    repository.delete_employee(employee_id)
    return Response(status_code=204)


@router.get("/{employee_id}/profile", response_model=TalentProfile)
def talent_profile(employee_id: str, repository: TalentRepository = Depends(get_repository)) -> TalentProfile:
    employee = repository.get_employee(employee_id)
    today = date.today()
    birth_date = resolve_birth_date(employee)
    return TalentProfile(
        employee_id=employee.id,
        box=classify_employee(employee),
        succession_status=employee.succession_status,
        birth_date=birth_date,
        retirement_age=retirement_age(employee.eselon),
        retirement_date=retirement_date(birth_date, employee.eselon) if birth_date else None,
        approaching_retirement=is_approaching_retirement(birth_date, employee.eselon, today),
        past_retirement_age=is_past_retirement_age(birth_date, employee.eselon, today),
        education_below_standard=is_education_below_standard(employee.pendidikan),
    )
