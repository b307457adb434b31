"""Generative text endpoints backed by NarrativeService."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from simt.api.deps import get_narratives, get_repository
from simt.models.employee import EmployeeDraft
from simt.persistence.repository import TalentRepository
from simt.services.narratives import NarrativeService

router = APIRouter(tags=["ai"])


class JobDescriptionRequest(BaseModel):
    title: str = Field(min_length=1)
    unit_kerja: str = ""


class DraftRequest(BaseModel):
    jabatan: str = Field(min_length=1)
    unit_kerja: str = ""


class NarrativeResponse(BaseModel):
    content: str


@router.post("/job-description", response_model=NarrativeResponse)
def job_description(
    body: JobDescriptionRequest,
    narratives: NarrativeService = Depends(get_narratives),
) -> NarrativeResponse:
    return NarrativeResponse(content=narratives.job_description(body.title, body.unit_kerja))


@router.post("/development-plan/{employee_id}", response_model=NarrativeResponse)
def development_plan(
    employee_id: str,
    repository: TalentRepository = Depends(get_repository),
    narratives: NarrativeService = Depends(get_narratives),
) -> NarrativeResponse:
    """Generate an IDP and keep it on the employee record."""
    employee = repository.get_employee(employee_id)
    plan = narratives.development_plan(employee)
    repository.upsert_employee(employee.model_copy(update={"development_plan": plan}))
    return NarrativeResponse(content=plan)


@router.post("/talent-pool-analysis", response_model=NarrativeResponse)
def talent_pool_analysis(
    repository: TalentRepository = Depends(get_repository),
    narratives: NarrativeService = Depends(get_narratives),
) -> NarrativeResponse:
    return NarrativeResponse(content=narratives.talent_pool_analysis(repository.load_employees()))


@router.post("/employee-draft", response_model=EmployeeDraft)
def employee_draft(
    body: DraftRequest,
    narratives: NarrativeService = Depends(get_narratives),
) -> EmployeeDraft:
    return narratives.draft_employee(body.jabatan, body.unit_kerja)
