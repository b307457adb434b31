"""Critical job CRUD and successor matching."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from simt.api.deps import get_repository
from simt.models.critical_job import CriticalJob
from simt.models.employee import Employee
from simt.persistence.repository import TalentRepository
from simt.talent.candidates import find_candidates

router = APIRouter(tags=["critical-jobs"])


@router.get("", response_model=list[CriticalJob])
def list_critical_jobs(repository: TalentRepository = Depends(get_repository)) -> list[CriticalJob]:
    return repository.load_critical_jobs()


@router.put("/{job_id}", response_model=CriticalJob)
def put_critical_job(
    job_id: str,
    job: CriticalJob,
    repository: TalentRepository = Depends(get_repository),
) -> CriticalJob:
    return repository.upsert_critical_job(job.model_copy(update={"id": job_id}))


@router.delete("/{job_id}", status_code=204)
def delete_critical_job(job_id: str, repository: TalentRepository = Depends(get_repository)) -> Response:
    repository.delete_critical_job(job_id)
    return Response(status_code=204)


@router.get("/{job_id}/candidates", response_model=list[Employee])
def job_candidates(job_id: str, repository: TalentRepository = Depends(get_repository)) -> list[Employee]:
    """Boxes 7-9 employees targeting this job, best first."""
    job = repository.get_critical_job(job_id)
    return find_candidates(job, repository.load_employees())
