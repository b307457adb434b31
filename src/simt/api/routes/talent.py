"""9-box classification and dashboard aggregates."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from simt.api.deps import get_repository
from simt.models.talent import BoxGroup, BoxInfo, DashboardSummary
from simt.persistence.repository import TalentRepository
from simt.talent.nine_box import classify
from simt.talent.summary import dashboard_summary, talent_pool_summary

router = APIRouter(tags=["talent"])


@router.get("/classify", response_model=BoxInfo)
async def classify_scores(
    performance: int = Query(ge=1, le=100),
    potential: int = Query(ge=1, le=100),
) -> BoxInfo:
    return classify(performance, potential)


@router.get("/summary", response_model=DashboardSummary)
def summary(repository: TalentRepository = Depends(get_repository)) -> DashboardSummary:
    return dashboard_summary(repository.load_employees(), repository.load_critical_jobs())


@router.get("/pool", response_model=list[BoxGroup])
def pool(repository: TalentRepository = Depends(get_repository)) -> list[BoxGroup]:
    groups = talent_pool_summary(repository.load_employees())
    return [groups[number] for number in sorted(groups, reverse=True)]
