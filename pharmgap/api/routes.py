"""
PharmGap API router
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from pharmgap.data_sources.geojson_source import DataUnavailableError
from pharmgap.pipeline import DashboardOrchestrator
from pharmgap.schemas.results import (
    AreaDetail,
    DashboardReport,
    DashboardStatistics,
    DensityBin,
    RankedArea,
    RecommendationRow,
)

router = APIRouter()

_orchestrator: DashboardOrchestrator | None = None


def get_orchestrator() -> DashboardOrchestrator:
    """Shared orchestrator; the datasets are loaded once per process"""
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = DashboardOrchestrator()
    return _orchestrator


def _unavailable(e: DataUnavailableError) -> HTTPException:
    return HTTPException(status_code=503, detail=f"Data unavailable: {e}")


@router.get("/dashboard", response_model=DashboardReport)
def get_dashboard(
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
) -> DashboardReport:
    """
    Full dashboard

    - statistics cards
    - loaded map layers
    - top recommendations (or the empty state)

    A load failure is returned as a report with `error` set.
    """
    return orchestrator.run()


@router.get("/recommendations", response_model=list[RecommendationRow])
def get_recommendations(
    limit: int = Query(default=10, ge=1, le=50),
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
):
    """Underserved areas by descending priority"""
    try:
        ranking = orchestrator.rank(top_k=limit)
    except DataUnavailableError as e:
        raise _unavailable(e)
    return orchestrator.presentation.rows(ranking.top)


@router.get("/statistics", response_model=DashboardStatistics)
def get_statistics(
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
):
    """Headline numbers"""
    try:
        return orchestrator.statistics(orchestrator.rank())
    except DataUnavailableError as e:
        raise _unavailable(e)


@router.get("/areas", response_model=list[RankedArea])
def get_areas(
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
):
    """Every area with its derived fields, in dataset order (debugging)"""
    try:
        return orchestrator.rank().areas
    except DataUnavailableError as e:
        raise _unavailable(e)


@router.get("/areas/{name}", response_model=AreaDetail)
def get_area_detail(
    name: str,
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
):
    """Detail view of one area"""
    try:
        detail = orchestrator.detail(name)
    except DataUnavailableError as e:
        raise _unavailable(e)

    if detail is None:
        raise HTTPException(status_code=404, detail=f"Unknown area: {name}")
    return detail


@router.get("/legend", response_model=list[DensityBin])
def get_legend(
    orchestrator: DashboardOrchestrator = Depends(get_orchestrator),
):
    """Choropleth density classes"""
    return orchestrator.legend()
