from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from flockbook.application.farm_service import FarmService
from flockbook.config.settings import Settings
from flockbook.interfaces.http.deps import get_app_settings, get_farm_service
from flockbook.interfaces.http.schemas.analytics import (
    AnalyticsReportResponse,
    MetricsResponse,
    TrendRequest,
    TrendResponse,
    WeekSummaryResponse,
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/metrics", response_model=MetricsResponse)
async def get_metrics(service: FarmService = Depends(get_farm_service)):
    return MetricsResponse.model_validate(service.compute_metrics())


@router.get("/weekly", response_model=list[WeekSummaryResponse])
async def get_weekly(
    service: FarmService = Depends(get_farm_service),
    settings: Settings = Depends(get_app_settings),
):
    weeks = service.weekly_rollup(limit=settings.weekly_limit)
    return [WeekSummaryResponse.model_validate(week) for week in weeks]


@router.post("/trend", response_model=TrendResponse)
async def compute_trend(payload: TrendRequest, service: FarmService = Depends(get_farm_service)):
    return TrendResponse(percent_change=service.trend(payload.series, payload.window))


@router.get("/report", response_model=AnalyticsReportResponse)
async def get_report(
    time_range: int | None = Query(None, ge=1),
    service: FarmService = Depends(get_farm_service),
    settings: Settings = Depends(get_app_settings),
):
    report = service.analytics(
        time_range=time_range or settings.default_time_range,
        window=settings.trend_window,
        week_limit=settings.weekly_limit,
    )
    return AnalyticsReportResponse.model_validate(report)
