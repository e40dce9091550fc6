from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from flockbook.application.farm_service import FarmService
from flockbook.config.settings import Settings
from flockbook.interfaces.http.deps import get_app_settings, get_farm_service
from flockbook.interfaces.http.schemas.dashboard import DashboardResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    today: date | None = Query(None),
    service: FarmService = Depends(get_farm_service),
    settings: Settings = Depends(get_app_settings),
):
    overview = service.dashboard(
        today=today,
        upcoming_limit=settings.upcoming_tasks_limit,
        recent_limit=settings.recent_records_limit,
    )
    return DashboardResponse.model_validate(overview)
