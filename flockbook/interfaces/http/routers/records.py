from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from flockbook.application.farm_service import FarmService
from flockbook.application.use_cases.records.append_record import AppendRecordInput
from flockbook.config.settings import Settings
from flockbook.interfaces.http.deps import get_app_settings, get_farm_service
from flockbook.interfaces.http.schemas.records import DailyRecordCreate, DailyRecordResponse

router = APIRouter(prefix="/records", tags=["records"])


@router.get("", response_model=list[DailyRecordResponse])
async def list_records(
    limit: int | None = Query(None, ge=0),
    service: FarmService = Depends(get_farm_service),
    settings: Settings = Depends(get_app_settings),
):
    items = service.list_records(limit=limit if limit is not None else settings.history_limit)
    return [DailyRecordResponse.model_validate(item) for item in items]


@router.post("", response_model=DailyRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: DailyRecordCreate, service: FarmService = Depends(get_farm_service)
):
    record = service.append_record(AppendRecordInput(**payload.model_dump()))
    return DailyRecordResponse.model_validate(record)
