from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from flockbook.application.errors import NotFound
from flockbook.application.farm_service import FarmService
from flockbook.application.use_cases.schedules.add_schedule import AddScheduleInput
from flockbook.application.use_cases.schedules.update_schedule import UpdateScheduleInput
from flockbook.interfaces.http.deps import get_farm_service
from flockbook.interfaces.http.schemas.schedules import (
    GroupedSchedulesResponse,
    ScheduleCreate,
    ScheduleResponse,
    ScheduleUpdate,
)

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.get("", response_model=list[ScheduleResponse])
async def list_schedules(service: FarmService = Depends(get_farm_service)):
    return [ScheduleResponse.model_validate(item) for item in service.list_schedules()]


@router.get("/grouped", response_model=GroupedSchedulesResponse)
async def grouped_schedules(service: FarmService = Depends(get_farm_service)):
    groups = service.group_by_type()
    return GroupedSchedulesResponse(
        **{
            schedule_type.value: [ScheduleResponse.model_validate(s) for s in items]
            for schedule_type, items in groups.items()
        }
    )


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
async def create_schedule(payload: ScheduleCreate, service: FarmService = Depends(get_farm_service)):
    schedule = service.add_schedule(AddScheduleInput(**payload.model_dump()))
    return ScheduleResponse.model_validate(schedule)


@router.patch("/{schedule_id}", response_model=ScheduleResponse)
async def update_schedule(
    schedule_id: str,
    payload: ScheduleUpdate,
    service: FarmService = Depends(get_farm_service),
):
    patch = UpdateScheduleInput(**payload.model_dump(exclude_unset=True)).to_patch()
    schedule = service.update_schedule(schedule_id, patch)
    if schedule is None:
        raise NotFound(f"Schedule {schedule_id} not found")
    return ScheduleResponse.model_validate(schedule)


@router.post("/{schedule_id}/toggle", response_model=ScheduleResponse)
async def toggle_schedule(schedule_id: str, service: FarmService = Depends(get_farm_service)):
    schedule = service.toggle_schedule(schedule_id)
    if schedule is None:
        raise NotFound(f"Schedule {schedule_id} not found")
    return ScheduleResponse.model_validate(schedule)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_schedule(schedule_id: str, service: FarmService = Depends(get_farm_service)):
    if not service.delete_schedule(schedule_id):
        raise NotFound(f"Schedule {schedule_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
