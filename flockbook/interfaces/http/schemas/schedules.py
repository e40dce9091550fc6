from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType


class ScheduleCreate(BaseModel):
    type: str
    title: str
    time: str
    frequency: str = Frequency.DAILY.value
    description: str = ""
    active: bool = True


class ScheduleUpdate(BaseModel):
    type: str | None = None
    title: str | None = None
    description: str | None = None
    time: str | None = None
    frequency: str | None = None
    active: bool | None = None


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: ScheduleType
    title: str
    time: str
    frequency: Frequency
    description: str
    active: bool


class GroupedSchedulesResponse(BaseModel):
    feeding: list[ScheduleResponse]
    medication: list[ScheduleResponse]
    disinfection: list[ScheduleResponse]
    inspection: list[ScheduleResponse]
