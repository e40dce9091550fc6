from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from flockbook.interfaces.http.schemas.analytics import MetricsResponse
from flockbook.interfaces.http.schemas.records import DailyRecordResponse
from flockbook.interfaces.http.schemas.schedules import ScheduleResponse


class DashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: date
    total_fowls: int
    recorded_today: bool
    today_record: DailyRecordResponse | None
    today_eggs: int
    today_broken: int
    today_spoilt: int
    today_revenue: float
    today_eggs_sold: int
    upcoming_tasks: list[ScheduleResponse]
    recent_records: list[DailyRecordResponse]
    metrics: MetricsResponse
