from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from flockbook.application.use_cases.analytics import compute_metrics
from flockbook.application.use_cases.records import list_records
from flockbook.application.use_cases.schedules import group_schedules
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.metrics import Metrics
from flockbook.domain.models.schedule import Schedule


@dataclass(slots=True)
class DashboardOverview:
    day: date
    total_fowls: int
    today_record: DailyRecord | None
    today_eggs: int
    today_broken: int
    today_spoilt: int
    today_revenue: float
    today_eggs_sold: int
    upcoming_tasks: list[Schedule]
    recent_records: list[DailyRecord]
    metrics: Metrics

    @property
    def recorded_today(self) -> bool:
        return self.today_record is not None


def execute(
    state: FarmState,
    *,
    today: date | None = None,
    upcoming_limit: int = 4,
    recent_limit: int = 3,
) -> DashboardOverview:
    day = today or date.today()
    record = list_records.for_date(state.daily_records, day)
    return DashboardOverview(
        day=day,
        total_fowls=state.total_fowls,
        today_record=record,
        today_eggs=record.eggs_collected if record else 0,
        today_broken=record.eggs_broken if record else 0,
        today_spoilt=record.eggs_spoilt if record else 0,
        today_revenue=record.revenue if record else 0.0,
        today_eggs_sold=record.eggs_sold if record else 0,
        upcoming_tasks=group_schedules.upcoming(state.schedules, limit=upcoming_limit),
        recent_records=list_records.execute(state.daily_records, limit=recent_limit),
        metrics=compute_metrics.execute(state),
    )
