from __future__ import annotations

from dataclasses import dataclass, field

from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.schedule import Schedule
from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType

INITIAL_FOWLS = 1250


def default_schedules() -> list[Schedule]:
    """Seed schedules used when no persisted schedule set exists."""
    return [
        Schedule(
            id="1",
            type=ScheduleType.FEEDING,
            title="Morning Feed",
            time="06:00",
            frequency=Frequency.DAILY,
            description="Layer feed with supplements",
        ),
        Schedule(
            id="2",
            type=ScheduleType.FEEDING,
            title="Evening Feed",
            time="17:00",
            frequency=Frequency.DAILY,
            description="Regular layer feed",
        ),
        Schedule(
            id="3",
            type=ScheduleType.MEDICATION,
            title="Weekly Vitamin Boost",
            time="09:00",
            frequency=Frequency.WEEKLY,
            description="Vitamin supplements in water",
        ),
        Schedule(
            id="4",
            type=ScheduleType.DISINFECTION,
            title="Coop Disinfection",
            time="14:00",
            frequency=Frequency.WEEKLY,
            description="Deep clean and disinfect coops",
        ),
    ]


@dataclass(slots=True)
class FarmState:
    total_fowls: int = INITIAL_FOWLS
    total_eggs: int = 0
    total_profit: float = 0.0
    daily_records: list[DailyRecord] = field(default_factory=list)
    schedules: list[Schedule] = field(default_factory=default_schedules)

    @classmethod
    def initial(cls, total_fowls: int = INITIAL_FOWLS) -> FarmState:
        return cls(total_fowls=total_fowls)

    def apply_record(self, record: DailyRecord) -> None:
        """Append a record and roll its effect into the running totals.

        Flock size is not clamped: more deaths than birds leaves it negative.
        """
        total_fowls = self.total_fowls + record.flock_change
        total_eggs = self.total_eggs + record.eggs_collected
        total_profit = self.total_profit + record.profit
        records = [*self.daily_records, record]

        self.total_fowls = total_fowls
        self.total_eggs = total_eggs
        self.total_profit = total_profit
        self.daily_records = records

    def find_schedule(self, schedule_id: str) -> Schedule | None:
        return next((s for s in self.schedules if s.id == schedule_id), None)
