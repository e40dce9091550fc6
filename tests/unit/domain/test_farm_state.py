from __future__ import annotations

from datetime import date

from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import FarmState, default_schedules
from flockbook.domain.models.schedule import Schedule, SchedulePatch
from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType


def test_initial_state_seeds_four_schedules():
    state = FarmState.initial()
    assert state.total_fowls == 1250
    assert state.total_eggs == 0
    assert state.total_profit == 0
    assert state.daily_records == []
    assert [s.id for s in state.schedules] == ["1", "2", "3", "4"]
    types = [s.type for s in state.schedules]
    assert types.count(ScheduleType.FEEDING) == 2
    assert ScheduleType.MEDICATION in types
    assert ScheduleType.DISINFECTION in types
    assert all(s.active for s in state.schedules)


def test_default_schedules_are_fresh_copies():
    first = default_schedules()
    first[0].title = "Changed"
    assert default_schedules()[0].title == "Morning Feed"


def test_apply_record_updates_totals_together():
    state = FarmState.initial()
    record = DailyRecord.create(
        date=date(2025, 1, 6),
        eggs_collected=100,
        eggs_sold=80,
        egg_price=0.5,
        feed_cost=10,
        new_hatches=5,
        fowl_deaths=2,
    )
    state.apply_record(record)
    assert state.daily_records == [record]
    assert state.total_fowls == 1253
    assert state.total_eggs == 100
    assert state.total_profit == 30.0


def test_flock_may_go_negative():
    state = FarmState.initial(3)
    state.apply_record(DailyRecord.create(date=date(2025, 1, 1), fowl_deaths=5))
    assert state.total_fowls == -2


def test_medication_details_kept_as_entered():
    record = DailyRecord.create(date=date(2025, 1, 1), medication_details="Amprolium")
    assert record.medication_given is False
    assert record.medication_details == "Amprolium"


def test_schedule_apply_patch_merges_only_given_fields():
    schedule = Schedule.create(type=ScheduleType.INSPECTION, title="Walk", time="07:30")
    schedule.apply(SchedulePatch(title="Morning walk", frequency=Frequency.WEEKLY))
    assert schedule.title == "Morning walk"
    assert schedule.frequency is Frequency.WEEKLY
    assert schedule.time == "07:30"
    assert schedule.active is True
    assert SchedulePatch().is_empty()
