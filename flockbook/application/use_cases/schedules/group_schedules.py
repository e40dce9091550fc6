from __future__ import annotations

from collections.abc import Iterable

from flockbook.domain.models.schedule import Schedule
from flockbook.domain.value_objects.schedule_type import ScheduleType


def execute(schedules: Iterable[Schedule]) -> dict[ScheduleType, list[Schedule]]:
    """Partition schedules by type, each group ordered by time of day."""

    groups: dict[ScheduleType, list[Schedule]] = {t: [] for t in ScheduleType}
    for schedule in schedules:
        groups[schedule.type].append(schedule)
    for items in groups.values():
        items.sort(key=lambda s: s.time)
    return groups


def upcoming(schedules: Iterable[Schedule], *, limit: int = 4) -> list[Schedule]:
    return [s for s in schedules if s.active][: max(limit, 0)]
