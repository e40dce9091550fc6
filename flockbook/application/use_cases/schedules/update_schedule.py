from __future__ import annotations

import logging
from dataclasses import dataclass

from flockbook.application.use_cases.schedules._parsing import (
    parse_frequency,
    parse_time,
    parse_type,
)
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.schedule import Schedule, SchedulePatch

logger = logging.getLogger(__name__)


@dataclass
class UpdateScheduleInput:
    type: str | None = None
    title: str | None = None
    description: str | None = None
    time: str | None = None
    frequency: str | None = None
    active: bool | None = None

    def to_patch(self) -> SchedulePatch:
        return SchedulePatch(
            type=parse_type(self.type) if self.type is not None else None,
            title=self.title,
            description=self.description,
            time=parse_time(self.time) if self.time is not None else None,
            frequency=parse_frequency(self.frequency) if self.frequency is not None else None,
            active=self.active,
        )


def execute(state: FarmState, schedule_id: str, patch: SchedulePatch) -> Schedule | None:
    """Merge the patch into the matching schedule.

    Returns ``None`` and leaves the schedule set untouched when the id is unknown.
    """
    schedule = state.find_schedule(schedule_id)
    if schedule is None:
        logger.debug("Schedule update skipped, id not found: %s", schedule_id)
        return None
    if not patch.is_empty():
        schedule.apply(patch)
        logger.info("Schedule updated: id=%s", schedule_id)
    return schedule


def toggle(state: FarmState, schedule_id: str) -> Schedule | None:
    schedule = state.find_schedule(schedule_id)
    if schedule is None:
        logger.debug("Schedule toggle skipped, id not found: %s", schedule_id)
        return None
    return execute(state, schedule_id, SchedulePatch(active=not schedule.active))
