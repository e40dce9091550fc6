from __future__ import annotations

import logging
from dataclasses import dataclass

from flockbook.application.use_cases.schedules._parsing import (
    parse_frequency,
    parse_time,
    parse_type,
)
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.schedule import Schedule

logger = logging.getLogger(__name__)


@dataclass
class AddScheduleInput:
    type: str
    title: str
    time: str
    frequency: str = "Daily"
    description: str = ""
    active: bool = True


def execute(state: FarmState, payload: AddScheduleInput) -> Schedule:
    schedule = Schedule.create(
        type=parse_type(payload.type),
        title=payload.title,
        time=parse_time(payload.time),
        frequency=parse_frequency(payload.frequency),
        description=payload.description,
        active=payload.active,
    )
    state.schedules = [*state.schedules, schedule]
    logger.info("Schedule added: id=%s type=%s", schedule.id, schedule.type.value)
    return schedule
