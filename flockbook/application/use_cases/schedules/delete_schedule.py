from __future__ import annotations

import logging

from flockbook.domain.models.farm_state import FarmState

logger = logging.getLogger(__name__)


def execute(state: FarmState, schedule_id: str) -> bool:
    """Remove a schedule; returns ``False`` when no schedule has that id."""

    remaining = [s for s in state.schedules if s.id != schedule_id]
    if len(remaining) == len(state.schedules):
        logger.debug("Schedule delete skipped, id not found: %s", schedule_id)
        return False
    state.schedules = remaining
    logger.info("Schedule deleted: id=%s", schedule_id)
    return True
