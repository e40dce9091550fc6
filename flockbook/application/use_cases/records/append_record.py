from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.value_objects import coercion

logger = logging.getLogger(__name__)


@dataclass
class AppendRecordInput:
    """Raw record values as collected by a form; any field may be text."""

    date: Any = None
    eggs_collected: Any = None
    eggs_broken: Any = None
    eggs_spoilt: Any = None
    eggs_sold: Any = None
    egg_price: Any = None
    fowl_deaths: Any = None
    new_hatches: Any = None
    feed_consumed: Any = None
    feed_cost: Any = None
    medication_given: Any = False
    medication_details: Any = ""
    disinfection_done: Any = False
    daily_check_notes: Any = ""


def build_record(payload: AppendRecordInput, *, today: date | None = None) -> DailyRecord:
    return DailyRecord.create(
        date=coercion.to_date(payload.date, default=today),
        eggs_collected=coercion.to_int(payload.eggs_collected),
        eggs_broken=coercion.to_int(payload.eggs_broken),
        eggs_spoilt=coercion.to_int(payload.eggs_spoilt),
        eggs_sold=coercion.to_int(payload.eggs_sold),
        egg_price=coercion.to_float(payload.egg_price),
        fowl_deaths=coercion.to_int(payload.fowl_deaths),
        new_hatches=coercion.to_int(payload.new_hatches),
        feed_consumed=coercion.to_float(payload.feed_consumed),
        feed_cost=coercion.to_float(payload.feed_cost),
        medication_given=coercion.to_bool(payload.medication_given),
        medication_details=coercion.to_text(payload.medication_details),
        disinfection_done=coercion.to_bool(payload.disinfection_done),
        daily_check_notes=coercion.to_text(payload.daily_check_notes),
    )


def execute(
    state: FarmState,
    payload: AppendRecordInput,
    *,
    today: date | None = None,
) -> DailyRecord:
    """Coerce the raw input into a record and fold it into the farm totals."""

    record = build_record(payload, today=today)
    state.apply_record(record)
    logger.info(
        "Daily record appended: id=%s date=%s fowls=%d eggs=%d",
        record.id,
        record.date.isoformat(),
        state.total_fowls,
        state.total_eggs,
    )
    return record
