"""Snapshot (de)serialization for the farm state.

The stored blob keeps the camelCase layout the farm app has always written,
so existing ``farmData`` snapshots load unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from flockbook.application.errors import PersistenceError
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import INITIAL_FOWLS, FarmState, default_schedules
from flockbook.domain.models.schedule import Schedule
from flockbook.domain.value_objects import coercion
from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType

logger = logging.getLogger(__name__)

_INT_FIELDS = (
    "eggs_collected",
    "eggs_broken",
    "eggs_spoilt",
    "eggs_sold",
    "fowl_deaths",
    "new_hatches",
)
_FLOAT_FIELDS = ("egg_price", "feed_consumed", "feed_cost")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DailyRecordSnapshot(_CamelModel):
    id: str
    date: date
    eggs_collected: int = 0
    eggs_broken: int = 0
    eggs_spoilt: int = 0
    eggs_sold: int = 0
    egg_price: float = 0.0
    fowl_deaths: int = 0
    new_hatches: int = 0
    feed_consumed: float = 0.0
    feed_cost: float = 0.0
    medication_given: bool = False
    medication_details: str = ""
    daily_check_notes: str = ""
    disinfection_done: bool = False

    @field_validator(*_INT_FIELDS, mode="before")
    @classmethod
    def coerce_int(cls, value: Any) -> int:
        return coercion.to_int(value)

    @field_validator(*_FLOAT_FIELDS, mode="before")
    @classmethod
    def coerce_float(cls, value: Any) -> float:
        return coercion.to_float(value)

    @field_validator("medication_given", "disinfection_done", mode="before")
    @classmethod
    def coerce_bool(cls, value: Any) -> bool:
        return coercion.to_bool(value)

    @field_validator("medication_details", "daily_check_notes", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return coercion.to_text(value)

    @field_validator("date", mode="before")
    @classmethod
    def trim_timestamp(cls, value: Any) -> Any:
        # Keep only the calendar part of stored timestamps
        return value[:10] if isinstance(value, str) else value

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        # Older snapshots may carry numeric ids
        return str(value) if isinstance(value, (int, float)) else value


class ScheduleSnapshot(_CamelModel):
    id: str
    type: ScheduleType
    title: str = ""
    time: str = ""
    frequency: Frequency = Frequency.DAILY
    description: str = ""
    active: bool = True

    @field_validator("title", "time", "description", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return coercion.to_text(value)

    @field_validator("frequency", mode="before")
    @classmethod
    def coerce_frequency(cls, value: Any) -> Frequency:
        try:
            return Frequency(value)
        except ValueError:
            logger.warning("Unknown schedule frequency %r stored, using 'As Needed'", value)
            return Frequency.AS_NEEDED

    @field_validator("active", mode="before")
    @classmethod
    def coerce_active(cls, value: Any) -> bool:
        return True if value is None else coercion.to_bool(value)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, (int, float)) else value


class FarmTotalsSnapshot(_CamelModel):
    total_fowls: int = INITIAL_FOWLS
    total_eggs: int = 0
    total_profit: float = 0.0

    @field_validator("total_fowls", "total_eggs", mode="before")
    @classmethod
    def coerce_int(cls, value: Any) -> int:
        return coercion.to_int(value)

    @field_validator("total_profit", mode="before")
    @classmethod
    def coerce_float(cls, value: Any) -> float:
        return coercion.to_float(value)


class FarmSnapshot(FarmTotalsSnapshot):
    daily_records: list[DailyRecordSnapshot] = Field(default_factory=list)
    schedules: list[ScheduleSnapshot] | None = None


ItemModel = TypeVar("ItemModel", DailyRecordSnapshot, ScheduleSnapshot)


def _decode_items(raw: Any, model: type[ItemModel], label: str) -> list[ItemModel]:
    """Validate stored items one by one, dropping only the unreadable ones."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PersistenceError(f"Stored {label} collection is not a list")
    items: list[ItemModel] = []
    for index, entry in enumerate(raw):
        try:
            items.append(model.model_validate(entry))
        except PydanticValidationError as exc:
            logger.warning(
                "Skipping unreadable stored %s at index %d: %d error(s)",
                label,
                index,
                exc.error_count(),
            )
    return items


def _record_to_domain(item: DailyRecordSnapshot) -> DailyRecord:
    return DailyRecord(**item.model_dump())


def _schedule_to_domain(item: ScheduleSnapshot) -> Schedule:
    return Schedule(**item.model_dump())


def encode(state: FarmState) -> dict[str, Any]:
    snapshot = FarmSnapshot(
        total_fowls=state.total_fowls,
        total_eggs=state.total_eggs,
        total_profit=state.total_profit,
        daily_records=[
            DailyRecordSnapshot.model_validate(asdict(record))
            for record in state.daily_records
        ],
        schedules=[
            ScheduleSnapshot.model_validate(asdict(schedule))
            for schedule in state.schedules
        ],
    )
    return snapshot.model_dump(mode="json", by_alias=True)


def decode(payload: dict[str, Any]) -> FarmState:
    """Rebuild the farm state from a stored snapshot.

    Odd values are coerced field by field and a record or schedule that still
    cannot be read is skipped, so one bad entry never discards the rest. An
    absent schedule set gets the default seeds.
    """
    if not isinstance(payload, dict):
        raise PersistenceError("Stored farm snapshot is not an object")
    try:
        totals = FarmTotalsSnapshot.model_validate(payload)
    except PydanticValidationError as exc:
        raise PersistenceError(
            "Stored farm snapshot is malformed", details={"errors": exc.error_count()}
        ) from exc
    records = _decode_items(payload.get("dailyRecords"), DailyRecordSnapshot, "daily record")
    raw_schedules = payload.get("schedules")
    schedules = (
        [
            _schedule_to_domain(item)
            for item in _decode_items(raw_schedules, ScheduleSnapshot, "schedule")
        ]
        if raw_schedules is not None
        else default_schedules()
    )
    return FarmState(
        total_fowls=totals.total_fowls,
        total_eggs=totals.total_eggs,
        total_profit=totals.total_profit,
        daily_records=[_record_to_domain(item) for item in records],
        schedules=schedules,
    )
