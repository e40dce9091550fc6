from __future__ import annotations

import re

from flockbook.application.errors import ValidationError
from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def parse_type(value: str | ScheduleType) -> ScheduleType:
    try:
        return ScheduleType(value)
    except ValueError as exc:
        allowed = [t.value for t in ScheduleType]
        raise ValidationError(
            f"Unknown schedule type: {value}", details={"allowed": allowed}
        ) from exc


def parse_frequency(value: str | Frequency) -> Frequency:
    try:
        return Frequency(value)
    except ValueError as exc:
        allowed = [f.value for f in Frequency]
        raise ValidationError(
            f"Unknown schedule frequency: {value}", details={"allowed": allowed}
        ) from exc


def parse_time(value: str) -> str:
    # Lexical ordering of schedules relies on zero-padded 24-hour times
    if not _TIME_RE.match(value):
        raise ValidationError(f"Schedule time must be HH:MM (24-hour): {value}")
    return value
