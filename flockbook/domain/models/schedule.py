from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from flockbook.domain.value_objects.schedule_type import Frequency, ScheduleType


@dataclass(slots=True)
class SchedulePatch:
    type: ScheduleType | None = None
    title: str | None = None
    description: str | None = None
    time: str | None = None  # HH:MM
    frequency: Frequency | None = None
    active: bool | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.type,
                self.title,
                self.description,
                self.time,
                self.frequency,
                self.active,
            )
        )


@dataclass(slots=True)
class Schedule:
    id: str
    type: ScheduleType
    title: str
    time: str  # HH:MM, 24-hour, zero padded
    frequency: Frequency = Frequency.DAILY
    description: str = ""
    active: bool = True

    @classmethod
    def create(
        cls,
        *,
        type: ScheduleType,
        title: str,
        time: str,
        frequency: Frequency = Frequency.DAILY,
        description: str = "",
        active: bool = True,
    ) -> Schedule:
        return cls(
            id=uuid4().hex,
            type=type,
            title=title,
            time=time,
            frequency=frequency,
            description=description,
            active=active,
        )

    def apply(self, patch: SchedulePatch) -> None:
        if patch.type is not None:
            self.type = patch.type
        if patch.title is not None:
            self.title = patch.title
        if patch.description is not None:
            self.description = patch.description
        if patch.time is not None:
            self.time = patch.time
        if patch.frequency is not None:
            self.frequency = patch.frequency
        if patch.active is not None:
            self.active = patch.active
