from __future__ import annotations

from enum import Enum


class ScheduleType(str, Enum):
    FEEDING = "feeding"
    MEDICATION = "medication"
    DISINFECTION = "disinfection"
    INSPECTION = "inspection"


class Frequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    AS_NEEDED = "As Needed"
