from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from flockbook.domain.models.daily_record import DailyRecord


def sorted_by_date(records: Iterable[DailyRecord], *, newest_first: bool = False) -> list[DailyRecord]:
    return sorted(records, key=lambda r: r.date, reverse=newest_first)


def execute(records: Iterable[DailyRecord], *, limit: int | None = None) -> list[DailyRecord]:
    """Record history, most recent date first."""
    items = sorted_by_date(records, newest_first=True)
    if limit is not None:
        items = items[: max(limit, 0)]
    return items


def for_date(records: Iterable[DailyRecord], day: date) -> DailyRecord | None:
    return next((r for r in records if r.date == day), None)
