from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.metrics import WeekSummary

DEFAULT_WEEK_LIMIT = 8


def week_key(day: date) -> str:
    # ISO year, not calendar year: 2024-12-30 belongs to 2025-W01
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def _summarize(key: str, records: list[DailyRecord]) -> WeekSummary:
    days = len(records)
    return WeekSummary(
        week=key,
        total_eggs=sum(r.eggs_collected for r in records),
        total_revenue=sum(r.revenue for r in records),
        total_costs=sum(r.feed_cost for r in records),
        total_deaths=sum(r.fowl_deaths for r in records),
        avg_feed_consumption=sum(r.feed_consumed for r in records) / days,
        days=days,
    )


def execute(
    records: Iterable[DailyRecord], *, limit: int = DEFAULT_WEEK_LIMIT
) -> list[WeekSummary]:
    """Summaries per ISO week, oldest first, keeping the most recent ``limit`` weeks."""

    weeks: dict[str, list[DailyRecord]] = defaultdict(list)
    for record in records:
        weeks[week_key(record.date)].append(record)
    if not weeks or limit <= 0:
        return []
    summaries = [_summarize(key, weeks[key]) for key in sorted(weeks)]
    return summaries[-limit:]
