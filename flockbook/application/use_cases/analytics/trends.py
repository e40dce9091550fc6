from __future__ import annotations

from collections.abc import Iterable, Sequence

from flockbook.application.use_cases.records.list_records import sorted_by_date
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.metrics import RecordTrends

DEFAULT_WINDOW = 7


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def trend(series: Sequence[float], window: int = DEFAULT_WINDOW) -> float:
    """Percent change of the latest ``window`` values against the ones before.

    The previous window may be shorter than ``window`` when history is short.
    Returns 0 when there is not enough history or the previous mean is zero.
    """
    if window <= 0 or len(series) < window:
        return 0.0
    values = list(series)
    recent = values[-window:]
    previous = values[-2 * window : -window]
    if not previous:
        return 0.0
    previous_avg = _mean(previous)
    if previous_avg == 0:
        return 0.0
    return (_mean(recent) - previous_avg) / previous_avg * 100


def record_trends(records: Iterable[DailyRecord], window: int = DEFAULT_WINDOW) -> RecordTrends:
    ordered = sorted_by_date(records)
    return RecordTrends(
        eggs=trend([r.eggs_collected for r in ordered], window),
        revenue=trend([r.revenue for r in ordered], window),
        mortality=trend([r.fowl_deaths for r in ordered], window),
    )
