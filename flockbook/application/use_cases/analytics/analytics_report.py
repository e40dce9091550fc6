from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from flockbook.application.use_cases.analytics import compute_metrics, trends, weekly_rollup
from flockbook.application.use_cases.records.list_records import sorted_by_date
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.metrics import Metrics, RecordTrends, WeekSummary

MortalityLevel = Literal["low", "moderate", "high"]


@dataclass(slots=True)
class AnalyticsReport:
    time_range: int
    records: list[DailyRecord]
    metrics: Metrics
    trends: RecordTrends
    weekly: list[WeekSummary]
    daily_avg_production: float
    production_per_bird: float
    profitability_ratio: float
    mortality_level: MortalityLevel


def mortality_level(rate: float) -> MortalityLevel:
    if rate < 2:
        return "low"
    if rate < 5:
        return "moderate"
    return "high"


def execute(
    state: FarmState,
    *,
    time_range: int = 30,
    window: int = trends.DEFAULT_WINDOW,
    week_limit: int = weekly_rollup.DEFAULT_WEEK_LIMIT,
) -> AnalyticsReport:
    """Build the analytics view over the last ``time_range`` records by date.

    Headline metrics always cover the whole history; trends and weekly
    summaries only the selected range.
    """
    ordered = sorted_by_date(state.daily_records)
    window_records = ordered[-time_range:] if time_range > 0 else []
    metrics = compute_metrics.execute(state)

    daily_avg = 0.0
    if window_records:
        daily_avg = sum(r.eggs_collected for r in window_records) / len(window_records)
    profitability = 0.0
    if metrics.total_revenue:
        profitability = metrics.net_profit / metrics.total_revenue * 100

    return AnalyticsReport(
        time_range=time_range,
        records=window_records,
        metrics=metrics,
        trends=trends.record_trends(window_records, window),
        weekly=weekly_rollup.execute(window_records, limit=week_limit),
        daily_avg_production=daily_avg,
        production_per_bird=metrics.egg_production_rate / 100,
        profitability_ratio=profitability,
        mortality_level=mortality_level(metrics.mortality_rate),
    )
