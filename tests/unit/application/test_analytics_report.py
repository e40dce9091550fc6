from __future__ import annotations

from datetime import date, timedelta

import pytest

from flockbook.application.use_cases.analytics import analytics_report
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import FarmState


def _state_with_days(count: int) -> FarmState:
    state = FarmState.initial(100)
    start = date(2025, 3, 3)
    for i in range(count):
        state.apply_record(
            DailyRecord.create(
                date=start + timedelta(days=i),
                eggs_collected=80 + i,
                eggs_sold=50,
                egg_price=0.5,
                feed_cost=5,
                feed_consumed=10,
            )
        )
    return state


def test_report_limits_records_to_time_range():
    state = _state_with_days(20)
    report = analytics_report.execute(state, time_range=7)
    assert len(report.records) == 7
    assert report.records[-1].date == date(2025, 3, 22)
    assert report.daily_avg_production == pytest.approx(sum(range(93, 100)) / 7)


def test_report_headline_figures():
    state = _state_with_days(4)
    report = analytics_report.execute(state, time_range=30)
    assert report.metrics.total_revenue == 100.0
    assert report.profitability_ratio == pytest.approx(80.0)
    assert report.production_per_bird == pytest.approx(report.metrics.egg_production_rate / 100)
    assert report.mortality_level == "low"
    assert len(report.weekly) == 1


def test_report_on_empty_state():
    report = analytics_report.execute(FarmState.initial(), time_range=30)
    assert report.records == []
    assert report.weekly == []
    assert report.daily_avg_production == 0
    assert report.profitability_ratio == 0
    assert report.trends.eggs == 0


@pytest.mark.parametrize(("rate", "level"), [(0, "low"), (1.99, "low"), (2, "moderate"), (5, "high")])
def test_mortality_level(rate, level):
    assert analytics_report.mortality_level(rate) == level
