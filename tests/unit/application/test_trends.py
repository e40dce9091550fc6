from __future__ import annotations

from datetime import date, timedelta

import pytest

from flockbook.application.use_cases.analytics import trends
from flockbook.domain.models.daily_record import DailyRecord


def test_trend_needs_a_full_recent_window():
    assert trends.trend([1, 2, 3], window=7) == 0


def test_trend_without_previous_window_is_zero():
    assert trends.trend([5] * 7, window=7) == 0


def test_trend_with_zero_previous_average_is_zero():
    assert trends.trend([0] * 7 + [10] * 7, window=7) == 0


def test_trend_over_zero_values_is_zero():
    assert trends.trend([0] * 14, window=7) == 0


def test_trend_percent_change():
    series = [10] * 7 + [12] * 7
    assert trends.trend(series, window=7) == pytest.approx(20.0)


def test_trend_uses_partial_previous_window():
    # recent = last 3 -> mean 20, previous = the 2 before -> mean 10
    assert trends.trend([10, 10, 20, 20, 20], window=3) == pytest.approx(100.0)


def test_trend_non_positive_window():
    assert trends.trend([1, 2, 3], window=0) == 0


def test_record_trends_sorts_by_date():
    start = date(2025, 1, 1)
    records = [
        DailyRecord.create(
            date=start + timedelta(days=i),
            eggs_collected=100 if i < 2 else 50,
            eggs_sold=10,
            egg_price=1.0,
            fowl_deaths=1,
        )
        for i in range(4)
    ]
    result = trends.record_trends(list(reversed(records)), window=2)
    assert result.eggs == pytest.approx(-50.0)
    assert result.revenue == 0
    assert result.mortality == 0
