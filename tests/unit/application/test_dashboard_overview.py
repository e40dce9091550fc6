from __future__ import annotations

from datetime import date

from flockbook.application.use_cases.dashboard import dashboard_overview
from flockbook.application.use_cases.records import append_record
from flockbook.application.use_cases.records.append_record import AppendRecordInput


def test_dashboard_without_todays_record(state):
    overview = dashboard_overview.execute(state, today=date(2025, 5, 1))
    assert overview.recorded_today is False
    assert overview.today_eggs == 0
    assert overview.today_revenue == 0
    assert overview.total_fowls == 1250
    assert [s.id for s in overview.upcoming_tasks] == ["1", "2", "3", "4"]
    assert overview.recent_records == []


def test_dashboard_with_todays_record(state):
    for day in ("2025-04-28", "2025-04-29", "2025-04-30", "2025-05-01"):
        append_record.execute(
            state,
            AppendRecordInput(
                date=day, eggs_collected=100, eggs_broken=2, eggs_spoilt=1, eggs_sold=90,
                egg_price="0.25",
            ),
        )
    overview = dashboard_overview.execute(state, today=date(2025, 5, 1), recent_limit=3)
    assert overview.recorded_today is True
    assert overview.today_eggs == 100
    assert overview.today_broken == 2
    assert overview.today_spoilt == 1
    assert overview.today_revenue == 22.5
    assert overview.today_eggs_sold == 90
    assert [r.date.isoformat() for r in overview.recent_records] == [
        "2025-05-01",
        "2025-04-30",
        "2025-04-29",
    ]
