from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from flockbook.application.errors import PersistenceError
from flockbook.application.interfaces.snapshot_store import SnapshotStore
from flockbook.application.use_cases.analytics import (
    analytics_report,
    compute_metrics,
    trends,
    weekly_rollup,
)
from flockbook.application.use_cases.analytics.trends import DEFAULT_WINDOW
from flockbook.application.use_cases.analytics.weekly_rollup import DEFAULT_WEEK_LIMIT
from flockbook.application.use_cases.dashboard import dashboard_overview
from flockbook.application.use_cases.records import append_record, list_records
from flockbook.application.use_cases.schedules import (
    add_schedule,
    delete_schedule,
    group_schedules,
    update_schedule,
)
from flockbook.domain.models.daily_record import DailyRecord
from flockbook.domain.models.farm_state import INITIAL_FOWLS, FarmState
from flockbook.domain.models.metrics import Metrics, WeekSummary
from flockbook.domain.models.schedule import Schedule, SchedulePatch
from flockbook.domain.value_objects.schedule_type import ScheduleType

logger = logging.getLogger(__name__)

Encoder = Callable[[FarmState], dict[str, Any]]
Decoder = Callable[[dict[str, Any]], FarmState]


class FarmService:
    """Single owner of the mutable farm state.

    Every mutation runs to completion against the in-memory state and is then
    written to the snapshot store. A failing store is logged and never rolls
    back or blocks the in-memory update.
    """

    def __init__(
        self,
        state: FarmState,
        *,
        store: SnapshotStore | None = None,
        encode: Encoder | None = None,
    ) -> None:
        self._state = state
        self._store = store
        self._encode = encode

    @classmethod
    def load(
        cls,
        store: SnapshotStore,
        *,
        encode: Encoder,
        decode: Decoder,
        initial_fowls: int = INITIAL_FOWLS,
    ) -> FarmService:
        """Restore the state from ``store``, falling back to a fresh farm."""
        try:
            snapshot = store.load()
            state = decode(snapshot) if snapshot is not None else FarmState.initial(initial_fowls)
        except PersistenceError as exc:
            logger.warning("Could not load farm snapshot, starting fresh: %s", exc.message)
            state = FarmState.initial(initial_fowls)
        return cls(state, store=store, encode=encode)

    # Mutations

    def append_record(
        self, payload: append_record.AppendRecordInput, *, today: date | None = None
    ) -> DailyRecord:
        record = append_record.execute(self._state, payload, today=today)
        self._persist()
        return record

    def add_schedule(self, payload: add_schedule.AddScheduleInput) -> Schedule:
        schedule = add_schedule.execute(self._state, payload)
        self._persist()
        return copy.deepcopy(schedule)

    def update_schedule(self, schedule_id: str, patch: SchedulePatch) -> Schedule | None:
        schedule = update_schedule.execute(self._state, schedule_id, patch)
        if schedule is None:
            return None
        if not patch.is_empty():
            self._persist()
        return copy.deepcopy(schedule)

    def toggle_schedule(self, schedule_id: str) -> Schedule | None:
        schedule = update_schedule.toggle(self._state, schedule_id)
        if schedule is None:
            return None
        self._persist()
        return copy.deepcopy(schedule)

    def delete_schedule(self, schedule_id: str) -> bool:
        deleted = delete_schedule.execute(self._state, schedule_id)
        if deleted:
            self._persist()
        return deleted

    # Reads

    def snapshot(self) -> FarmState:
        return copy.deepcopy(self._state)

    def compute_metrics(self) -> Metrics:
        return compute_metrics.execute(self._state)

    def trend(self, series: Sequence[float], window: int = DEFAULT_WINDOW) -> float:
        return trends.trend(series, window)

    def weekly_rollup(
        self,
        records: Sequence[DailyRecord] | None = None,
        *,
        limit: int = DEFAULT_WEEK_LIMIT,
    ) -> list[WeekSummary]:
        source = self._state.daily_records if records is None else records
        return weekly_rollup.execute(source, limit=limit)

    def group_by_type(self) -> dict[ScheduleType, list[Schedule]]:
        return group_schedules.execute(copy.deepcopy(self._state.schedules))

    def list_schedules(self) -> list[Schedule]:
        return copy.deepcopy(self._state.schedules)

    def list_records(self, *, limit: int | None = None) -> list[DailyRecord]:
        return list_records.execute(self._state.daily_records, limit=limit)

    def analytics(self, **kwargs: Any) -> analytics_report.AnalyticsReport:
        return analytics_report.execute(self._state, **kwargs)

    def dashboard(self, **kwargs: Any) -> dashboard_overview.DashboardOverview:
        return dashboard_overview.execute(copy.deepcopy(self._state), **kwargs)

    def _persist(self) -> None:
        if self._store is None or self._encode is None:
            return
        try:
            self._store.save(self._encode(self._state))
        except PersistenceError as exc:
            logger.error("Failed to persist farm snapshot: %s", exc.message, exc_info=True)
