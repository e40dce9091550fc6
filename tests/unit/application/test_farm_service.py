from __future__ import annotations

from flockbook.application.errors import PersistenceError
from flockbook.application.farm_service import FarmService
from flockbook.application.use_cases.records.append_record import AppendRecordInput
from flockbook.application.use_cases.schedules.add_schedule import AddScheduleInput
from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.schedule import SchedulePatch
from flockbook.infrastructure.snapshot import codec
from flockbook.infrastructure.snapshot.memory_store import InMemorySnapshotStore


class FailingStore:
    def __init__(self) -> None:
        self.save_attempts = 0

    def load(self):
        raise PersistenceError("disk unavailable")

    def save(self, snapshot):
        self.save_attempts += 1
        raise PersistenceError("disk unavailable")


def _service(store) -> FarmService:
    return FarmService.load(store, encode=codec.encode, decode=codec.decode, initial_fowls=1250)


def test_load_without_snapshot_starts_fresh():
    service = _service(InMemorySnapshotStore())
    snapshot = service.snapshot()
    assert snapshot == FarmState.initial(1250)


def test_load_failure_falls_back_to_default_state():
    service = _service(FailingStore())
    assert service.snapshot().total_fowls == 1250
    assert len(service.snapshot().schedules) == 4


def test_malformed_snapshot_falls_back_to_default_state():
    service = _service(InMemorySnapshotStore({"dailyRecords": "nope"}))
    assert service.snapshot() == FarmState.initial(1250)


def test_mutations_are_persisted():
    store = InMemorySnapshotStore()
    service = _service(store)
    service.append_record(AppendRecordInput(date="2025-01-06", eggs_collected="12"))
    service.add_schedule(AddScheduleInput(type="inspection", title="Check", time="10:00"))
    assert store.saves == 2
    saved = store.load()
    assert saved["totalEggs"] == 12
    assert len(saved["schedules"]) == 5

    reloaded = _service(store)
    assert reloaded.snapshot() == service.snapshot()


def test_noop_mutations_skip_persistence():
    store = InMemorySnapshotStore()
    service = _service(store)
    assert service.delete_schedule("missing") is False
    assert service.update_schedule("missing", SchedulePatch(title="x")) is None
    assert service.update_schedule("1", SchedulePatch()) is not None
    assert store.saves == 0


def test_store_failure_does_not_block_state_update():
    store = FailingStore()
    service = _service(store)
    service.append_record(AppendRecordInput(date="2025-01-06", eggs_collected=10))
    assert store.save_attempts == 1
    assert service.snapshot().total_eggs == 10


def test_snapshot_is_detached_from_live_state():
    service = _service(InMemorySnapshotStore())
    snapshot = service.snapshot()
    snapshot.schedules[0].title = "Tampered"
    snapshot.daily_records.append(None)
    assert service.snapshot().schedules[0].title == "Morning Feed"
    assert service.snapshot().daily_records == []
    grouped = service.group_by_type()
    next(iter(grouped.values()))[0].active = False
    assert all(s.active for s in service.list_schedules())


def test_stored_history_with_null_flags_survives_next_append():
    stored = {
        "totalFowls": 1180,
        "totalEggs": 190,
        "totalProfit": 55.0,
        "dailyRecords": [
            {"id": "a", "date": "2025-01-04", "eggsCollected": 100, "medicationGiven": False},
            {"id": "b", "date": "2025-01-05", "eggsCollected": 90, "medicationGiven": None},
        ],
    }
    store = InMemorySnapshotStore(stored)
    service = _service(store)
    service.append_record(AppendRecordInput(date="2025-01-06", eggs_collected=10))
    saved = store.load()
    assert [r["id"] for r in saved["dailyRecords"]][:2] == ["a", "b"]
    assert len(saved["dailyRecords"]) == 3
    assert saved["totalFowls"] == 1180
    assert saved["totalEggs"] == 200
