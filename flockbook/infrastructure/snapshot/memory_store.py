from __future__ import annotations

import copy
from typing import Any

from flockbook.application.interfaces.snapshot_store import SnapshotStore


class InMemorySnapshotStore(SnapshotStore):
    """Process-local store; contents vanish with the process."""

    def __init__(self, snapshot: dict[str, Any] | None = None) -> None:
        self._snapshot = copy.deepcopy(snapshot)
        self.saves = 0

    def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._snapshot)

    def save(self, snapshot: dict[str, Any]) -> None:
        self._snapshot = copy.deepcopy(snapshot)
        self.saves += 1
