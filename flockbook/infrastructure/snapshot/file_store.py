from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from flockbook.application.errors import PersistenceError
from flockbook.application.interfaces.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


class JsonFileSnapshotStore(SnapshotStore):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Could not read snapshot file {self.path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise PersistenceError(f"Snapshot file {self.path} does not hold an object")
        return payload

    def save(self, snapshot: dict[str, Any]) -> None:
        # Write to a sibling file first so a crash never leaves a truncated snapshot
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not write snapshot file {self.path}: {exc}") from exc
        logger.debug("Snapshot written to %s", self.path)
