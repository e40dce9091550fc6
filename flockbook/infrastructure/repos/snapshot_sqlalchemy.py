from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flockbook.application.errors import PersistenceError
from flockbook.application.interfaces.snapshot_store import SnapshotStore
from flockbook.infrastructure.db.orm.farm_snapshot import FarmSnapshotORM

logger = logging.getLogger(__name__)


class SQLAlchemySnapshotStore(SnapshotStore):
    """Keeps the farm snapshot as one JSON row addressed by ``key``."""

    def __init__(self, session_factory: Callable[[], Session], *, key: str = "farmData") -> None:
        self._session_factory = session_factory
        self.key = key

    def load(self) -> dict[str, Any] | None:
        try:
            with self._session_factory() as session:
                orm = session.get(FarmSnapshotORM, self.key)
                return copy.deepcopy(orm.payload) if orm else None
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not read snapshot '{self.key}': {exc}") from exc

    def save(self, snapshot: dict[str, Any]) -> None:
        try:
            with self._session_factory() as session, session.begin():
                orm = session.get(FarmSnapshotORM, self.key)
                if orm is None:
                    session.add(FarmSnapshotORM(key=self.key, payload=snapshot))
                else:
                    # Reassign so the JSON column is flagged dirty
                    orm.payload = copy.deepcopy(snapshot)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not write snapshot '{self.key}': {exc}") from exc
        logger.debug("Snapshot '%s' saved", self.key)
