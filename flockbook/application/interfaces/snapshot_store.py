from __future__ import annotations

from typing import Any, Protocol


class SnapshotStore(Protocol):
    """Durable key-value slot holding the serialized farm snapshot.

    Implementations raise ``PersistenceError`` on I/O or decode failures.
    ``load`` returns ``None`` when nothing has been saved yet.
    """

    def load(self) -> dict[str, Any] | None: ...

    def save(self, snapshot: dict[str, Any]) -> None: ...
