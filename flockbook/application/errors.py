from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base for errors surfaced to callers as a code plus a readable message."""

    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = dict(self.details)
        return payload


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    """Input names a value outside a closed set (schedule type, frequency, time)."""

    code = "validation_error"
    status_code = 422


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class PersistenceError(InfrastructureError):
    """Snapshot store could not read or write the farm snapshot."""

    code = "persistence_error"
