from __future__ import annotations

from fastapi import Request

from flockbook.application.farm_service import FarmService
from flockbook.config.settings import Settings


def get_farm_service(request: Request) -> FarmService:
    service = getattr(request.app.state, "farm_service", None)
    if service is None:
        raise RuntimeError("Farm service not configured")
    return service


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings
