from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from flockbook.application.farm_service import FarmService
from flockbook.infrastructure.snapshot import codec
from flockbook.interfaces.http.deps import get_farm_service

router = APIRouter(prefix="/farm", tags=["farm"])


@router.get("")
async def get_farm(service: FarmService = Depends(get_farm_service)) -> dict[str, Any]:
    """Full farm snapshot in its stored camelCase layout."""
    return codec.encode(service.snapshot())
