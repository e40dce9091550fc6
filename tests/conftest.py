from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("SNAPSHOT_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from flockbook.config.settings import Settings
from flockbook.domain.models.farm_state import FarmState
from flockbook.infrastructure.snapshot.memory_store import InMemorySnapshotStore
from flockbook.interfaces.http.main import create_app


@pytest.fixture()
def state() -> FarmState:
    return FarmState.initial(1250)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings.model_validate(
        {
            "log_level": "WARNING",
            "environment": "test",
            "snapshot_backend": "memory",
            "initial_fowls": 1250,
        }
    )


@pytest.fixture()
def store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture()
def app(test_settings: Settings, store: InMemorySnapshotStore):
    return create_app(settings=test_settings, store=store)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
