from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flockbook.application.farm_service import FarmService
from flockbook.application.interfaces.snapshot_store import SnapshotStore
from flockbook.config.settings import Settings, get_settings
from flockbook.infrastructure.snapshot import codec
from flockbook.interfaces.http.routers import analytics, dashboard, farm, records, schedules
from flockbook.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def _build_store(app: FastAPI, settings: Settings) -> SnapshotStore:
    if settings.snapshot_backend == "database":
        from flockbook.infrastructure.db.session import (
            create_engine,
            create_schema,
            create_session_factory,
        )
        from flockbook.infrastructure.repos.snapshot_sqlalchemy import SQLAlchemySnapshotStore

        app.state.engine = create_engine(settings.database_url)
        create_schema(app.state.engine)
        return SQLAlchemySnapshotStore(
            create_session_factory(app.state.engine), key=settings.snapshot_key
        )
    if settings.snapshot_backend == "memory":
        from flockbook.infrastructure.snapshot.memory_store import InMemorySnapshotStore

        return InMemorySnapshotStore()
    from flockbook.infrastructure.snapshot.file_store import JsonFileSnapshotStore

    return JsonFileSnapshotStore(settings.snapshot_path)


def create_app(
    *,
    settings: Settings | None = None,
    store: SnapshotStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="FlockBook Backend",
        version="0.1.0",
        description="Poultry farm records, schedules and production analytics",
        lifespan=lifespan,
    )
    app.state.settings = settings
    store = store or _build_store(app, settings)
    app.state.farm_service = FarmService.load(
        store,
        encode=codec.encode,
        decode=codec.decode,
        initial_fowls=settings.initial_fowls,
    )
    logger.info("Farm state loaded using %s", type(store).__name__)
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(farm.router)
    api.include_router(records.router)
    api.include_router(schedules.router)
    api.include_router(analytics.router)
    api.include_router(dashboard.router)

    @api.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
