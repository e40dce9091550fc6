from __future__ import annotations

from sqlalchemy import Engine
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.orm import Session, sessionmaker

from flockbook.infrastructure.db.base import Base


def create_engine(database_url: str) -> Engine:
    return sa_create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


def create_schema(engine: Engine) -> None:
    from flockbook.infrastructure.db.orm import farm_snapshot  # noqa: F401

    Base.metadata.create_all(engine)
