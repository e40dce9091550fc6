from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Farm defaults
    initial_fowls: int = 1250
    # Snapshot persistence
    snapshot_backend: Literal["file", "database", "memory"] = "file"
    snapshot_path: str = "data/farm_data.json"
    snapshot_key: str = "farmData"
    database_url: str = "sqlite:///flockbook.db"
    # Analytics
    trend_window: int = 7
    weekly_limit: int = 8
    default_time_range: int = 30
    # Dashboard
    upcoming_tasks_limit: int = 4
    recent_records_limit: int = 3
    history_limit: int = 10

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_psycopg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+psycopg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+psycopg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
