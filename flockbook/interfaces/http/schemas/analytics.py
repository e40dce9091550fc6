from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from flockbook.interfaces.http.schemas.records import DailyRecordResponse


class MetricsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_revenue: float
    total_costs: float
    net_profit: float
    egg_production_rate: float
    mortality_rate: float
    feed_efficiency: float


class WeekSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    week: str
    total_eggs: int
    total_revenue: float
    total_costs: float
    total_deaths: int
    avg_feed_consumption: float
    days: int
    net_profit: float


class TrendsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    eggs: float
    revenue: float
    mortality: float


class TrendRequest(BaseModel):
    series: list[float]
    window: int = Field(default=7, ge=0)


class TrendResponse(BaseModel):
    percent_change: float


class AnalyticsReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    time_range: int
    records: list[DailyRecordResponse]
    metrics: MetricsResponse
    trends: TrendsResponse
    weekly: list[WeekSummaryResponse]
    daily_avg_production: float
    production_per_bird: float
    profitability_ratio: float
    mortality_level: Literal["low", "moderate", "high"]
