from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Metrics:
    total_revenue: float
    total_costs: float
    net_profit: float
    egg_production_rate: float  # percent, flock-wide average daily yield
    mortality_rate: float  # percent of the current flock
    feed_efficiency: float  # eggs per kg of feed

    @classmethod
    def zero(cls) -> Metrics:
        return cls(
            total_revenue=0.0,
            total_costs=0.0,
            net_profit=0.0,
            egg_production_rate=0.0,
            mortality_rate=0.0,
            feed_efficiency=0.0,
        )


@dataclass(frozen=True, slots=True)
class WeekSummary:
    week: str  # ISO week key, e.g. "2025-W03"
    total_eggs: int
    total_revenue: float
    total_costs: float
    total_deaths: int
    avg_feed_consumption: float
    days: int

    @property
    def net_profit(self) -> float:
        return self.total_revenue - self.total_costs


@dataclass(frozen=True, slots=True)
class RecordTrends:
    eggs: float
    revenue: float
    mortality: float
