from __future__ import annotations

import logging

from flockbook.domain.models.farm_state import FarmState
from flockbook.domain.models.metrics import Metrics

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _compute(state: FarmState) -> Metrics:
    records = state.daily_records or []
    total_revenue = sum(r.eggs_sold * r.egg_price for r in records)
    total_costs = sum(r.feed_cost for r in records)
    total_eggs = sum(r.eggs_collected for r in records)
    total_deaths = sum(r.fowl_deaths for r in records)
    total_feed = sum(r.feed_consumed for r in records)

    fowls = state.total_fowls
    production_rate = 0.0
    mortality_rate = 0.0
    if fowls > 0:
        # Flock-wide average daily yield, not eggs per bird per day
        production_rate = _ratio(total_eggs, fowls * len(records)) * 100
        # Denominator is the current flock, not a cohort baseline
        mortality_rate = _ratio(total_deaths, fowls) * 100

    return Metrics(
        total_revenue=total_revenue,
        total_costs=total_costs,
        net_profit=total_revenue - total_costs,
        egg_production_rate=production_rate,
        mortality_rate=mortality_rate,
        feed_efficiency=_ratio(total_eggs, total_feed),
    )


def execute(state: FarmState | None) -> Metrics:
    """Derive the farm metrics; a missing or malformed state yields zeros."""

    if state is None:
        return Metrics.zero()
    try:
        return _compute(state)
    except (AttributeError, TypeError, ValueError) as exc:
        logger.error("Metrics computation failed, returning zeros: %s", exc, exc_info=True)
        return Metrics.zero()
