from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class DailyRecord:
    id: str
    date: date
    eggs_collected: int = 0
    eggs_broken: int = 0
    eggs_spoilt: int = 0
    eggs_sold: int = 0
    egg_price: float = 0.0
    fowl_deaths: int = 0
    new_hatches: int = 0
    feed_consumed: float = 0.0  # kg
    feed_cost: float = 0.0
    medication_given: bool = False
    medication_details: str = ""
    disinfection_done: bool = False
    daily_check_notes: str = ""

    @property
    def revenue(self) -> float:
        return self.eggs_sold * self.egg_price

    @property
    def profit(self) -> float:
        return self.revenue - self.feed_cost

    @property
    def flock_change(self) -> int:
        return self.new_hatches - self.fowl_deaths

    @classmethod
    def create(
        cls,
        *,
        date: date,
        eggs_collected: int = 0,
        eggs_broken: int = 0,
        eggs_spoilt: int = 0,
        eggs_sold: int = 0,
        egg_price: float = 0.0,
        fowl_deaths: int = 0,
        new_hatches: int = 0,
        feed_consumed: float = 0.0,
        feed_cost: float = 0.0,
        medication_given: bool = False,
        medication_details: str = "",
        disinfection_done: bool = False,
        daily_check_notes: str = "",
    ) -> DailyRecord:
        return cls(
            id=uuid4().hex,
            date=date,
            eggs_collected=eggs_collected,
            eggs_broken=eggs_broken,
            eggs_spoilt=eggs_spoilt,
            eggs_sold=eggs_sold,
            egg_price=egg_price,
            fowl_deaths=fowl_deaths,
            new_hatches=new_hatches,
            feed_consumed=feed_consumed,
            feed_cost=feed_cost,
            medication_given=medication_given,
            medication_details=medication_details,
            disinfection_done=disinfection_done,
            daily_check_notes=daily_check_notes,
        )
