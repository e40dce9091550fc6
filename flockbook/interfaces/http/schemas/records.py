from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

# Form values arrive as typed text; numbers are accepted too
FormValue = str | int | float | None


class DailyRecordCreate(BaseModel):
    date: FormValue = None
    eggs_collected: FormValue = None
    eggs_broken: FormValue = None
    eggs_spoilt: FormValue = None
    eggs_sold: FormValue = None
    egg_price: FormValue = None
    fowl_deaths: FormValue = None
    new_hatches: FormValue = None
    feed_consumed: FormValue = None
    feed_cost: FormValue = None
    medication_given: bool | str | None = False
    medication_details: str | None = ""
    disinfection_done: bool | str | None = False
    daily_check_notes: str | None = ""


class DailyRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: date
    eggs_collected: int
    eggs_broken: int
    eggs_spoilt: int
    eggs_sold: int
    egg_price: float
    fowl_deaths: int
    new_hatches: int
    feed_consumed: float
    feed_cost: float
    medication_given: bool
    medication_details: str
    disinfection_done: bool
    daily_check_notes: str
    revenue: float
