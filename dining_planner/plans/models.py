from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field, model_validator

from ..planning.models import MealSlot
from ..restaurants.models import Pagination, RestaurantOut


class TravelPlanRequest(BaseModel):
    city: str = Field(..., min_length=1, description="City to plan the trip in")
    country: str | None = None
    start_date: dt.date
    end_date: dt.date
    max_stars_per_day: int | None = Field(default=None, ge=1, le=6)
    preferred_cuisines: list[str] = Field(default_factory=list)
    include_visited: bool = False
    start_latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    start_longitude: float | None = Field(default=None, ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _check_dates_and_start(self) -> TravelPlanRequest:
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        if (self.start_latitude is None) != (self.start_longitude is None):
            raise ValueError("start_latitude and start_longitude must be given together")
        return self

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1


class MealOut(BaseModel):
    meal_type: MealSlot
    order: int
    restaurant: RestaurantOut


class DayPlanOut(BaseModel):
    day: int
    date: dt.date
    meals: list[MealOut]


class TravelPlanOut(BaseModel):
    id: str
    username: str
    city: str
    country: str | None = None
    start_date: dt.date
    end_date: dt.date
    max_stars_per_day: int | None = None
    preferred_cuisines: list[str] = Field(default_factory=list)
    include_visited: bool = False
    share_token: str
    days: list[DayPlanOut]
    unscheduled: list[RestaurantOut] = Field(default_factory=list)
    created_at: float


class TravelPlanListResponse(BaseModel):
    travel_plans: list[TravelPlanOut]
    pagination: Pagination


class TravelPlanCreateResponse(BaseModel):
    message: str
    travel_plan: TravelPlanOut
    share_url: str
