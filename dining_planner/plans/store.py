from __future__ import annotations

import math
import secrets
import time
import uuid

from ..planning.models import Candidate, TravelPlan
from ..restaurants.lookup import get_restaurant
from ..restaurants.models import Pagination, RestaurantOut
from .models import DayPlanOut, MealOut, TravelPlanOut, TravelPlanRequest

_plans: dict[str, TravelPlanOut] = {}


def _new_share_token() -> str:
    return secrets.token_hex(16)


def _restaurant_out(candidate: Candidate) -> RestaurantOut:
    restaurant = get_restaurant(candidate.id)
    if restaurant is not None:
        return restaurant
    # Candidate not in the catalogue (e.g. supplied directly by a caller)
    return RestaurantOut(id=candidate.id, name=candidate.name, city="", michelin_stars=candidate.stars)


def _day_outs(plan: TravelPlan) -> list[DayPlanOut]:
    return [
        DayPlanOut(
            day=day.day,
            date=day.date,
            meals=[
                MealOut(
                    meal_type=meal.slot,
                    order=meal.order,
                    restaurant=_restaurant_out(meal.candidate),
                )
                for meal in day.meals
            ],
        )
        for day in plan.days
    ]


def create_plan(username: str, request: TravelPlanRequest, plan: TravelPlan) -> TravelPlanOut:
    stored = TravelPlanOut(
        id=str(uuid.uuid4()),
        username=username,
        city=request.city,
        country=request.country,
        start_date=request.start_date,
        end_date=request.end_date,
        max_stars_per_day=request.max_stars_per_day,
        preferred_cuisines=request.preferred_cuisines,
        include_visited=request.include_visited,
        share_token=_new_share_token(),
        days=_day_outs(plan),
        unscheduled=[_restaurant_out(c) for c in plan.unscheduled],
        created_at=time.time(),
    )
    _plans[stored.id] = stored
    return stored


def list_plans(username: str, page: int = 1, limit: int = 20) -> tuple[list[TravelPlanOut], Pagination]:
    """Return one page of the user's plans, newest trip first."""
    owned = sorted(
        (p for p in _plans.values() if p.username == username),
        key=lambda p: p.start_date,
        reverse=True,
    )
    skip = (page - 1) * limit
    page_items = owned[skip:skip + limit]
    pagination = Pagination(
        current=page,
        total=math.ceil(len(owned) / limit),
        count=len(page_items),
        total_count=len(owned),
    )
    return page_items, pagination


def get_plan(plan_id: str, username: str) -> TravelPlanOut | None:
    plan = _plans.get(plan_id)
    if plan is None or plan.username != username:
        return None
    return plan


def get_plan_by_share_token(token: str) -> TravelPlanOut | None:
    for plan in _plans.values():
        if plan.share_token == token:
            return plan
    return None


def delete_plan(plan_id: str, username: str) -> bool:
    if get_plan(plan_id, username) is None:
        return False
    del _plans[plan_id]
    return True


def clear_plans() -> None:
    _plans.clear()
