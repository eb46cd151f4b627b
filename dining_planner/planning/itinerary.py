from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import date, timedelta

from .config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from .models import Candidate, DayPlan, Located, MealAssignment, TravelPlan
from .packer import pack_days
from .priority import prioritize
from .router import sequence_route

logger = logging.getLogger(__name__)


def assemble_itinerary(
    schedule: Mapping[int, Sequence[MealAssignment]],
    start_date: date,
) -> tuple[DayPlan, ...]:
    """Date each non-empty day; day N falls on ``start_date + N - 1``."""
    plans: list[DayPlan] = []
    for day in sorted(schedule):
        meals = schedule[day]
        if not meals:
            continue
        plans.append(DayPlan(
            day=day,
            date=start_date + timedelta(days=day - 1),
            meals=tuple(meals),
        ))
    return tuple(plans)


def generate_travel_plan(
    candidates: Iterable[Candidate],
    days: int,
    max_stars_per_day: int | None = None,
    start_date: date | None = None,
    start: Located | None = None,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> TravelPlan:
    """
    Build a day-by-day dining schedule from a candidate pool.

    Steps:
    - Seed order: wishlist first, then stars descending.
    - Greedy nearest-neighbour route from ``start`` or the pool centroid.
    - Pack lunch / dinner per day under the stars budget and top-tier rule.
    - Date the non-empty days from ``start_date`` (today by default).

    Never raises for well-typed input; an empty pool yields an empty plan.
    """
    pool = prioritize(candidates)
    route = sequence_route(pool, start=start)
    packed = pack_days(route, days, max_stars_per_day, config=config)
    itinerary = assemble_itinerary(packed.schedule, start_date or date.today())

    plan = TravelPlan(days=itinerary, unscheduled=packed.unscheduled)
    logger.info(
        "Planned %d candidates over %d days: %d meals on %d days, %d unscheduled",
        len(pool),
        days,
        len(plan.scheduled_ids),
        len(itinerary),
        len(plan.unscheduled),
    )
    return plan
