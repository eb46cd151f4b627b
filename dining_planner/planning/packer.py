from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from .models import Candidate, MealAssignment, MealSlot

MEAL_SLOTS: tuple[MealSlot, ...] = (MealSlot.lunch, MealSlot.dinner)


@dataclass
class PackResult:
    schedule: dict[int, list[MealAssignment]] = field(default_factory=dict)
    unscheduled: tuple[Candidate, ...] = ()


def _within_budget(stars_today: int, candidate: Candidate, max_stars_per_day: int | None) -> bool:
    # 0 and None both mean "no cap"
    if not max_stars_per_day:
        return True
    return stars_today + candidate.stars <= max_stars_per_day


def _is_top_tier_clash(
    meals: list[MealAssignment],
    candidate: Candidate,
    top_tier: int,
) -> bool:
    lunch_is_top = any(
        m.slot is MealSlot.lunch and m.candidate.stars == top_tier for m in meals
    )
    return lunch_is_top and candidate.stars == top_tier


def pack_days(
    route: Sequence[Candidate],
    days: int,
    max_stars_per_day: int | None = None,
    config: PlannerConfig = DEFAULT_PLANNER_CONFIG,
) -> PackResult:
    """
    Walk the route and fill lunch then dinner for each day.

    Rules:
    - A slot takes the next unconsumed route entry only if the day's star
      total stays within ``max_stars_per_day``.
    - Dinner is refused when both it and that day's lunch are top tier.
    - A refused restaurant stays at the head of the route and is offered to
      the next slot, so one that never fits blocks everything behind it.

    Days with no meals are left out of ``schedule``. Whatever is still on the
    route at the end is returned as ``unscheduled``.
    """
    result = PackResult()
    cursor = 0

    for day in range(1, days + 1):
        meals: list[MealAssignment] = []
        stars_today = 0

        for slot in MEAL_SLOTS:
            if cursor >= len(route):
                break
            candidate = route[cursor]
            if not _within_budget(stars_today, candidate, max_stars_per_day):
                continue
            if slot is MealSlot.dinner and _is_top_tier_clash(meals, candidate, config.top_tier):
                continue

            meals.append(MealAssignment(day=day, slot=slot, candidate=candidate, order=len(meals)))
            stars_today += candidate.stars
            cursor += 1

        if meals:
            result.schedule[day] = meals

    result.unscheduled = tuple(route[cursor:])
    return result
