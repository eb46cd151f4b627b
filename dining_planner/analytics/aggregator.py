from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    plans = [e for e in events if e["type"] == "plan_created"]
    total = len(plans)

    # Top cities
    city_counter: Counter[str] = Counter()
    for p in plans:
        city_counter[p.get("city", "unknown")] += 1
    top_cities = [{"name": n, "count": c} for n, c in city_counter.most_common(10)]

    # Trip shape
    days = [p["days_requested"] for p in plans if "days_requested" in p]
    meals = [p["meals_scheduled"] for p in plans if "meals_scheduled" in p]
    avg_days = round(sum(days) / len(days), 1) if days else 0.0
    avg_meals = round(sum(meals) / len(meals), 1) if meals else 0.0

    # Option usage rates
    option_counts = {"max_stars_per_day": 0, "cuisine": 0, "include_visited": 0, "start_point": 0}
    for p in plans:
        if p.get("max_stars_per_day"):
            option_counts["max_stars_per_day"] += 1
        if p.get("cuisines"):
            option_counts["cuisine"] += 1
        if p.get("include_visited"):
            option_counts["include_visited"] += 1
        if p.get("start_point"):
            option_counts["start_point"] += 1
    option_usage = {
        k: round(v / total * 100, 1) if total else 0.0
        for k, v in option_counts.items()
    }

    # Candidates the packer could not place
    unscheduled = sum(p.get("unscheduled", 0) for p in plans)

    # Plans that came back with nothing scheduled
    empty_plans = sum(1 for p in plans if p.get("meals_scheduled", 0) == 0)

    return {
        "total_plans": total,
        "top_cities": top_cities,
        "avg_days_requested": avg_days,
        "avg_meals_scheduled": avg_meals,
        "option_usage": option_usage,
        "total_unscheduled": unscheduled,
        "empty_plans": empty_plans,
        "not_found": sum(1 for e in events if e["type"] == "plan_not_found"),
    }
