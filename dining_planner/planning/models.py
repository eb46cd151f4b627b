from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class Located:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Unlocated:
    """A restaurant whose address has not been geocoded."""


Location = Union[Located, Unlocated]


@dataclass(frozen=True)
class Candidate:
    id: str
    name: str
    stars: int
    location: Location = field(default_factory=Unlocated)
    wishlisted: bool = False
    visited: bool = False

    @property
    def is_located(self) -> bool:
        return isinstance(self.location, Located)


class MealSlot(str, Enum):
    lunch = "lunch"
    dinner = "dinner"


@dataclass(frozen=True)
class MealAssignment:
    day: int
    slot: MealSlot
    candidate: Candidate
    order: int


@dataclass(frozen=True)
class DayPlan:
    day: int
    date: date
    meals: tuple[MealAssignment, ...]

    @property
    def total_stars(self) -> int:
        return sum(m.candidate.stars for m in self.meals)


@dataclass(frozen=True)
class TravelPlan:
    """Planner output.

    ``unscheduled`` holds the route entries the packer never consumed, either
    because the requested days ran out or because they never fit the
    stars-per-day budget / top-tier rule.
    """

    days: tuple[DayPlan, ...]
    unscheduled: tuple[Candidate, ...] = ()

    @property
    def scheduled_ids(self) -> list[str]:
        return [m.candidate.id for d in self.days for m in d.meals]
