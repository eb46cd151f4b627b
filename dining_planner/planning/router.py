from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .geo import centroid, haversine_km
from .models import Candidate, Located

logger = logging.getLogger(__name__)


def _pick_next(
    pool: Sequence[Candidate],
    taken: set[int],
    position: Located,
) -> int | None:
    """Index of the nearest untaken located candidate.

    When no untaken candidate is located, the first untaken one in pool
    order is returned instead, and ``None`` once everything is taken. Ties
    on distance go to the earlier index.
    """
    first_free: int | None = None
    nearest: int | None = None
    nearest_km = math.inf

    for i, candidate in enumerate(pool):
        if i in taken:
            continue
        if first_free is None:
            first_free = i
        if isinstance(candidate.location, Located):
            km = haversine_km(position, candidate.location)
            if km < nearest_km:
                nearest_km = km
                nearest = i

    return nearest if nearest is not None else first_free


def sequence_route(
    pool: Sequence[Candidate],
    start: Located | None = None,
) -> tuple[Candidate, ...]:
    """
    Order the pool with a greedy nearest-neighbour walk.

    The walk starts at ``start`` (or the pool's centroid) and always extends
    to the closest remaining located restaurant. Unlocated restaurants are
    only picked once no located one is left, in pool order, and they do not
    move the current position.
    """
    pool = tuple(pool)
    position = start if start is not None else centroid(pool)
    taken: set[int] = set()
    route: list[Candidate] = []

    while True:
        index = _pick_next(pool, taken, position)
        if index is None:
            break
        taken.add(index)
        chosen = pool[index]
        route.append(chosen)
        if isinstance(chosen.location, Located):
            position = chosen.location

    logger.debug("Route built: %s", [c.id for c in route])
    return tuple(route)
