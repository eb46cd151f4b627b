from __future__ import annotations

import math
from collections.abc import Iterable

from .config import DEFAULT_PLANNER_CONFIG
from .models import Candidate, Located


def haversine_km(
    a: Located,
    b: Located,
    radius_km: float = DEFAULT_PLANNER_CONFIG.earth_radius_km,
) -> float:
    """Great-circle distance between two located points, in kilometres."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    h = min(1.0, h)  # float drift near antipodes
    return 2 * radius_km * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def centroid(candidates: Iterable[Candidate]) -> Located:
    """Mean coordinate of the located candidates.

    Falls back to ``Located(0.0, 0.0)`` when nothing is located; callers
    should read that as "no meaningful anchor".
    """
    points = [c.location for c in candidates if isinstance(c.location, Located)]
    if not points:
        return Located(0.0, 0.0)
    return Located(
        latitude=sum(p.latitude for p in points) / len(points),
        longitude=sum(p.longitude for p in points) / len(points),
    )
