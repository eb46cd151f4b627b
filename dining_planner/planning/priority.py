from __future__ import annotations

from collections.abc import Iterable

from .models import Candidate


def _priority_key(candidate: Candidate) -> tuple[bool, int]:
    return (not candidate.wishlisted, -candidate.stars)


def prioritize(candidates: Iterable[Candidate]) -> tuple[Candidate, ...]:
    """Wishlisted restaurants first, then by stars descending.

    ``sorted`` is stable, so equal keys keep their input order. The result
    only seeds the router; the final order is geographic.
    """
    return tuple(sorted(candidates, key=_priority_key))
