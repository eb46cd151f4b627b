from __future__ import annotations

import time
import uuid
from typing import Any

_visits: dict[str, dict[str, Any]] = {}


def record_visit(
    username: str,
    restaurant_id: str,
    notes: str | None = None,
) -> dict[str, Any]:
    visit = {
        "id": str(uuid.uuid4()),
        "username": username,
        "restaurant_id": restaurant_id,
        "notes": notes,
        "timestamp": time.time(),
    }
    _visits[visit["id"]] = visit
    return visit


def get_visits(username: str) -> list[dict[str, Any]]:
    return [v for v in _visits.values() if v["username"] == username]


def get_visited_ids(username: str) -> set[str]:
    return {v["restaurant_id"] for v in _visits.values() if v["username"] == username}


def delete_visit(visit_id: str, username: str) -> bool:
    """Remove one of the user's visits. Returns ``False`` if it is not theirs or unknown."""
    visit = _visits.get(visit_id)
    if visit is None or visit["username"] != username:
        return False
    del _visits[visit_id]
    return True


def clear_visits() -> None:
    _visits.clear()
