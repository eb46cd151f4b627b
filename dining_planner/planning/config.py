from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class PlannerConfig:
    earth_radius_km: float = 6371.0
    top_tier: int = 3
    max_trip_days: int = int(os.getenv("PLANNER_MAX_TRIP_DAYS", "30"))
    default_page_size: int = 20


DEFAULT_PLANNER_CONFIG = PlannerConfig()
