from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CSV = Path(__file__).resolve().parent.parent / "data" / "restaurants.csv"


@dataclass(frozen=True)
class RestaurantStoreConfig:
    csv_path: Path = Path(os.getenv("RESTAURANTS_CSV", str(_BUNDLED_CSV)))


DEFAULT_RESTAURANT_STORE_CONFIG = RestaurantStoreConfig()
