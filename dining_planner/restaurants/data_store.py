from __future__ import annotations

import logging

import pandas as pd

from .config import DEFAULT_RESTAURANT_STORE_CONFIG, RestaurantStoreConfig

logger = logging.getLogger(__name__)

_df: pd.DataFrame | None = None


def _load(config: RestaurantStoreConfig) -> pd.DataFrame:
    df = pd.read_csv(config.csv_path, dtype={"id": str})

    df["michelin_stars"] = df["michelin_stars"].fillna(0).astype(int)
    df["latitude"] = pd.to_numeric(df["latitude"], errors="coerce")
    df["longitude"] = pd.to_numeric(df["longitude"], errors="coerce")

    # Lowercase city, country and cuisine for case-insensitive lookup
    df["city_lower"] = df["city"].fillna("").str.lower()
    df["country_lower"] = df["country"].fillna("").str.lower()
    df["cuisine_lower"] = df["cuisine_type"].fillna("").str.lower()

    logger.info("Loaded %d restaurants from %s", len(df), config.csv_path)
    return df


def get_dataframe(config: RestaurantStoreConfig = DEFAULT_RESTAURANT_STORE_CONFIG) -> pd.DataFrame:
    """Return the in-memory restaurant DataFrame, loading it on first call."""
    global _df
    if _df is None:
        _df = _load(config)
    return _df


def reload_dataframe(config: RestaurantStoreConfig = DEFAULT_RESTAURANT_STORE_CONFIG) -> pd.DataFrame:
    """Drop the cached DataFrame and load it again from ``config``."""
    global _df
    _df = None
    return get_dataframe(config)
