from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from ..planning.models import Candidate, Located, Location, Unlocated
from .data_store import get_dataframe
from .models import RestaurantOut


def _optional(value):
    return value if pd.notna(value) else None


def _location(row: pd.Series) -> Location:
    lat, lon = row.get("latitude"), row.get("longitude")
    if pd.notna(lat) and pd.notna(lon):
        return Located(float(lat), float(lon))
    return Unlocated()


def row_to_restaurant(row: pd.Series) -> RestaurantOut:
    lat = _optional(row.get("latitude"))
    lon = _optional(row.get("longitude"))
    return RestaurantOut(
        id=str(row["id"]),
        name=row["name"],
        city=row["city"],
        country=_optional(row.get("country")),
        cuisine_type=_optional(row.get("cuisine_type")),
        michelin_stars=int(row["michelin_stars"]),
        latitude=float(lat) if lat is not None else None,
        longitude=float(lon) if lon is not None else None,
        address=_optional(row.get("address")),
    )


def _contains(column: pd.Series, needle: str) -> pd.Series:
    return column.str.contains(needle.strip().lower(), na=False, regex=False)


def _filter_mask(
    df: pd.DataFrame,
    city: str | None = None,
    country: str | None = None,
    cuisines: Iterable[str] = (),
    michelin_stars: int | None = None,
    search: str | None = None,
) -> pd.Series:
    mask = pd.Series(True, index=df.index)

    if search and search.strip():
        mask = mask & (
            _contains(df["name"].fillna("").str.lower(), search)
            | _contains(df["city_lower"], search)
            | _contains(df["country_lower"], search)
            | _contains(df["cuisine_lower"], search)
        )
    if city:
        mask = mask & _contains(df["city_lower"], city)
    if country:
        mask = mask & _contains(df["country_lower"], country)

    wanted = [c.strip().lower() for c in cuisines if c.strip()]
    if wanted:
        mask = mask & df["cuisine_lower"].apply(lambda ct: any(w in ct for w in wanted))

    if michelin_stars is not None:
        mask = mask & (df["michelin_stars"] == michelin_stars)

    return mask


def get_restaurant(restaurant_id: str) -> RestaurantOut | None:
    df = get_dataframe()
    matches = df.loc[df["id"] == str(restaurant_id)]
    if matches.empty:
        return None
    return row_to_restaurant(matches.iloc[0])


def find_candidates(
    city: str,
    country: str | None = None,
    cuisines: Iterable[str] = (),
    wishlist_ids: Iterable[str] = (),
    visited_ids: Iterable[str] = (),
    include_visited: bool = False,
) -> list[Candidate]:
    """
    Return planner candidates for a city.

    Matching is case-insensitive substring on city and country, and any-of on
    cuisines. Only geocoded restaurants are returned. Visited restaurants are
    dropped unless ``include_visited`` is set.
    """
    df = get_dataframe()
    mask = _filter_mask(df, city=city, country=country, cuisines=cuisines)
    mask = mask & df["latitude"].notna() & df["longitude"].notna()

    wishlist = {str(i) for i in wishlist_ids}
    visited = {str(i) for i in visited_ids}

    candidates: list[Candidate] = []
    for _, row in df.loc[mask].iterrows():
        rid = str(row["id"])
        if rid in visited and not include_visited:
            continue
        candidates.append(Candidate(
            id=rid,
            name=row["name"],
            stars=int(row["michelin_stars"]),
            location=_location(row),
            wishlisted=rid in wishlist,
            visited=rid in visited,
        ))
    return candidates


def search_restaurants(
    search: str | None = None,
    city: str | None = None,
    country: str | None = None,
    cuisine: str | None = None,
    michelin_stars: int | None = None,
    page: int = 1,
    limit: int = 20,
) -> tuple[list[RestaurantOut], int]:
    """Return one page of matching restaurants (most stars first, then by name) and the match count."""
    df = get_dataframe()
    mask = _filter_mask(
        df,
        city=city,
        country=country,
        cuisines=[cuisine] if cuisine else (),
        michelin_stars=michelin_stars,
        search=search,
    )
    matches = df.loc[mask].sort_values(["michelin_stars", "name"], ascending=[False, True])

    skip = (page - 1) * limit
    restaurants = [row_to_restaurant(row) for _, row in matches.iloc[skip:skip + limit].iterrows()]
    return restaurants, len(matches)


def get_filter_options() -> dict:
    df = get_dataframe()
    cities = (
        df[["city", "country"]]
        .dropna(subset=["city"])
        .drop_duplicates()
        .sort_values(["country", "city"])
    )
    return {
        "countries": sorted(df["country"].dropna().unique().tolist()),
        "cities": [
            {"city": row["city"], "country": _optional(row["country"])}
            for _, row in cities.iterrows()
        ],
        "cuisine_types": sorted(df["cuisine_type"].dropna().unique().tolist()),
    }
