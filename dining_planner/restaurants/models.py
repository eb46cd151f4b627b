from __future__ import annotations

from pydantic import BaseModel


class RestaurantOut(BaseModel):
    id: str
    name: str
    city: str
    country: str | None = None
    cuisine_type: str | None = None
    michelin_stars: int
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None


class Pagination(BaseModel):
    current: int
    total: int
    count: int
    total_count: int


class RestaurantListResponse(BaseModel):
    restaurants: list[RestaurantOut]
    pagination: Pagination


class CityOut(BaseModel):
    city: str
    country: str | None = None


class RestaurantFilters(BaseModel):
    countries: list[str]
    cities: list[CityOut]
    cuisine_types: list[str]
