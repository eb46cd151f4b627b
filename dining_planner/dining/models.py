from __future__ import annotations

from pydantic import BaseModel, Field


class WishlistRequest(BaseModel):
    restaurant_id: str = Field(..., min_length=1)


class VisitRequest(BaseModel):
    restaurant_id: str = Field(..., min_length=1)
    notes: str | None = Field(default=None, max_length=1000)
