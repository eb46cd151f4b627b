from __future__ import annotations

import logging
import math
import os

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, record_event
from .auth.dependencies import require_admin, require_user
from .auth.models import LoginRequest, RegisterRequest
from .auth.users import authenticate, register
from .dining.models import VisitRequest, WishlistRequest
from .dining.visits import delete_visit, get_visited_ids, get_visits, record_visit
from .dining.wishlist import add_to_wishlist, get_wishlist_ids, remove_from_wishlist
from .planning.config import DEFAULT_PLANNER_CONFIG
from .planning.itinerary import generate_travel_plan
from .planning.models import Located
from .plans.models import (
    TravelPlanCreateResponse,
    TravelPlanListResponse,
    TravelPlanOut,
    TravelPlanRequest,
)
from .plans.store import (
    create_plan,
    delete_plan,
    get_plan,
    get_plan_by_share_token,
    list_plans,
)
from .restaurants.data_store import get_dataframe
from .restaurants.lookup import (
    find_candidates,
    get_filter_options,
    get_restaurant,
    search_restaurants,
)
from .restaurants.models import (
    Pagination,
    RestaurantFilters,
    RestaurantListResponse,
    RestaurantOut,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Starred Dining Trip Planner API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "dining-planner-secret-change-in-production"),
)

_FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_dataframe()
    cities = sorted(df["city"].dropna().unique().tolist())
    countries = sorted(df["country"].dropna().unique().tolist())
    cuisines = sorted(df["cuisine_type"].dropna().unique().tolist())
    return {"cities": cities, "countries": countries, "cuisines": cuisines}


@app.get("/restaurants", response_model=RestaurantListResponse)
def restaurants(
    search: str | None = None,
    city: str | None = None,
    country: str | None = None,
    cuisine: str | None = None,
    michelin_stars: int | None = Query(default=None, ge=1, le=3),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PLANNER_CONFIG.default_page_size, ge=1, le=100),
) -> RestaurantListResponse:
    items, total = search_restaurants(
        search=search,
        city=city,
        country=country,
        cuisine=cuisine,
        michelin_stars=michelin_stars,
        page=page,
        limit=limit,
    )
    pagination = Pagination(
        current=page,
        total=math.ceil(total / limit),
        count=len(items),
        total_count=total,
    )
    return RestaurantListResponse(restaurants=items, pagination=pagination)


@app.get("/restaurants/filters", response_model=RestaurantFilters)
def restaurant_filters() -> RestaurantFilters:
    return RestaurantFilters(**get_filter_options())


@app.get("/restaurants/{restaurant_id}", response_model=RestaurantOut)
def restaurant_detail(restaurant_id: str) -> RestaurantOut:
    restaurant = get_restaurant(restaurant_id)
    if restaurant is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant


@app.get("/travel-plans/share/{token}", response_model=TravelPlanOut)
def shared_travel_plan(token: str) -> TravelPlanOut:
    plan = get_plan_by_share_token(token)
    if plan is None:
        raise HTTPException(status_code=404, detail="Travel plan not found")
    return plan


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/register", status_code=201)
def register_user(body: RegisterRequest, request: Request) -> dict:
    user = register(body.username, body.password)
    if not user:
        raise HTTPException(status_code=409, detail="Username already taken")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Wishlist & visits ────────────────────────────────────────────────────


@app.get("/wishlist", response_model=list[RestaurantOut])
def wishlist(user: dict = Depends(require_user)) -> list[RestaurantOut]:
    items = [get_restaurant(rid) for rid in sorted(get_wishlist_ids(user["username"]))]
    return [r for r in items if r is not None]


@app.post("/wishlist", status_code=201)
def wishlist_add(body: WishlistRequest, user: dict = Depends(require_user)) -> dict:
    if get_restaurant(body.restaurant_id) is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    if not add_to_wishlist(user["username"], body.restaurant_id):
        raise HTTPException(status_code=400, detail="Restaurant already in wishlist")
    return {"status": "added", "restaurant_id": body.restaurant_id}


@app.delete("/wishlist/{restaurant_id}")
def wishlist_remove(restaurant_id: str, user: dict = Depends(require_user)) -> dict:
    if not remove_from_wishlist(user["username"], restaurant_id):
        raise HTTPException(status_code=404, detail="Wishlist entry not found")
    return {"status": "removed", "restaurant_id": restaurant_id}


@app.post("/visits", status_code=201)
def visit_add(body: VisitRequest, user: dict = Depends(require_user)) -> dict:
    if get_restaurant(body.restaurant_id) is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    visit = record_visit(user["username"], body.restaurant_id, body.notes)
    return {"status": "recorded", "visit": visit}


@app.get("/visits")
def visits(user: dict = Depends(require_user)) -> dict:
    return {"visits": get_visits(user["username"])}


@app.delete("/visits/{visit_id}")
def visit_remove(visit_id: str, user: dict = Depends(require_user)) -> dict:
    if not delete_visit(visit_id, user["username"]):
        raise HTTPException(status_code=404, detail="Visit not found")
    return {"message": "Visit deleted successfully"}


# ── Travel plans ─────────────────────────────────────────────────────────


@app.get("/travel-plans", response_model=TravelPlanListResponse)
def travel_plans(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PLANNER_CONFIG.default_page_size, ge=1, le=100),
    user: dict = Depends(require_user),
) -> TravelPlanListResponse:
    items, pagination = list_plans(user["username"], page=page, limit=limit)
    return TravelPlanListResponse(travel_plans=items, pagination=pagination)


@app.post("/travel-plans", response_model=TravelPlanCreateResponse, status_code=201)
def travel_plan_create(
    body: TravelPlanRequest,
    user: dict = Depends(require_user),
) -> TravelPlanCreateResponse:
    username = user["username"]
    days = body.days
    if days > DEFAULT_PLANNER_CONFIG.max_trip_days:
        raise HTTPException(
            status_code=422,
            detail=f"Trips are limited to {DEFAULT_PLANNER_CONFIG.max_trip_days} days",
        )

    # 1. Candidate pool for the city, annotated with the user's markers
    candidates = find_candidates(
        body.city,
        country=body.country,
        cuisines=body.preferred_cuisines,
        wishlist_ids=get_wishlist_ids(username),
        visited_ids=get_visited_ids(username),
        include_visited=True,
    )
    if not candidates:
        record_event("plan_not_found", {"city": body.city})
        raise HTTPException(status_code=404, detail="No restaurants found in the specified city")

    if not body.include_visited:
        candidates = [c for c in candidates if not c.visited]
    if not candidates:
        record_event("plan_not_found", {"city": body.city})
        raise HTTPException(
            status_code=404,
            detail='No unvisited restaurants found in the specified city. Try enabling "Include Visited".',
        )

    # 2. Plan
    start = None
    if body.start_latitude is not None and body.start_longitude is not None:
        start = Located(body.start_latitude, body.start_longitude)

    plan = generate_travel_plan(
        candidates,
        days,
        max_stars_per_day=body.max_stars_per_day,
        start_date=body.start_date,
        start=start,
    )

    # 3. Persist and report
    stored = create_plan(username, body, plan)
    logger.info("Created travel plan %s for %s in %s", stored.id, username, body.city)
    record_event("plan_created", {
        "city": body.city,
        "days_requested": days,
        "meals_scheduled": len(plan.scheduled_ids),
        "unscheduled": len(plan.unscheduled),
        "max_stars_per_day": body.max_stars_per_day,
        "cuisines": body.preferred_cuisines,
        "include_visited": body.include_visited,
        "start_point": start is not None,
    })

    return TravelPlanCreateResponse(
        message="Travel plan created successfully",
        travel_plan=stored,
        share_url=f"{_FRONTEND_URL}/travel-plans/{stored.share_token}",
    )


@app.get("/travel-plans/{plan_id}", response_model=TravelPlanOut)
def travel_plan_detail(plan_id: str, user: dict = Depends(require_user)) -> TravelPlanOut:
    plan = get_plan(plan_id, user["username"])
    if plan is None:
        raise HTTPException(status_code=404, detail="Travel plan not found")
    return plan


@app.delete("/travel-plans/{plan_id}")
def travel_plan_delete(plan_id: str, user: dict = Depends(require_user)) -> dict:
    if not delete_plan(plan_id, user["username"]):
        raise HTTPException(status_code=404, detail="Travel plan not found")
    return {"message": "Travel plan deleted successfully"}


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_events())
