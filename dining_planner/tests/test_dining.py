from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from dining_planner.app import app
from dining_planner.dining.visits import delete_visit, get_visited_ids, get_visits, record_visit
from dining_planner.dining.wishlist import add_to_wishlist, get_wishlist_ids, remove_from_wishlist


def _fresh_client() -> TestClient:
    c = TestClient(app)
    c.post("/auth/register", json={"username": f"diner-{uuid.uuid4().hex[:8]}", "password": "s3cret-pass"})
    return c


# ── Stores ───────────────────────────────────────────────────────────────


def test_wishlist_store_add_remove():
    user = f"u-{uuid.uuid4().hex[:8]}"
    assert add_to_wishlist(user, "r-paris-1")
    assert not add_to_wishlist(user, "r-paris-1")
    assert get_wishlist_ids(user) == {"r-paris-1"}
    assert remove_from_wishlist(user, "r-paris-1")
    assert not remove_from_wishlist(user, "r-paris-1")
    assert get_wishlist_ids(user) == set()


def test_visits_allow_repeat_visits():
    user = f"u-{uuid.uuid4().hex[:8]}"
    record_visit(user, "r-tokyo-1")
    record_visit(user, "r-tokyo-1", notes="second time, still perfect")
    assert get_visited_ids(user) == {"r-tokyo-1"}


def test_delete_visit_only_for_its_owner():
    user = f"u-{uuid.uuid4().hex[:8]}"
    visit = record_visit(user, "r-nyc-2")
    assert not delete_visit(visit["id"], "someone-else")
    assert delete_visit(visit["id"], user)
    assert not delete_visit(visit["id"], user)
    assert get_visits(user) == []


# ── Wishlist endpoints ───────────────────────────────────────────────────


def test_wishlist_add_and_list():
    c = _fresh_client()
    resp = c.post("/wishlist", json={"restaurant_id": "r-paris-3"})
    assert resp.status_code == 201
    body = c.get("/wishlist").json()
    assert [r["id"] for r in body] == ["r-paris-3"]
    assert body[0]["name"] == "Septime"


def test_wishlist_add_twice():
    c = _fresh_client()
    c.post("/wishlist", json={"restaurant_id": "r-paris-3"})
    resp = c.post("/wishlist", json={"restaurant_id": "r-paris-3"})
    assert resp.status_code == 400


def test_wishlist_unknown_restaurant():
    c = _fresh_client()
    resp = c.post("/wishlist", json={"restaurant_id": "does-not-exist"})
    assert resp.status_code == 404


def test_wishlist_remove():
    c = _fresh_client()
    c.post("/wishlist", json={"restaurant_id": "r-tokyo-4"})
    assert c.delete("/wishlist/r-tokyo-4").status_code == 200
    assert c.get("/wishlist").json() == []
    assert c.delete("/wishlist/r-tokyo-4").status_code == 404


# ── Visit endpoints ──────────────────────────────────────────────────────


def test_record_and_list_visits():
    c = _fresh_client()
    resp = c.post("/visits", json={"restaurant_id": "r-nyc-3", "notes": "great tapas"})
    assert resp.status_code == 201
    visits = c.get("/visits").json()["visits"]
    assert len(visits) == 1
    assert visits[0]["restaurant_id"] == "r-nyc-3"
    assert visits[0]["notes"] == "great tapas"


def test_visit_unknown_restaurant():
    c = _fresh_client()
    resp = c.post("/visits", json={"restaurant_id": "does-not-exist"})
    assert resp.status_code == 404


def test_delete_visit():
    c = _fresh_client()
    visit = c.post("/visits", json={"restaurant_id": "r-paris-5"}).json()["visit"]
    assert visit["id"]

    resp = c.delete(f"/visits/{visit['id']}")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Visit deleted successfully"
    assert c.get("/visits").json()["visits"] == []

    again = c.delete(f"/visits/{visit['id']}")
    assert again.status_code == 404
    assert again.json()["detail"] == "Visit not found"


def test_cannot_delete_another_users_visit():
    owner, other = _fresh_client(), _fresh_client()
    visit = owner.post("/visits", json={"restaurant_id": "r-tokyo-2"}).json()["visit"]
    assert other.delete(f"/visits/{visit['id']}").status_code == 404
    assert len(owner.get("/visits").json()["visits"]) == 1


def test_delete_visit_requires_login():
    assert TestClient(app).delete("/visits/anything").status_code == 401
