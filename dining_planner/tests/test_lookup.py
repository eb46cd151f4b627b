from dining_planner.planning.models import Located
from dining_planner.restaurants.data_store import get_dataframe
from dining_planner.restaurants.lookup import find_candidates, get_restaurant


def _ids(candidates):
    return sorted(c.id for c in candidates)


def test_dataframe_has_lookup_columns():
    df = get_dataframe()
    assert not df.empty
    for col in ("city_lower", "country_lower", "cuisine_lower"):
        assert col in df.columns


def test_city_match_is_case_insensitive_substring():
    assert _ids(find_candidates("pARis")) == _ids(find_candidates("Paris"))
    assert _ids(find_candidates("york")) == ["r-nyc-1", "r-nyc-2", "r-nyc-3"]


def test_only_geocoded_restaurants_are_candidates():
    candidates = find_candidates("Paris")
    assert "r-paris-8" not in _ids(candidates)
    assert all(isinstance(c.location, Located) for c in candidates)


def test_country_filter():
    assert find_candidates("Paris", country="japan") == []
    assert len(find_candidates("Paris", country="fra")) == 7


def test_cuisine_filter_matches_any():
    assert _ids(find_candidates("Paris", cuisines=["japanese"])) == ["r-paris-7"]
    assert _ids(find_candidates("Paris", cuisines=["Israeli", "Japanese"])) == ["r-paris-5", "r-paris-7"]


def test_unknown_city():
    assert find_candidates("Atlantis") == []


def test_wishlist_and_visited_flags():
    candidates = find_candidates(
        "Tokyo",
        wishlist_ids={"r-tokyo-2"},
        visited_ids={"r-tokyo-1"},
        include_visited=True,
    )
    by_id = {c.id: c for c in candidates}
    assert by_id["r-tokyo-2"].wishlisted
    assert by_id["r-tokyo-1"].visited
    assert not by_id["r-tokyo-3"].wishlisted


def test_visited_restaurants_dropped_by_default():
    candidates = find_candidates("Tokyo", visited_ids={"r-tokyo-1"})
    assert "r-tokyo-1" not in _ids(candidates)
    assert len(candidates) == 4


def test_get_restaurant():
    restaurant = get_restaurant("r-paris-2")
    assert restaurant is not None
    assert restaurant.name == "Arpège"
    assert restaurant.michelin_stars == 3


def test_get_restaurant_without_coordinates():
    restaurant = get_restaurant("r-paris-8")
    assert restaurant is not None
    assert restaurant.latitude is None
    assert restaurant.longitude is None


def test_get_restaurant_unknown():
    assert get_restaurant("nope") is None
