from dining_planner.planning.models import Candidate
from dining_planner.planning.priority import prioritize


def _ids(candidates):
    return [c.id for c in candidates]


def test_stars_descending_without_wishlist():
    pool = [Candidate("one", "One", 1), Candidate("three", "Three", 3), Candidate("two", "Two", 2)]
    assert _ids(prioritize(pool)) == ["three", "two", "one"]


def test_wishlist_beats_stars():
    pool = [
        Candidate("top", "Top", 3),
        Candidate("wished", "Wished", 1, wishlisted=True),
    ]
    assert _ids(prioritize(pool)) == ["wished", "top"]


def test_stars_order_within_wishlist_group():
    pool = [
        Candidate("w1", "W1", 1, wishlisted=True),
        Candidate("n3", "N3", 3),
        Candidate("w2", "W2", 2, wishlisted=True),
    ]
    assert _ids(prioritize(pool)) == ["w2", "w1", "n3"]


def test_ties_keep_input_order():
    pool = [
        Candidate("b", "B", 2),
        Candidate("a", "A", 2),
        Candidate("c", "C", 2),
    ]
    assert _ids(prioritize(pool)) == ["b", "a", "c"]


def test_input_is_not_modified():
    pool = [Candidate("one", "One", 1), Candidate("three", "Three", 3)]
    prioritize(pool)
    assert _ids(pool) == ["one", "three"]


def test_empty_pool():
    assert prioritize([]) == ()
