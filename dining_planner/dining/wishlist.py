from __future__ import annotations

_wishlists: dict[str, set[str]] = {}


def add_to_wishlist(username: str, restaurant_id: str) -> bool:
    """Add *restaurant_id* to the user's wishlist. Returns ``False`` if already there."""
    ids = _wishlists.setdefault(username, set())
    if restaurant_id in ids:
        return False
    ids.add(restaurant_id)
    return True


def remove_from_wishlist(username: str, restaurant_id: str) -> bool:
    ids = _wishlists.get(username, set())
    if restaurant_id not in ids:
        return False
    ids.discard(restaurant_id)
    return True


def get_wishlist_ids(username: str) -> set[str]:
    return set(_wishlists.get(username, set()))


def clear_wishlists() -> None:
    _wishlists.clear()
