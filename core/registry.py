"""
Property Registry - Ordered, Price-Deduplicating Store

Holds every loaded listing sorted by total price, ascending.

Membership is keyed on total price, not on the listing itself: a listing
whose total price equals the current total price of one already stored
is dropped and insert() returns False. Two economically different
listings that happen to price identically therefore collide and only
the first one survives. The listing format has no identity field to key
on instead; if this ever needs to change, is_price_collision() is the
single place to do it.

The registry has no locking. Parse, insert and report all run on one
thread before anything reads the results.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Iterable, Iterator

from .models import Property


def is_price_collision(candidate_price: int, stored_price: int) -> bool:
    """Whether a candidate is treated as already present in the registry."""
    return candidate_price == stored_price


def _live_price(prop: Property) -> int:
    return prop.total_price()


class PropertyRegistry:
    """
    Listings ordered by total price.

    Collision checks compare against each stored listing's live total
    price, so a discount applied after insertion is taken into account.
    Position is decided at insertion: a listing mutated afterwards keeps
    its slot and is not re-sorted.
    """

    def __init__(self, properties: Iterable[Property] = ()):
        self._items: list[Property] = []
        for prop in properties:
            self.insert(prop)

    def insert(self, prop: Property) -> bool:
        """
        Store a listing unless its total price collides.

        Returns:
            True if stored, False if dropped as a price collision.
        """
        price = prop.total_price()
        if any(is_price_collision(price, stored.total_price()) for stored in self._items):
            return False

        index = bisect_left(self._items, price, key=_live_price)
        self._items.insert(index, prop)
        return True

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Property]:
        return iter(list(self._items))

    def iter_ascending(self) -> Iterator[Property]:
        """Listings in ascending total-price order."""
        return iter(self)

    def filter(self, predicate: Callable[[Property], bool]) -> list[Property]:
        """Matching listings, still in ascending total-price order."""
        return [prop for prop in self._items if predicate(prop)]

    def snapshot(self) -> tuple[Property, ...]:
        return tuple(self._items)

    def __repr__(self) -> str:
        return f"PropertyRegistry(size={len(self._items)})"
