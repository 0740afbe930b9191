"""
Tests for the property registry

Verifies:
- Iteration is ascending by total price, whatever the insertion order
- A listing whose total price is already stored is dropped
- Collisions are checked against current total prices
- filter() keeps ascending order
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core import Genre, PanelProperty, Property, PropertyRegistry, is_price_collision


@pytest.fixture
def make():
    """Listing in a city without modifier, so total price = price * area."""
    def _make(price_per_sqm: float, area_sqm: int = 1, genre: Genre = Genre.FARM) -> Property:
        return Property(
            city="Kisvárda",
            price_per_sqm=price_per_sqm,
            area_sqm=area_sqm,
            number_of_rooms=1,
            genre=genre,
        )
    return _make


class TestOrdering:

    def test_ascending_iteration(self, make):
        registry = PropertyRegistry()
        for price in (300, 100, 200):
            registry.insert(make(price))

        assert [p.total_price() for p in registry] == [100, 200, 300]
        assert [p.total_price() for p in registry.iter_ascending()] == [100, 200, 300]

    def test_iteration_is_repeatable(self, make):
        registry = PropertyRegistry([make(2), make(1)])
        assert list(registry) == list(registry)
        assert len(list(registry)) == 2

    def test_empty_registry(self):
        registry = PropertyRegistry()
        assert registry.size() == 0
        assert list(registry) == []
        assert registry.filter(lambda p: True) == []


class TestPriceCollision:

    def test_equal_total_prices_keep_first(self, make):
        registry = PropertyRegistry()
        first = make(100, area_sqm=10, genre=Genre.FARM)
        second = make(10, area_sqm=100, genre=Genre.CONDOMINIUM)

        assert registry.insert(first) is True
        assert registry.insert(second) is False

        assert registry.size() == 1
        assert len(registry) == 1
        assert next(iter(registry)) is first

    def test_collision_across_kinds_and_cities(self):
        """Economically different listings that price the same collide."""
        registry = PropertyRegistry()
        budapest = Property("Budapest", 1000, 100, 4, Genre.CONDOMINIUM)
        panel = PanelProperty("Kisvárda", 1000, 130, 2, Genre.FARM, floor=5, is_insulated=False)

        assert budapest.total_price() == panel.total_price() == 130000
        registry.insert(budapest)
        assert registry.insert(panel) is False
        assert registry.size() == 1

    def test_same_object_twice(self, make):
        registry = PropertyRegistry()
        prop = make(5)
        registry.insert(prop)
        assert registry.insert(prop) is False

    def test_collision_uses_price_after_discount(self, make):
        registry = PropertyRegistry()
        listing = make(1000)
        registry.insert(listing)

        listing.make_discount(10)

        assert [p.total_price() for p in registry] == [900]
        assert registry.insert(make(1000)) is True
        assert registry.insert(make(900)) is False
        assert [p.total_price() for p in registry] == [900, 1000]

    def test_predicate(self):
        assert is_price_collision(100, 100) is True
        assert is_price_collision(100, 101) is False


class TestFilter:

    def test_filter_keeps_order(self, make):
        registry = PropertyRegistry([
            make(500, genre=Genre.CONDOMINIUM),
            make(100, genre=Genre.FARM),
            make(300, genre=Genre.CONDOMINIUM),
            make(200, genre=Genre.CONDOMINIUM),
        ])

        condos = registry.filter(lambda p: p.genre == Genre.CONDOMINIUM)
        assert [p.total_price() for p in condos] == [200, 300, 500]

    def test_snapshot_is_detached(self, make):
        registry = PropertyRegistry([make(1)])
        snapshot = registry.snapshot()
        registry.insert(make(2))
        assert len(snapshot) == 1
        assert registry.size() == 2

    def test_mutation_after_insert_keeps_slot(self, make):
        registry = PropertyRegistry()
        cheap = make(100)
        registry.insert(cheap)
        registry.insert(make(200))

        cheap.price_per_sqm = 1000

        assert list(registry)[0] is cheap
        assert registry.insert(make(1000)) is False
        assert registry.insert(make(100)) is True
