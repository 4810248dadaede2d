from __future__ import annotations

from typing import Protocol

from .models import RestaurantOption


class RestaurantLookupError(Exception):
    """Raised when restaurant data for a location cannot be fetched."""


class RestaurantLookup(Protocol):
    def lookup(self, location: str) -> list[RestaurantOption]:
        ...


_STUB_RESTAURANTS: tuple[RestaurantOption, ...] = (
    RestaurantOption(
        name="The Gourmet Spot",
        address="123 Main St",
        price=25.0,
        rating=4.5,
        distance_miles=0.5,
        reviews=["Great food!", "Excellent service!"],
    ),
    RestaurantOption(
        name="Budget Bites",
        address="456 Elm St",
        price=15.0,
        rating=4.0,
        distance_miles=0.8,
        reviews=["Affordable and tasty.", "Good value!"],
    ),
    RestaurantOption(
        name="Fancy Eats",
        address="789 Oak St",
        price=40.0,
        rating=4.7,
        distance_miles=1.2,
        reviews=["High-end experience.", "Loved the ambiance!"],
    ),
)


class StaticRestaurantLookup:
    """
    Placeholder data source: the same three restaurants for every location.

    Swap in a real implementation (Yelp, Google Places, ...) by providing
    another ``RestaurantLookup`` to the app.
    """

    def lookup(self, location: str) -> list[RestaurantOption]:
        return list(_STUB_RESTAURANTS)
