from restaurant_chat.restaurants.lookup import StaticRestaurantLookup


def test_stub_returns_three_fixed_restaurants():
    restaurants = StaticRestaurantLookup().lookup("San Francisco, CA")

    assert [r.name for r in restaurants] == ["The Gourmet Spot", "Budget Bites", "Fancy Eats"]
    assert restaurants[0].address == "123 Main St"
    assert restaurants[1].price == 15.0
    assert restaurants[2].rating == 4.7
    assert restaurants[2].distance_miles == 1.2
    assert restaurants[2].reviews == ["High-end experience.", "Loved the ambiance!"]


def test_stub_ignores_location():
    lookup = StaticRestaurantLookup()

    assert lookup.lookup("Tokyo") == lookup.lookup("")


def test_stub_returns_fresh_list():
    lookup = StaticRestaurantLookup()
    first = lookup.lookup("Tokyo")
    first.clear()

    assert len(lookup.lookup("Tokyo")) == 3
