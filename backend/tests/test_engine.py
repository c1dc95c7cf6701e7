"""
Quote engine: end-to-end pipeline over synthetic catalogs.
"""
from datetime import date
from decimal import Decimal

import pytest

from conftest import multiplier, rate
from stayquote.services.pricing.aggregator import InvalidStayRange
from stayquote.services.pricing.engine import QuoteEngine, QuoteRequest
from stayquote.services.pricing.types import Catalog


def request(adults=2, children=0, ages=(), checkin="2026-07-10", checkout="2026-07-13", hotel_id=None):
    return QuoteRequest(
        checkin=date.fromisoformat(checkin),
        checkout=date.fromisoformat(checkout),
        adults=adults,
        children=children,
        child_ages=tuple(ages),
        hotel_id=hotel_id,
    )


def offerings_by_hotel(quotes):
    return {
        q.hotel_id: [(o.room_type, o.rate_plan, o.room_count, o.final_price) for o in q.offerings]
        for q in quotes
    }


class TestQuote:

    def test_two_adults_all_hotels(self, family_catalog):
        quotes = QuoteEngine().quote(family_catalog, request())
        assert offerings_by_hotel(quotes) == {
            1: [
                ("Standard", "All Inclusive", 1, Decimal("3000")),
                ("Standard", "Bed & Breakfast", 1, Decimal("1800")),
                ("Suite", "All Inclusive", 1, Decimal("7500")),
            ],
            2: [("Deluxe", "Half Board", 1, Decimal("4500"))],
        }
        assert quotes[0].location == "Bodrum"

    def test_split_party(self, family_catalog):
        quotes = QuoteEngine().quote(family_catalog, request(adults=3, children=1, ages=[5]))
        by_hotel = offerings_by_hotel(quotes)
        assert by_hotel[1] == [
            ("Standard", "All Inclusive", 2, Decimal("4500")),
            ("Standard", "Bed & Breakfast", 2, Decimal("2700")),
        ]
        assert by_hotel[2] == []
        assert quotes[0].offerings[0].total_factor == Decimal("1.5")

    def test_hotel_filter(self, family_catalog):
        quotes = QuoteEngine().quote(family_catalog, request(hotel_id=2))
        assert [q.hotel_id for q in quotes] == [2]

    def test_older_child_priced_as_adult(self):
        catalog = Catalog(
            rates=(rate(price="1000"),),
            multipliers=(multiplier(3, "1.3"), multiplier(2, "1.0", ["0-11"])),
        )
        quotes = QuoteEngine().quote(catalog, request(adults=2, children=1, ages=[14]))
        offering = quotes[0].offerings[0]
        assert offering.room_count == 1
        assert offering.allocation.rooms[0].guests.adults == 3
        assert offering.allocation.rooms[0].guests.children == 0
        assert offering.final_price == Decimal("3900")

    def test_uncovered_night_drops_offering(self):
        catalog = Catalog(
            rates=(
                rate(start="2026-07-10", end="2026-07-10", price="1000"),
                rate(start="2026-07-12", end="2026-07-12", price="1000"),
                rate(rate_plan="Room Only", price="800"),
            ),
            multipliers=(multiplier(2, "1.0"),),
        )
        quotes = QuoteEngine().quote(catalog, request())
        assert [o.rate_plan for o in quotes[0].offerings] == ["Room Only"]

    def test_duplicate_pairs_quoted_once(self):
        catalog = Catalog(
            rates=(rate(price="1000"), rate(price="9999")),
            multipliers=(multiplier(2, "1.0"),),
        )
        quotes = QuoteEngine().quote(catalog, request())
        assert [o.final_price for o in quotes[0].offerings] == [Decimal("3000")]

    def test_hotel_without_metadata_has_empty_location(self):
        catalog = Catalog(rates=(rate(hotel_id=7),), multipliers=(multiplier(2, "1.0", hotel_id=7),))
        assert QuoteEngine().quote(catalog, request())[0].location == ""

    def test_idempotent(self, family_catalog):
        engine = QuoteEngine()
        req = request(adults=3, children=1, ages=[5])
        first = [q.to_dict() for q in engine.quote(family_catalog, req)]
        second = [q.to_dict() for q in engine.quote(family_catalog, req)]
        assert first == second

    def test_rejects_checkout_before_checkin(self, family_catalog):
        with pytest.raises(InvalidStayRange):
            QuoteEngine().quote(family_catalog, request(checkin="2026-07-13", checkout="2026-07-10"))

    def test_room_cap_from_configuration(self):
        catalog = Catalog(rates=(rate(price="100"),), multipliers=(multiplier(1, "0.7"),))
        assert QuoteEngine(max_rooms=3).quote(catalog, request(adults=4))[0].offerings == []
        assert QuoteEngine().quote(catalog, request(adults=4))[0].offerings[0].room_count == 4
