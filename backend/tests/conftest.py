"""
Shared fixtures: synthetic catalogs and an API client over them.
"""
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from stayquote.config import Settings
from stayquote.main import create_app
from stayquote.services.pricing.types import Catalog, HotelInfo, MultiplierRow, RateRow


def rate(hotel_id=1, room_type="Standard", rate_plan="All Inclusive",
         start="2026-07-01", end="2026-07-31", price="1000", hotel_name=None, currency="TL"):
    return RateRow(
        hotel_id=hotel_id,
        hotel_name=hotel_name or f"Hotel {hotel_id}",
        room_type=room_type,
        period_start=date.fromisoformat(start),
        period_end=date.fromisoformat(end),
        rate_plan=rate_plan,
        nightly_price=Decimal(price),
        currency=currency,
    )


def multiplier(adults, factor, ranges=(), hotel_id=1, room_type="Standard", children=None):
    ranges = list(ranges) + [None] * (3 - len(ranges))
    return MultiplierRow(
        hotel_id=hotel_id,
        hotel_name=f"Hotel {hotel_id}",
        room_type=room_type,
        adult_count=adults,
        child_count=children if children is not None else sum(1 for r in ranges if r),
        first_child_age_range=ranges[0],
        second_child_age_range=ranges[1],
        third_child_age_range=ranges[2],
        factor=Decimal(factor),
    )


@pytest.fixture
def family_catalog():
    """Two hotels; hotel 1 prices pairs, singles and one-child rooms."""
    return Catalog(
        rates=(
            rate(1, "Standard", "All Inclusive", "2026-07-01", "2026-07-31", "1000"),
            rate(1, "Standard", "Bed & Breakfast", "2026-07-01", "2026-07-31", "600"),
            rate(1, "Suite", "All Inclusive", "2026-07-01", "2026-07-31", "2500"),
            rate(2, "Deluxe", "Half Board", "2026-07-01", "2026-07-31", "1500"),
        ),
        multipliers=(
            multiplier(2, "1.0"),
            multiplier(1, "0.5", ["0-6,99"]),
            multiplier(1, "0.7"),
            multiplier(2, "1.0", room_type="Suite"),
            multiplier(2, "1.0", hotel_id=2, room_type="Deluxe"),
        ),
        hotels=(
            HotelInfo(hotel_id=1, hotel_name="Hotel 1", location="Bodrum"),
            HotelInfo(hotel_id=2, hotel_name="Hotel 2", location="Kemer"),
        ),
    )


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'leads.db'}",
        catalog_dir=tmp_path,
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def client(test_settings, family_catalog):
    app = create_app(test_settings, catalog=family_catalog)
    with TestClient(app) as test_client:
        yield test_client
