"""Pricing engine — room allocation and stay pricing over a read-only catalog.

Modules:
    types               Catalog rows, guest groups, allocations and offerings
    rate_table          Nightly rate lookups per hotel
    multiplier_table    Pricing-factor lookups with positional child age ranges
    guest_normalizer    Reclassifies children above a hotel's age ceiling
    partitions          Exhaustive room split enumeration
    allocation          Cheapest valid room split selection
    aggregator          Stay night expansion and price summation
    engine              Per-hotel quote orchestration

Pipeline (per hotel, per room type / rate plan):
    GuestNormalizer → AllocationSelector → QuoteAggregator → accept or drop
"""

from stayquote.services.pricing.engine import QuoteEngine, QuoteRequest
from stayquote.services.pricing.types import (
    Catalog,
    GuestGroup,
    HotelInfo,
    HotelQuote,
    MultiplierRow,
    Offering,
    RateRow,
    RoomAllocation,
)

__all__ = [
    "Catalog",
    "GuestGroup",
    "HotelInfo",
    "HotelQuote",
    "MultiplierRow",
    "Offering",
    "QuoteEngine",
    "QuoteRequest",
    "RateRow",
    "RoomAllocation",
]
