"""Quote engine — runs the allocation and pricing pipeline for every hotel."""

import logging
from dataclasses import dataclass, field
from datetime import date

from stayquote.services.pricing.aggregator import QuoteAggregator, stay_nights
from stayquote.services.pricing.allocation import AllocationSelector
from stayquote.services.pricing.guest_normalizer import GuestNormalizer
from stayquote.services.pricing.rate_table import RateTable
from stayquote.services.pricing.types import (
    Catalog,
    HotelQuote,
    Offering,
    RoomAllocation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteRequest:
    checkin: date
    checkout: date
    adults: int
    children: int = 0
    child_ages: tuple[float, ...] = field(default_factory=tuple)
    hotel_id: int | None = None


class QuoteEngine:
    """Prices a party against a catalog. Holds no per-request state."""

    def __init__(
        self,
        max_rooms: int | None = None,
        default_child_age_ceiling: float = 11,
    ):
        self.max_rooms = max_rooms
        self.default_child_age_ceiling = default_child_age_ceiling
        self.aggregator = QuoteAggregator()

    def quote(self, catalog: Catalog, request: QuoteRequest) -> list[HotelQuote]:
        """Quote every hotel with rate rows (or just ``request.hotel_id``).

        Hotels come back in rate table order; each hotel's offerings keep the
        order in which their room type / rate plan pair first appears.
        Raises InvalidStayRange when checkout is not after checkin.
        """
        nights = stay_nights(request.checkin, request.checkout)
        multipliers = catalog.multiplier_table
        normalizer = GuestNormalizer(multipliers, self.default_child_age_ceiling)
        selector = AllocationSelector(multipliers, self.max_rooms)

        quotes = []
        for (hotel_id, hotel_name), rates in RateTable.group_by_hotel(
            catalog.rates, request.hotel_id
        ).items():
            party = normalizer.normalize(
                hotel_id, request.adults, request.children, request.child_ages
            )
            allocations: dict[str, RoomAllocation | None] = {}
            offerings = []

            for room_type, rate_plan in rates.offerings():
                if room_type not in allocations:
                    allocations[room_type] = selector.select_best(hotel_id, room_type, party)
                allocation = allocations[room_type]
                if allocation is None:
                    continue

                priced = self.aggregator.aggregate(
                    rates, room_type, rate_plan, allocation.total_factor, nights
                )
                if priced is None:
                    logger.debug(
                        f"Hotel {hotel_id}: {room_type} / {rate_plan} "
                        f"not priced for every night, dropped"
                    )
                    continue

                offerings.append(
                    Offering(
                        room_type=room_type,
                        rate_plan=rate_plan,
                        allocation=allocation,
                        nightly_sum=priced.nightly_sum,
                        final_price=priced.final_price,
                        currency=priced.currency,
                    )
                )

            info = catalog.hotel(hotel_id)
            quotes.append(
                HotelQuote(
                    hotel_id=hotel_id,
                    hotel_name=hotel_name,
                    location=info.location if info else "",
                    offerings=offerings,
                )
            )

        logger.info(
            f"Quoted {len(quotes)} hotels, "
            f"{sum(len(q.offerings) for q in quotes)} offerings for "
            f"{request.adults} adults / {request.children} children, {len(nights)} nights"
        )
        return quotes
