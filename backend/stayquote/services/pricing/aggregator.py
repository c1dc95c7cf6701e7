"""Quote aggregator — sums nightly rates over a stay and applies the factor."""

import logging
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from stayquote.services.pricing.rate_table import RateTable

logger = logging.getLogger(__name__)


class InvalidStayRange(ValueError):
    pass


def stay_nights(checkin: date, checkout: date) -> list[date]:
    """One date per night, checkin inclusive, checkout exclusive."""
    if checkout <= checkin:
        raise InvalidStayRange(f"checkout {checkout} must be after checkin {checkin}")
    return [checkin + timedelta(days=i) for i in range((checkout - checkin).days)]


class PricedStay:
    """Nightly sum and final price of one room type / rate plan."""

    __slots__ = ("nightly_sum", "final_price", "currency")

    def __init__(self, nightly_sum: Decimal, final_price: Decimal, currency: str):
        self.nightly_sum = nightly_sum
        self.final_price = final_price
        self.currency = currency


class QuoteAggregator:
    def aggregate(
        self,
        rates: RateTable,
        room_type: str,
        rate_plan: str,
        total_factor: Decimal,
        nights: list[date],
    ) -> PricedStay | None:
        """Price every night or none.

        A single uncovered night voids the stay, as do covering rows that
        disagree on currency.
        """
        nightly_sum = Decimal("0")
        currency = None
        for night in nights:
            row = rates.find_rate(room_type, rate_plan, night)
            if row is None:
                return None
            if currency is not None and row.currency != currency:
                logger.debug(
                    f"{room_type} / {rate_plan} mixes {currency} and {row.currency} "
                    f"over the stay, not priced"
                )
                return None
            nightly_sum += row.nightly_price
            currency = row.currency

        final_price = (nightly_sum * total_factor).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return PricedStay(nightly_sum=nightly_sum, final_price=final_price, currency=currency or "")
