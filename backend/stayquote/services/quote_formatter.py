"""Quote formatter — flattens structured hotel quotes into the display map.

Keys follow ``<field>_<hotel>`` and ``<field>_<hotel>_<letter>``; hotels are
numbered from 1 and offerings lettered a, b, c... in discovery order. Hotels
without any offering are left out.
"""

import logging
from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from string import ascii_lowercase

from stayquote.data.labels import DEFAULT_LANGUAGE, MONTH_NAMES, TERMS, WEEKDAY_NAMES
from stayquote.services.pricing.types import HotelQuote

logger = logging.getLogger(__name__)


class QuoteFormatter:
    def __init__(self, language: str = DEFAULT_LANGUAGE, thousands_separator: str = "."):
        if language not in TERMS:
            logger.warning(f"Unknown label language {language!r}, using {DEFAULT_LANGUAGE!r}")
            language = DEFAULT_LANGUAGE
        self.language = language
        self.thousands_separator = thousands_separator

    def date_label(self, d: date) -> str:
        """e.g. "24 Temmuz Perşembe"."""
        month = MONTH_NAMES[self.language][d.month - 1]
        weekday = WEEKDAY_NAMES[self.language][d.weekday()]
        label = f"{d.day} {month} {weekday}"
        return label[:1].upper() + label[1:]

    def nights_days_label(self, nights: int) -> str:
        return TERMS[self.language]["nights_days"].format(nights=nights, days=nights + 1)

    def party_label(self, adults: int, children: int, child_ages: Sequence[int]) -> str:
        terms = TERMS[self.language]
        label = terms["adults"].format(count=adults)
        if children > 0:
            ages = ", ".join(str(a) for a in child_ages)
            label += " " + terms["children"].format(count=children, ages=ages)
        return label

    def price_label(self, amount: Decimal, currency: str) -> str:
        """Whole currency units with grouped thousands, e.g. "12.345 TL"."""
        grouped = f"{int(amount):,}".replace(",", self.thousands_separator)
        return f"{grouped} {currency}".rstrip()

    def flatten(
        self,
        quotes: list[HotelQuote],
        checkin: date,
        checkout: date,
        adults: int,
        children: int,
        child_ages: Sequence[int],
    ) -> dict[str, str]:
        response = {
            "checkin": self.date_label(checkin),
            "checkout": self.date_label(checkout),
            "nightsDays": self.nights_days_label((checkout - checkin).days),
            "party": self.party_label(adults, children, child_ages),
        }

        hotel_index = 0
        for quote in quotes:
            if not quote.offerings:
                continue
            hotel_index += 1
            response[f"hotelName_{hotel_index}"] = quote.hotel_name
            response[f"location_{hotel_index}"] = quote.location

            for offering, letter in zip(quote.offerings, _letters()):
                suffix = f"{hotel_index}_{letter}"
                response[f"roomTypeAndCount_{suffix}"] = f"{offering.room_count} {offering.room_type}"
                response[f"ratePlan_{suffix}"] = offering.rate_plan
                response[f"finalPrice_{suffix}"] = self.price_label(
                    offering.final_price, offering.currency
                )

        return response


def _letters():
    """a..z, then aa, ab, ... for hotels with many offerings."""
    yield from ascii_lowercase
    for first in ascii_lowercase:
        for second in ascii_lowercase:
            yield first + second

