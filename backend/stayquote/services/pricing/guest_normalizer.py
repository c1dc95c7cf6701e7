"""Guest normalizer — counts children above a hotel's age ceiling as adults."""

from collections.abc import Sequence
from decimal import Decimal

from stayquote.services.pricing.multiplier_table import DEFAULT_CHILD_AGE_CEILING, MultiplierTable
from stayquote.services.pricing.types import GuestGroup


class GuestNormalizer:
    def __init__(
        self,
        multipliers: MultiplierTable,
        default_ceiling: Decimal | float = DEFAULT_CHILD_AGE_CEILING,
    ):
        self.multipliers = multipliers
        self.default_ceiling = Decimal(str(default_ceiling))

    def child_age_ceiling(self, hotel_id: int) -> Decimal:
        """Oldest age still priced as a child at this hotel."""
        ceiling = self.multipliers.child_age_ceiling(hotel_id)
        return self.default_ceiling if ceiling is None else ceiling

    def normalize(
        self,
        hotel_id: int,
        adults: int,
        children: int,
        child_ages: Sequence[float],
    ) -> GuestGroup:
        """Move children older than the hotel's ceiling into the adult count.

        The remaining ages keep their original order.
        """
        ceiling = self.child_age_ceiling(hotel_id)
        kept = tuple(age for age in child_ages[:children] if age <= ceiling)
        promoted = children - len(kept)
        return GuestGroup(adults=adults + promoted, children=len(kept), child_ages=kept)
