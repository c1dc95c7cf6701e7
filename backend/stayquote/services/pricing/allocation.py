"""Allocation selector — picks the cheapest room split that prices fully."""

import logging

from stayquote.services.pricing.multiplier_table import MultiplierTable
from stayquote.services.pricing.partitions import enumerate_partitions
from stayquote.services.pricing.types import GuestGroup, PricedRoom, RoomAllocation

logger = logging.getLogger(__name__)


class AllocationSelector:
    """Matches room splits against the multiplier table."""

    def __init__(self, multipliers: MultiplierTable, max_rooms: int | None = None):
        self.multipliers = multipliers
        self.max_rooms = max_rooms

    def _price_rooms(
        self, hotel_id: int, room_type: str, rooms: tuple[GuestGroup, ...]
    ) -> RoomAllocation | None:
        priced = []
        for room in rooms:
            factor = self.multipliers.find_factor(
                hotel_id, room_type, room.adults, room.children, room.child_ages
            )
            if factor is None:
                return None
            priced.append(PricedRoom(guests=room, factor=factor))
        return RoomAllocation(rooms=tuple(priced))

    def select_best(
        self, hotel_id: int, room_type: str, party: GuestGroup
    ) -> RoomAllocation | None:
        """Single room if the whole party matches, else the cheapest split.

        A single-room match is returned even when a split would cost less.
        Among splits, ties keep the one found first.
        """
        if party.is_empty:
            return None

        single = self._price_rooms(hotel_id, room_type, (party,))
        if single is not None:
            return single

        best: RoomAllocation | None = None
        for partition in enumerate_partitions(party, self.max_rooms):
            if len(partition) == 1:
                continue
            allocation = self._price_rooms(hotel_id, room_type, partition)
            if allocation is None:
                continue
            if best is None or allocation.total_factor < best.total_factor:
                best = allocation

        if best is None:
            logger.debug(f"No room split priced for hotel {hotel_id} / {room_type} / {party}")
        return best
