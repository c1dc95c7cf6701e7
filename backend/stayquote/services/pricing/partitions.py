"""Partition generator — every way to split a party over rooms.

Each room takes at least one adult and a contiguous run of the remaining
child ages, so concatenating the rooms' ages in order always reproduces the
party's age sequence. Parties are small in practice, which keeps the
exhaustive search tractable.
"""

from collections.abc import Iterator

from stayquote.services.pricing.types import GuestGroup, Partition


def enumerate_partitions(
    party: GuestGroup, max_rooms: int | None = None
) -> Iterator[Partition]:
    """Yield room splits in search order.

    Adults per room are tried from 1 upwards, then children per room from 0
    upwards. ``max_rooms`` limits how many rooms a split may use; ``None``
    explores every room count.
    """
    if party.is_empty:
        return

    def backtrack(
        rooms: list[GuestGroup], adults: int, children: int, ages: tuple
    ) -> Iterator[Partition]:
        if adults == 0 and children == 0:
            yield tuple(rooms)
            return
        if max_rooms is not None and len(rooms) >= max_rooms:
            return

        for a in range(1, adults + 1):
            for c in range(children + 1):
                rooms.append(GuestGroup(adults=a, children=c, child_ages=ages[:c]))
                yield from backtrack(rooms, adults - a, children - c, ages[c:])
                rooms.pop()

    yield from backtrack([], party.adults, party.children, tuple(party.child_ages))
