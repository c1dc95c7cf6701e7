"""Multiplier table — pricing factors per room composition.

A multiplier row applies to a room when hotel, room type, adult count and
child count match exactly and every child's age falls inside the age range
at the same position (first child → first range, and so on). Ranges are
inclusive and accept a comma as decimal mark, so "0-6,99" means 0 ≤ age ≤ 6.99.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from stayquote.services.pricing.types import MultiplierRow

logger = logging.getLogger(__name__)

DEFAULT_CHILD_AGE_CEILING = Decimal("11")


class MalformedAgeRange(ValueError):
    pass


def parse_age_range(raw: str) -> tuple[Decimal, Decimal]:
    """Parse "min-max" into inclusive decimal bounds."""
    parts = raw.split("-")
    if len(parts) != 2:
        raise MalformedAgeRange(f"expected 'min-max', got {raw!r}")
    try:
        low, high = (Decimal(p.strip().replace(",", ".")) for p in parts)
    except InvalidOperation:
        raise MalformedAgeRange(f"unparseable bound in {raw!r}") from None
    if not (low.is_finite() and high.is_finite()):
        raise MalformedAgeRange(f"non-finite bound in {raw!r}")
    return low, high


class _ParsedRow:
    __slots__ = ("row", "ranges")

    def __init__(self, row: MultiplierRow, ranges: list[tuple[Decimal, Decimal]] | None):
        self.row = row
        # None when any range failed to parse; such a row never matches
        self.ranges = ranges


class MultiplierTable:
    """Indexed, read-only view over the catalog's multiplier rows."""

    def __init__(self, rows: Sequence[MultiplierRow]):
        self._by_room: dict[tuple[int, str], list[_ParsedRow]] = {}
        self._ceilings: dict[int, Decimal] = {}

        for row in rows:
            ranges: list[tuple[Decimal, Decimal]] | None = []
            for raw in row.age_ranges:
                try:
                    ranges.append(parse_age_range(raw))
                except MalformedAgeRange as e:
                    logger.warning(
                        f"Multiplier row for hotel {row.hotel_id} / {row.room_type} "
                        f"has a malformed age range: {e}"
                    )
                    ranges = None
                    break

            if ranges is not None and len(ranges) != row.child_count:
                logger.warning(
                    f"Multiplier row for hotel {row.hotel_id} / {row.room_type} "
                    f"declares {row.child_count} children but {len(ranges)} age ranges"
                )

            self._by_room.setdefault((row.hotel_id, row.room_type), []).append(
                _ParsedRow(row, ranges)
            )
            self._track_ceiling(row)

        self._report_duplicates()

    def _track_ceiling(self, row: MultiplierRow) -> None:
        # Upper bounds are collected independently so one bad range does
        # not hide the others from the ceiling.
        for raw in row.age_ranges:
            try:
                _, high = parse_age_range(raw)
            except MalformedAgeRange:
                continue
            current = self._ceilings.get(row.hotel_id)
            if current is None or high > current:
                self._ceilings[row.hotel_id] = high

    def _report_duplicates(self) -> None:
        for (hotel_id, room_type), parsed in self._by_room.items():
            seen: set[tuple] = set()
            for p in parsed:
                if p.ranges is None:
                    continue
                key = (p.row.adult_count, p.row.child_count, tuple(p.ranges))
                if key in seen:
                    logger.warning(
                        f"Duplicate multiplier constraints for hotel {hotel_id} / "
                        f"{room_type}: {key}; the first row wins"
                    )
                seen.add(key)

    def child_age_ceiling(self, hotel_id: int) -> Decimal | None:
        """Highest upper bound across the hotel's age ranges, if it has any."""
        return self._ceilings.get(hotel_id)

    def find_row(
        self,
        hotel_id: int,
        room_type: str,
        adults: int,
        children: int,
        child_ages: Sequence[float],
    ) -> MultiplierRow | None:
        for p in self._by_room.get((hotel_id, room_type), ()):
            if p.ranges is None:
                continue
            if p.row.adult_count != adults or p.row.child_count != children:
                continue
            if len(p.ranges) != len(child_ages):
                continue
            if all(
                low <= Decimal(str(age)) <= high
                for age, (low, high) in zip(child_ages, p.ranges)
            ):
                return p.row
        return None

    def find_factor(
        self,
        hotel_id: int,
        room_type: str,
        adults: int,
        children: int,
        child_ages: Sequence[float],
    ) -> Decimal | None:
        row = self.find_row(hotel_id, room_type, adults, children, child_ages)
        return row.factor if row else None
