"""Rate table — nightly price lookups over one hotel's rate rows."""

from datetime import date

from stayquote.services.pricing.types import RateRow


class RateTable:
    """Rate rows of a single hotel, in catalog order."""

    def __init__(self, rows: list[RateRow]):
        self.rows = rows

    @classmethod
    def group_by_hotel(
        cls, rows: tuple[RateRow, ...], hotel_id: int | None = None
    ) -> dict[tuple[int, str], "RateTable"]:
        """Split rate rows per (hotel_id, hotel_name), keeping discovery order."""
        grouped: dict[tuple[int, str], list[RateRow]] = {}
        for row in rows:
            if hotel_id is not None and row.hotel_id != hotel_id:
                continue
            grouped.setdefault((row.hotel_id, row.hotel_name), []).append(row)
        return {key: cls(group) for key, group in grouped.items()}

    def offerings(self) -> list[tuple[str, str]]:
        """Distinct (room_type, rate_plan) pairs; first occurrence wins."""
        seen: dict[tuple[str, str], None] = {}
        for row in self.rows:
            seen.setdefault((row.room_type, row.rate_plan), None)
        return list(seen)

    def find_rate(self, room_type: str, rate_plan: str, night: date) -> RateRow | None:
        """First row for the pair whose inclusive period covers the night."""
        return next(
            (
                row
                for row in self.rows
                if row.room_type == room_type
                and row.rate_plan == rate_plan
                and row.covers(night)
            ),
            None,
        )
