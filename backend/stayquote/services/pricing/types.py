"""Catalog rows and per-request pricing records."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from stayquote.services.pricing.multiplier_table import MultiplierTable


class RateRow(BaseModel):
    """Nightly price of a room type / rate plan over an inclusive period."""

    model_config = ConfigDict(frozen=True)

    hotel_id: int
    hotel_name: str
    room_type: str
    period_start: date
    period_end: date
    rate_plan: str
    nightly_price: Decimal
    currency: str = "TL"

    @model_validator(mode="after")
    def _check_period(self) -> "RateRow":
        if self.period_start > self.period_end:
            raise ValueError(
                f"period_start {self.period_start} is after period_end {self.period_end}"
            )
        return self

    def covers(self, night: date) -> bool:
        return self.period_start <= night <= self.period_end


class MultiplierRow(BaseModel):
    """Pricing factor for one room composition.

    Child age ranges are kept as raw strings ("0-6,99"); they are parsed by
    the multiplier table so a malformed range only disables its own row.
    """

    model_config = ConfigDict(frozen=True)

    hotel_id: int
    hotel_name: str
    room_type: str
    adult_count: int = Field(ge=0)
    child_count: int = Field(default=0, ge=0, le=3)
    first_child_age_range: str | None = None
    second_child_age_range: str | None = None
    third_child_age_range: str | None = None
    factor: Decimal = Field(gt=0)

    @property
    def age_ranges(self) -> list[str]:
        """Non-empty age ranges in positional order."""
        ranges = [
            self.first_child_age_range,
            self.second_child_age_range,
            self.third_child_age_range,
        ]
        return [r for r in ranges if r]


class HotelInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    hotel_id: int
    hotel_name: str
    location: str = ""


@dataclass(frozen=True)
class Catalog:
    """Read-only tables loaded once at startup and shared by all requests."""

    rates: tuple[RateRow, ...] = ()
    multipliers: tuple[MultiplierRow, ...] = ()
    hotels: tuple[HotelInfo, ...] = ()
    multiplier_table: "MultiplierTable" = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Parsed once per catalog; malformed rows are reported here
        from stayquote.services.pricing.multiplier_table import MultiplierTable

        object.__setattr__(self, "multiplier_table", MultiplierTable(self.multipliers))

    def hotel(self, hotel_id: int) -> HotelInfo | None:
        return next((h for h in self.hotels if h.hotel_id == hotel_id), None)


@dataclass(frozen=True)
class GuestGroup:
    """A party, or one room's share of it."""

    adults: int
    children: int = 0
    child_ages: tuple[float, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.adults == 0 and self.children == 0


# A room split: per-room groups whose ages concatenate to the party's ages.
Partition = tuple[GuestGroup, ...]


@dataclass(frozen=True)
class PricedRoom:
    guests: GuestGroup
    factor: Decimal


@dataclass(frozen=True)
class RoomAllocation:
    rooms: tuple[PricedRoom, ...]

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def total_factor(self) -> Decimal:
        return sum((r.factor for r in self.rooms), Decimal("0"))


@dataclass(frozen=True)
class Offering:
    room_type: str
    rate_plan: str
    allocation: RoomAllocation
    nightly_sum: Decimal
    final_price: Decimal
    currency: str

    @property
    def room_count(self) -> int:
        return self.allocation.room_count

    @property
    def total_factor(self) -> Decimal:
        return self.allocation.total_factor

    def to_dict(self) -> dict:
        return {
            "room_type": self.room_type,
            "rate_plan": self.rate_plan,
            "room_count": self.room_count,
            "total_factor": float(self.total_factor),
            "nightly_sum": float(self.nightly_sum),
            "final_price": int(self.final_price),
            "currency": self.currency,
            "rooms": [
                {
                    "adults": r.guests.adults,
                    "children": r.guests.children,
                    "child_ages": list(r.guests.child_ages),
                    "factor": float(r.factor),
                }
                for r in self.allocation.rooms
            ],
        }


@dataclass(frozen=True)
class HotelQuote:
    hotel_id: int
    hotel_name: str
    location: str
    offerings: list[Offering] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "hotel_id": self.hotel_id,
            "hotel_name": self.hotel_name,
            "location": self.location,
            "offerings": [o.to_dict() for o in self.offerings],
        }
