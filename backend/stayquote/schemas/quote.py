from datetime import date

from pydantic import BaseModel, Field, model_validator


class QuoteRequestBody(BaseModel):
    checkin: date
    checkout: date
    adults: int = Field(ge=0)
    children: int = Field(default=0, ge=0)
    child_ages: list[int] = Field(default_factory=list, alias="childAges")
    hotel_id: int | None = Field(default=None, alias="hotelId")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _check_party(self) -> "QuoteRequestBody":
        if len(self.child_ages) != self.children:
            raise ValueError(
                f"childAges has {len(self.child_ages)} entries but children is {self.children}"
            )
        if any(age < 0 for age in self.child_ages):
            raise ValueError("child ages must be non-negative")
        if self.adults + self.children == 0:
            raise ValueError("party must have at least one guest")
        return self


class PricedRoomResponse(BaseModel):
    adults: int
    children: int
    child_ages: list[float]
    factor: float


class OfferingResponse(BaseModel):
    room_type: str
    rate_plan: str
    room_count: int
    total_factor: float
    nightly_sum: float
    final_price: int
    currency: str
    rooms: list[PricedRoomResponse]


class HotelQuoteResponse(BaseModel):
    hotel_id: int
    hotel_name: str
    location: str
    offerings: list[OfferingResponse]


class QuoteDetailsResponse(BaseModel):
    nights: int
    hotels: list[HotelQuoteResponse]
