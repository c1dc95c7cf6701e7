import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class LeadCreate(BaseModel):
    full_name: str = Field(min_length=1, max_length=200)
    phone: str = Field(min_length=1, max_length=30)
    hotel_name: str
    room_type: str
    rate_plan: str
    room_count: int = Field(default=1, ge=1)
    total_price: str
    date_range: str | None = None
    party_summary: str | None = None
    nights_days: str | None = None


class LeadResponse(BaseModel):
    id: uuid.UUID
    reservation_no: str
    full_name: str
    phone: str
    hotel_name: str
    room_type: str
    rate_plan: str
    room_count: int
    total_price: str
    date_range: str | None
    party_summary: str | None
    nights_days: str | None
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}
