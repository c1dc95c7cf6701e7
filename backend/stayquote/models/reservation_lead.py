"""Reservation lead — a guest's request to be called back about an offering."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from stayquote.database import Base


class ReservationLead(Base):
    __tablename__ = "reservation_leads"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    reservation_no: Mapped[str] = mapped_column(String(36), nullable=False, unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    hotel_name: Mapped[str] = mapped_column(String(200), nullable=False)
    room_type: Mapped[str] = mapped_column(String(100), nullable=False)
    rate_plan: Mapped[str] = mapped_column(String(100), nullable=False)
    room_count: Mapped[int] = mapped_column(Integer, default=1)
    total_price: Mapped[str] = mapped_column(String(50), nullable=False)  # as displayed
    date_range: Mapped[str | None] = mapped_column(String(100))
    party_summary: Mapped[str | None] = mapped_column(String(200))
    nights_days: Mapped[str | None] = mapped_column(String(50))
    status: Mapped[str] = mapped_column(String(20), default="not_called")  # not_called | called | booked | lost
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
