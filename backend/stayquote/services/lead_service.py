"""Lead service — stores reservation leads raised from a shown quote."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stayquote.models.reservation_lead import ReservationLead
from stayquote.schemas.lead import LeadCreate

logger = logging.getLogger(__name__)


class LeadService:
    async def create_lead(self, db: AsyncSession, data: LeadCreate) -> ReservationLead:
        lead = ReservationLead(reservation_no=str(uuid.uuid4()), **data.model_dump())
        db.add(lead)
        await db.commit()
        await db.refresh(lead)
        logger.info(f"Lead {lead.reservation_no} stored for {lead.hotel_name} / {lead.room_type}")
        return lead

    async def get_lead(self, db: AsyncSession, reservation_no: str) -> ReservationLead | None:
        result = await db.execute(
            select(ReservationLead).where(ReservationLead.reservation_no == reservation_no)
        )
        return result.scalar_one_or_none()


lead_service = LeadService()
