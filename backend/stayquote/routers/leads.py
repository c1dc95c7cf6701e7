"""Lead router — reservation call-back requests for a quoted offering."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from stayquote.database import get_db
from stayquote.schemas.lead import LeadCreate, LeadResponse
from stayquote.services.lead_service import lead_service

router = APIRouter()


@router.post("", response_model=LeadResponse, status_code=201)
async def create_lead(req: LeadCreate, db: AsyncSession = Depends(get_db)):
    return await lead_service.create_lead(db, req)


@router.get("/{reservation_no}", response_model=LeadResponse)
async def get_lead(reservation_no: str, db: AsyncSession = Depends(get_db)):
    lead = await lead_service.get_lead(db, reservation_no)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead
