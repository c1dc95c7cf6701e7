"""Hotel router — catalog hotel metadata."""

from fastapi import APIRouter, Depends, HTTPException

from stayquote.dependencies import get_catalog
from stayquote.services.pricing.types import Catalog

router = APIRouter()


@router.get("")
async def list_hotels(catalog: Catalog = Depends(get_catalog)):
    return [h.model_dump() for h in catalog.hotels]


@router.get("/{hotel_id}")
async def get_hotel(hotel_id: int, catalog: Catalog = Depends(get_catalog)):
    hotel = catalog.hotel(hotel_id)
    if not hotel:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return hotel.model_dump()
