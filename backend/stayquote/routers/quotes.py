"""Quote router — prices a party across hotels, room types and rate plans."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from stayquote.dependencies import get_catalog, get_quote_engine, get_quote_formatter
from stayquote.schemas.quote import QuoteDetailsResponse, QuoteRequestBody
from stayquote.services.pricing.aggregator import InvalidStayRange
from stayquote.services.pricing.engine import QuoteEngine, QuoteRequest
from stayquote.services.pricing.types import Catalog, HotelQuote
from stayquote.services.quote_formatter import QuoteFormatter

logger = logging.getLogger(__name__)

router = APIRouter()


def _run_quote(req: QuoteRequestBody, catalog: Catalog, engine: QuoteEngine) -> list[HotelQuote]:
    if req.checkin >= req.checkout:
        raise HTTPException(status_code=400, detail="checkin must be before checkout")

    try:
        return engine.quote(
            catalog,
            QuoteRequest(
                checkin=req.checkin,
                checkout=req.checkout,
                adults=req.adults,
                children=req.children,
                child_ages=tuple(req.child_ages),
                hotel_id=req.hotel_id,
            ),
        )
    except InvalidStayRange as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/quote")
def quote(
    req: QuoteRequestBody,
    catalog: Catalog = Depends(get_catalog),
    engine: QuoteEngine = Depends(get_quote_engine),
    formatter: QuoteFormatter = Depends(get_quote_formatter),
) -> dict[str, str]:
    """Quote a stay; returns the flat display map."""
    quotes = _run_quote(req, catalog, engine)
    return formatter.flatten(
        quotes,
        checkin=req.checkin,
        checkout=req.checkout,
        adults=req.adults,
        children=req.children,
        child_ages=req.child_ages,
    )


@router.post("/quote/details", response_model=QuoteDetailsResponse)
def quote_details(
    req: QuoteRequestBody,
    catalog: Catalog = Depends(get_catalog),
    engine: QuoteEngine = Depends(get_quote_engine),
):
    """Quote a stay; returns per-hotel offerings with their room splits."""
    quotes = _run_quote(req, catalog, engine)
    return {
        "nights": (req.checkout - req.checkin).days,
        "hotels": [q.to_dict() for q in quotes if q.offerings],
    }
