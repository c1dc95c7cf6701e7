from fastapi import Request

from stayquote.services.pricing.engine import QuoteEngine
from stayquote.services.pricing.types import Catalog
from stayquote.services.quote_formatter import QuoteFormatter


def get_catalog(request: Request) -> Catalog:
    """The catalog loaded at startup."""
    return request.app.state.catalog


def get_quote_engine(request: Request) -> QuoteEngine:
    return request.app.state.quote_engine


def get_quote_formatter(request: Request) -> QuoteFormatter:
    return request.app.state.quote_formatter
