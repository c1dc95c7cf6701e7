"""Catalog loader — reads the rate, multiplier and hotel tables at startup."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from stayquote.services.pricing.types import Catalog, HotelInfo, MultiplierRow, RateRow

logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    """The catalog could not be read; the service must not start."""


def _read_rows(path: Path, model: type[BaseModel]) -> tuple:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise CatalogLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Invalid JSON in {path}: {e}") from e

    try:
        rows = TypeAdapter(list[model]).validate_python(raw)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid {model.__name__} data in {path}: {e}") from e
    return tuple(rows)


def load_catalog(rates_path: Path, multipliers_path: Path, hotels_path: Path) -> Catalog:
    catalog = Catalog(
        rates=_read_rows(rates_path, RateRow),
        multipliers=_read_rows(multipliers_path, MultiplierRow),
        hotels=_read_rows(hotels_path, HotelInfo),
    )
    logger.info(
        f"Catalog loaded: {len(catalog.rates)} rate rows, "
        f"{len(catalog.multipliers)} multiplier rows, {len(catalog.hotels)} hotels"
    )
    return catalog
