import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stayquote.config import Settings, settings

# ─── Logging setup (file + console) ───
settings.log_dir.mkdir(parents=True, exist_ok=True)

_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            settings.log_dir / "stayquote.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("aiosqlite").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from stayquote.database import create_engine_and_factory, init_db
from stayquote.routers import hotels, leads, quotes
from stayquote.services.catalog_loader import load_catalog
from stayquote.services.pricing.engine import QuoteEngine
from stayquote.services.pricing.types import Catalog
from stayquote.services.quote_formatter import QuoteFormatter

logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None, catalog: Catalog | None = None) -> FastAPI:
    """Build the API. A catalog passed in replaces the one read from disk."""
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup — a catalog that cannot be loaded stops the service here
        if catalog is None:
            app.state.catalog = load_catalog(
                config.rates_path, config.multipliers_path, config.hotels_path
            )
        else:
            app.state.catalog = catalog

        app.state.quote_engine = QuoteEngine(
            max_rooms=config.max_rooms,
            default_child_age_ceiling=config.default_child_age_ceiling,
        )
        app.state.quote_formatter = QuoteFormatter(
            language=config.label_language,
            thousands_separator=config.thousands_separator,
        )

        engine, session_factory = create_engine_and_factory(config.database_url)
        await init_db(engine)
        app.state.session_factory = session_factory
        logger.info("Lead store ready")

        yield

        # Shutdown
        await engine.dispose()
        logger.info("Lead store closed")

    app = FastAPI(
        title="StayQuote",
        description="Room allocation and stay pricing",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(quotes.router, prefix="/api", tags=["quotes"])
    app.include_router(hotels.router, prefix="/api/hotels", tags=["hotels"])
    app.include_router(leads.router, prefix="/api/leads", tags=["leads"])

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok", "service": "stayquote"}

    return app


app = create_app()
