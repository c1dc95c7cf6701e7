from pathlib import Path

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Catalog (read once at startup)
    catalog_dir: Path = BACKEND_DIR / "data"
    rates_file: str = "rates.json"
    multipliers_file: str = "multipliers.json"
    hotels_file: str = "hotels.json"

    # Pricing engine
    default_child_age_ceiling: float = 11
    max_rooms: int | None = None  # None = exhaustive search over any room count

    # Presentation
    label_language: str = "tr"
    thousands_separator: str = "."

    # Lead intake
    database_url: str = "sqlite+aiosqlite:///./stayquote.db"

    # Logging
    log_level: str = "INFO"
    log_dir: Path = BACKEND_DIR / "logs"

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def rates_path(self) -> Path:
        return self.catalog_dir / self.rates_file

    @property
    def multipliers_path(self) -> Path:
        return self.catalog_dir / self.multipliers_file

    @property
    def hotels_path(self) -> Path:
        return self.catalog_dir / self.hotels_file

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
