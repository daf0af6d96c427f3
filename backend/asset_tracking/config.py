import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Asset Tracking API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/asset_tracking.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Exchange rates (European Central Bank daily reference rates)
    rates_url: str = "https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"
    rates_timeout_seconds: float = 10.0
    rates_max_age_hours: int = 24
    rates_refresh_on_startup: bool = True

    # Demo data
    seed_sample_data: bool = False
    seed_end_of_life_data: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_rates: str = "INFO"            # rate source + currency converter
    log_level_ledger: str = "INFO"           # asset ledger + reports

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Ensure the directory of a file-based SQLite database exists."""
        prefix = "sqlite:///"
        if self.database_url.startswith(prefix) and ":memory:" not in self.database_url:
            db_path = Path(self.database_url[len(prefix):])
            try:
                db_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                _config_logger.warning("Could not create database directory %s: %s", db_path.parent, exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
