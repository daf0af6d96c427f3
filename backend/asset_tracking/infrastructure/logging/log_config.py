"""Logging setup for the asset-tracking service.

Every logger belongs to one category whose level comes from Settings:
SQL, outbound HTTP, uvicorn, exchange rates and the asset ledger. This lets
an operator turn on rate-refresh debugging without drowning in SQL output.

Call ``setup_logging()`` once from the FastAPI lifespan.
"""

import logging
import sys

from asset_tracking.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_rates": (
        "asset_tracking.infrastructure.rates",
        "asset_tracking.application.services.rate_store",
        "asset_tracking.application.services.currency_converter",
    ),
    "log_level_ledger": (
        "asset_tracking.application.services.asset_ledger",
        "asset_tracking.application.services.asset_report_service",
        "asset_tracking.application.services.sample_data_service",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root level, install a stderr handler if none exists, set category levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    levels = {}
    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field))
        levels[settings_field] = logging.getLevelName(level)
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug("Log levels: root=%s %s", settings.log_level, levels)


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO
