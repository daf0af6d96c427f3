"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asset_tracking.config import get_settings
from asset_tracking.application.services import CurrencyConverter, SampleDataService
from asset_tracking.domain.entities import FALLBACK_RATES
from asset_tracking.infrastructure.database import Base, engine
from asset_tracking.infrastructure.database.session import async_session_factory
from asset_tracking.infrastructure.dependencies import build_asset_ledger, get_currency_converter
from asset_tracking.infrastructure.logging.log_config import setup_logging
from asset_tracking.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _warm_rate_cache(converter: CurrencyConverter) -> None:
    """Load exchange rates once and tell the operator which rates are in use."""
    live = await converter.ensure_fresh(suppress_errors=True)
    if live and converter.has_valid_rates():
        logger.info(
            "Currency rates updated from the European Central Bank (last updated %s)",
            f"{converter.last_update_time():%Y-%m-%d %H:%M}",
        )
        return

    logger.warning("Using fallback currency rates: ECB rates unavailable")
    for code, rate in FALLBACK_RATES.items():
        if code != "EUR":
            logger.warning("  1 EUR = %s %s", f"{rate:.2f}", code)


async def _seed_sample_data(include_end_of_life: bool) -> None:
    """Add demonstration assets when the inventory is empty.

    Idempotent — safe to call on every startup.
    """
    async with async_session_factory() as session:
        service = SampleDataService(build_asset_ledger(session))
        added = await service.add_sample_data()
        if added and include_end_of_life:
            await service.add_end_of_life_test_data()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — create tables, warm the rate cache, seed demo data."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Load exchange rates (falls back to approximate rates offline)
    if settings.rates_refresh_on_startup:
        await _warm_rate_cache(get_currency_converter())

    # 3. Optional demo data
    if settings.seed_sample_data:
        try:
            await _seed_sample_data(settings.seed_end_of_life_data)
        except Exception:
            logger.exception("Failed to seed sample data — continuing without it")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "asset_tracking.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
