"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracking.config import get_settings
from asset_tracking.application.services import (
    AssetLedger,
    AssetReportService,
    CurrencyConverter,
    SampleDataService,
)
from asset_tracking.infrastructure.database.session import get_db_session
from asset_tracking.infrastructure.database.repositories import (
    SQLAlchemyAssetRepository,
    SQLAlchemyPriceRepository,
)
from asset_tracking.infrastructure.rates import ECBRateSource


@lru_cache
def get_currency_converter() -> CurrencyConverter:
    """Process-wide converter — one shared rate cache for every request."""
    settings = get_settings()
    source = ECBRateSource(
        url=settings.rates_url,
        timeout=settings.rates_timeout_seconds,
    )
    return CurrencyConverter(
        source,
        max_age=timedelta(hours=settings.rates_max_age_hours),
    )


def build_asset_ledger(session: AsyncSession) -> AssetLedger:
    """Ledger bound to one session, so price and asset writes share a transaction."""
    return AssetLedger(
        assets=SQLAlchemyAssetRepository(session),
        prices=SQLAlchemyPriceRepository(session),
    )


async def get_asset_ledger(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AssetLedger, None]:
    """Provides an AssetLedger with its repositories wired up."""
    yield build_asset_ledger(session)


async def get_asset_report_service(
    ledger: AssetLedger = Depends(get_asset_ledger),
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> AsyncGenerator[AssetReportService, None]:
    """Provides an AssetReportService over the request's ledger and the shared converter."""
    yield AssetReportService(ledger, converter)


async def get_sample_data_service(
    ledger: AssetLedger = Depends(get_asset_ledger),
) -> AsyncGenerator[SampleDataService, None]:
    yield SampleDataService(ledger)
