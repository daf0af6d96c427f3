"""Health check endpoint — reports app status and which exchange rates are loaded."""

from fastapi import APIRouter, Depends

from asset_tracking.application.services import CurrencyConverter
from asset_tracking.config import get_settings
from asset_tracking.infrastructure.dependencies import get_currency_converter

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> dict:
    """Never triggers a rate fetch; ``rates`` is live, fallback or not_loaded."""
    settings = get_settings()
    table = converter.current_rates()
    if table is None:
        rates = "not_loaded"
    else:
        rates = "fallback" if table.is_fallback else "live"
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "rates": rates,
        "rates_updated": table.fetched_at.isoformat() if table else None,
    }
