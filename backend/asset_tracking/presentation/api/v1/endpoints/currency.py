"""Exchange-rate endpoints — current table, forced refresh and conversion."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from asset_tracking.application.schemas import (
    ConversionResponse,
    RateTableResponse,
    RefreshResponse,
)
from asset_tracking.application.services import CurrencyConverter
from asset_tracking.domain.entities import BASE_CURRENCY, Currency
from asset_tracking.domain.exceptions import MissingRateError
from asset_tracking.infrastructure.dependencies import get_currency_converter

router = APIRouter(prefix="/currency", tags=["Currency"])


@router.get("/rates", response_model=RateTableResponse)
async def get_rates(
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> RateTableResponse:
    """Current rate table, refreshed first if it is missing or stale."""
    await converter.ensure_fresh(suppress_errors=True)
    table = converter.current_rates()
    return RateTableResponse(
        base=BASE_CURRENCY.value,
        rates=dict(table.rates) if table else {},
        last_updated=table.fetched_at if table else None,
        source=table.source if table else None,
        is_fallback=table.is_fallback if table else True,
        has_valid_rates=converter.has_valid_rates(),
    )


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_rates(
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> RefreshResponse:
    """Fetch new rates from the provider now, falling back on failure."""
    live = await converter.refresh(suppress_errors=False)
    return RefreshResponse(
        live_rates=live,
        last_updated=converter.last_update_time(),
        message=None if live else converter.last_error,
    )


@router.get("/convert", response_model=ConversionResponse)
async def convert(
    amount: Decimal = Query(..., ge=0),
    from_currency: Currency = Query(...),
    to_currency: Currency = Query(Currency.USD),
    converter: CurrencyConverter = Depends(get_currency_converter),
) -> ConversionResponse:
    """Convert an amount between two supported currencies."""
    try:
        result = await converter.convert(amount, from_currency, to_currency)
    except MissingRateError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ConversionResponse(
        amount=amount,
        from_currency=from_currency.value,
        to_currency=to_currency.value,
        result=result,
    )
