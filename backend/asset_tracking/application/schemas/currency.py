"""Pydantic DTOs for exchange rates and conversions."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class RateTableResponse(BaseModel):
    base: str
    rates: dict[str, Decimal]
    last_updated: datetime | None
    source: str | None
    is_fallback: bool
    has_valid_rates: bool


class RefreshResponse(BaseModel):
    live_rates: bool
    last_updated: datetime | None
    message: str | None = None


class ConversionResponse(BaseModel):
    amount: Decimal
    from_currency: str
    to_currency: str
    result: Decimal
