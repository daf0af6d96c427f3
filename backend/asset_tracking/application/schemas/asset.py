"""Pydantic DTOs (Data Transfer Objects) for the Asset feature."""

from datetime import date, datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from asset_tracking.domain.entities import Asset, AssetKind, Currency, MonetaryValue, OfficeLocation
from asset_tracking.domain.lifecycle import LifecycleStatus


class PriceSchema(BaseModel):
    """A purchase price in local currency."""

    amount: Decimal = Field(..., ge=0, decimal_places=2, examples=["999.99"])
    currency: Currency = Field(..., examples=["USD"])


class AssetCreate(BaseModel):
    """Schema for creating a new asset."""

    kind: AssetKind = Field(..., examples=["Computer"])
    brand: str = Field(..., min_length=1, max_length=50, examples=["Apple"])
    model: str = Field(..., min_length=1, max_length=100, examples=["MacBook Air"])
    purchase_date: date = Field(..., examples=["2023-02-14"])
    purchase_price: PriceSchema
    office_location: OfficeLocation = Field(..., examples=["USA"])

    @field_validator("brand", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("purchase_date")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > datetime.now(timezone.utc).date():
            raise ValueError("purchase date cannot be in the future")
        return value

    def to_entity(self, asset_id: int | None = None) -> Asset:
        return Asset(
            id=asset_id,
            kind=self.kind,
            brand=self.brand,
            model=self.model,
            purchase_date=self.purchase_date,
            purchase_price=MonetaryValue(
                amount=self.purchase_price.amount,
                currency=self.purchase_price.currency,
            ),
            office_location=self.office_location.value,
        )


class AssetUpdate(AssetCreate):
    """Schema for updating an asset — a full replacement of every field."""


class LifecycleResponse(BaseModel):
    status: LifecycleStatus
    remaining_days: int
    end_of_life_date: date


class AssetResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    kind: AssetKind
    brand: str
    model: str
    purchase_date: date
    purchase_price: PriceSchema
    office_location: str
    lifecycle: LifecycleResponse
    usd_value: Decimal | None
