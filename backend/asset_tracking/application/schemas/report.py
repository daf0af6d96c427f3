"""Pydantic DTOs for inventory reports and demo data."""

from decimal import Decimal

from pydantic import BaseModel


class InventorySummaryResponse(BaseModel):
    total_assets: int
    counts_by_kind: dict[str, int]
    counts_by_office: dict[str, int]
    near_end_of_life: int
    approaching_end_of_life: int
    expired: int
    total_value_usd: Decimal
    using_live_rates: bool

    model_config = {"from_attributes": True}


class SampleDataResponse(BaseModel):
    added: int
    end_of_life_added: int = 0
