from .currency import BASE_CURRENCY, Currency, MonetaryValue, quantize_amount
from .asset import Asset, AssetKind, OfficeLocation
from .rate_table import FALLBACK_RATES, RateTable, fallback_table

__all__ = [
    "BASE_CURRENCY",
    "Currency",
    "MonetaryValue",
    "quantize_amount",
    "Asset",
    "AssetKind",
    "OfficeLocation",
    "FALLBACK_RATES",
    "RateTable",
    "fallback_table",
]
