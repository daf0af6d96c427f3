from .asset import AssetCreate, AssetUpdate, AssetResponse, LifecycleResponse, PriceSchema
from .currency import ConversionResponse, RateTableResponse, RefreshResponse
from .report import InventorySummaryResponse, SampleDataResponse

__all__ = [
    "AssetCreate",
    "AssetUpdate",
    "AssetResponse",
    "LifecycleResponse",
    "PriceSchema",
    "ConversionResponse",
    "RateTableResponse",
    "RefreshResponse",
    "InventorySummaryResponse",
    "SampleDataResponse",
]
