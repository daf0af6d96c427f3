from .asset_repository import AssetRepository
from .price_repository import PriceRepository
from .rate_source import RateSource

__all__ = [
    "AssetRepository",
    "PriceRepository",
    "RateSource",
]
