from .price_repository import SQLAlchemyPriceRepository
from .asset_repository import SQLAlchemyAssetRepository

__all__ = [
    "SQLAlchemyPriceRepository",
    "SQLAlchemyAssetRepository",
]
