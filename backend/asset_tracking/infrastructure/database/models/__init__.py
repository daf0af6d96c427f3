from .price import PriceModel
from .asset import AssetModel

__all__ = [
    "PriceModel",
    "AssetModel",
]
