"""Domain entity for tracked hardware assets."""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum

from .currency import MonetaryValue


class AssetKind(str, Enum):
    """Discriminator for the kinds of hardware that are tracked."""

    COMPUTER = "Computer"
    PHONE = "Phone"


class OfficeLocation(str, Enum):
    """Offices an asset can be deployed to (validated at the input boundary)."""

    USA = "USA"
    GERMANY = "Germany"
    SWEDEN = "Sweden"


@dataclass
class Asset:
    """Core domain entity: a computer or phone owned by one office.

    The purchase price is owned exclusively by the asset. It is written
    before the asset itself and deleted together with it.
    """

    kind: AssetKind
    brand: str
    model: str
    purchase_date: date
    purchase_price: MonetaryValue
    office_location: str
    id: int | None = None

    def __post_init__(self) -> None:
        self.kind = AssetKind(self.kind)
        if not self.brand.strip():
            raise ValueError("Asset brand must not be empty")
        if not self.model.strip():
            raise ValueError("Asset model must not be empty")

    def with_price(self, price: MonetaryValue) -> "Asset":
        """Return a copy of the asset referencing ``price``."""
        return replace(self, purchase_price=price)
