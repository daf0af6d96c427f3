"""Abstract repository interface (port) for purchase-price persistence."""

from abc import ABC, abstractmethod

from asset_tracking.domain.entities import MonetaryValue


class PriceRepository(ABC):
    """Port for monetary value records — implemented in the infrastructure layer.

    Prices have no lifetime of their own once attached to an asset; the
    ledger only writes them ahead of the owning asset.
    """

    @abstractmethod
    async def create(self, price: MonetaryValue) -> MonetaryValue:
        """Persist a price and return it carrying its storage id.

        Raises:
            StorageError: If the store rejects the write.
        """
        ...

    @abstractmethod
    async def get_by_id(self, price_id: int) -> MonetaryValue | None:
        """Retrieve a single price by id."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Number of stored prices, attached or not."""
        ...
