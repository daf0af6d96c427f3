"""Abstract repository interface (port) for Asset persistence."""

from abc import ABC, abstractmethod

from asset_tracking.domain.entities import Asset, AssetKind


class AssetRepository(ABC):
    """Port for asset persistence — implemented in the infrastructure layer.

    Implementations raise ``StorageError`` when the store rejects an
    operation, and must delete an asset's purchase price together with it.
    """

    @abstractmethod
    async def get_by_id(self, asset_id: int) -> Asset | None:
        """Retrieve a single asset, populated with its purchase price."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Asset]:
        """Retrieve every asset, each populated with its purchase price."""
        ...

    @abstractmethod
    async def get_sorted(self) -> list[Asset]:
        """Retrieve every asset ordered by office location, then purchase date."""
        ...

    @abstractmethod
    async def create(self, asset: Asset) -> Asset:
        """Persist an asset whose purchase price has already been stored."""
        ...

    @abstractmethod
    async def update(self, asset: Asset) -> bool:
        """Replace the stored record with the same id. False if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, asset_id: int) -> bool:
        """Delete an asset and its owned price. False if it does not exist."""
        ...

    @abstractmethod
    async def count_by_kind(self, kind: AssetKind) -> int:
        ...

    @abstractmethod
    async def count_by_office(self) -> dict[str, int]:
        ...
