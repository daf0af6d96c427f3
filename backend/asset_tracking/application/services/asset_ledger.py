"""Application service (use case) keeping assets and their purchase prices consistent."""

import logging

from asset_tracking.application.interfaces import AssetRepository, PriceRepository
from asset_tracking.domain.entities import Asset, AssetKind
from asset_tracking.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class AssetLedger:
    """Orchestrates asset CRUD. Depends on the repository ports (DI).

    No method raises on storage failure: the failure turns into None, False
    or an empty result, is logged, and is kept in ``last_error`` so the
    caller can show it.

    ``create`` writes the price first to obtain its id and then the asset
    that references it. The two writes are not atomic: if the asset write
    fails the stored price is left behind unless the storage adapter rolls
    both back together.
    """

    def __init__(self, assets: AssetRepository, prices: PriceRepository):
        self._assets = assets
        self._prices = prices
        self.last_error: str | None = None

    def _fail(self, action: str, exc: Exception) -> None:
        self.last_error = f"Error {action}: {exc}"
        logger.error(self.last_error)

    async def create(self, asset: Asset) -> int | None:
        self.last_error = None
        try:
            price = await self._prices.create(asset.purchase_price)
        except StorageError as exc:
            self._fail("adding asset price", exc)
            return None

        try:
            created = await self._assets.create(asset.with_price(price))
        except StorageError as exc:
            logger.warning("Price %s was stored but its asset was not", price.id)
            self._fail("adding asset", exc)
            return None

        logger.info("Added %s %s %s (id=%s)", created.kind.value, created.brand, created.model, created.id)
        return created.id

    async def get_by_id(self, asset_id: int) -> Asset | None:
        self.last_error = None
        try:
            return await self._assets.get_by_id(asset_id)
        except StorageError as exc:
            self._fail("retrieving asset", exc)
            return None

    async def get_all(self) -> list[Asset]:
        self.last_error = None
        try:
            return await self._assets.get_all()
        except StorageError as exc:
            self._fail("retrieving assets", exc)
            return []

    async def get_sorted(self) -> list[Asset]:
        """Assets ordered by office location, then purchase date."""
        self.last_error = None
        try:
            return await self._assets.get_sorted()
        except StorageError as exc:
            self._fail("retrieving sorted assets", exc)
            return []

    async def update(self, asset: Asset) -> bool:
        """Replace the stored asset (and its price) with ``asset``."""
        self.last_error = None
        if asset.id is None:
            self.last_error = "Error updating asset: asset has no id"
            return False
        try:
            return await self._assets.update(asset)
        except StorageError as exc:
            self._fail("updating asset", exc)
            return False

    async def delete(self, asset_id: int) -> bool:
        self.last_error = None
        try:
            return await self._assets.delete(asset_id)
        except StorageError as exc:
            self._fail("deleting asset", exc)
            return False

    async def count_by_kind(self, kind: AssetKind) -> int:
        self.last_error = None
        try:
            return await self._assets.count_by_kind(kind)
        except StorageError as exc:
            self._fail("getting asset count", exc)
            return 0

    async def group_counts_by_office(self) -> dict[str, int]:
        self.last_error = None
        try:
            return await self._assets.count_by_office()
        except StorageError as exc:
            self._fail("getting assets by office", exc)
            return {}
