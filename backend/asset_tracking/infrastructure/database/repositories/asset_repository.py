"""Concrete repository implementation for Asset backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracking.application.interfaces import AssetRepository
from asset_tracking.domain.entities import Asset, AssetKind
from asset_tracking.domain.exceptions import StorageError
from asset_tracking.infrastructure.database.models import AssetModel, PriceModel
from asset_tracking.infrastructure.database.repositories.price_repository import (
    price_to_entity,
)


class SQLAlchemyAssetRepository(AssetRepository):
    """Implements the AssetRepository port using SQLAlchemy async sessions.

    Every SQLAlchemy failure is re-raised as StorageError.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AssetModel) -> Asset:
        """Map ORM model → domain entity; invalid stored rows raise StorageError."""
        try:
            return Asset(
                id=model.id,
                kind=AssetKind(model.asset_type),
                brand=model.brand,
                model=model.model,
                purchase_date=model.purchase_date,
                purchase_price=price_to_entity(model.purchase_price),
                office_location=model.office_location,
            )
        except ValueError as exc:
            raise StorageError("asset mapping", f"asset {model.id}: {exc}") from exc

    async def get_by_id(self, asset_id: int) -> Asset | None:
        try:
            model = await self._session.get(AssetModel, asset_id)
        except SQLAlchemyError as exc:
            raise StorageError("asset lookup", exc) from exc
        return self._to_entity(model) if model else None

    async def _list(self, *order_by) -> list[Asset]:
        stmt = select(AssetModel).order_by(*order_by)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("asset query", exc) from exc
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[Asset]:
        return await self._list(AssetModel.id)

    async def get_sorted(self) -> list[Asset]:
        return await self._list(
            AssetModel.office_location.asc(),
            AssetModel.purchase_date.asc(),
            AssetModel.id.asc(),
        )

    async def create(self, asset: Asset) -> Asset:
        if asset.purchase_price.id is None:
            raise StorageError("asset insert", "purchase price has not been stored")
        try:
            price = await self._session.get(PriceModel, asset.purchase_price.id)
            if price is None:
                raise StorageError(
                    "asset insert",
                    f"purchase price {asset.purchase_price.id} does not exist",
                )
            model = AssetModel(
                asset_type=asset.kind.value,
                brand=asset.brand,
                model=asset.model,
                purchase_date=asset.purchase_date,
                office_location=asset.office_location,
                purchase_price=price,
            )
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("asset insert", exc) from exc
        return self._to_entity(model)

    async def update(self, asset: Asset) -> bool:
        try:
            model = await self._session.get(AssetModel, asset.id)
            if model is None:
                return False
            model.asset_type = asset.kind.value
            model.brand = asset.brand
            model.model = asset.model
            model.purchase_date = asset.purchase_date
            model.office_location = asset.office_location

            current = price_to_entity(model.purchase_price)
            if current != asset.purchase_price:
                # The old price row becomes an orphan and is deleted.
                model.purchase_price = PriceModel(
                    amount=asset.purchase_price.amount,
                    currency=asset.purchase_price.currency.value,
                )
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("asset update", exc) from exc
        return True

    async def delete(self, asset_id: int) -> bool:
        try:
            model = await self._session.get(AssetModel, asset_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("asset delete", exc) from exc
        return True

    async def count_by_kind(self, kind: AssetKind) -> int:
        stmt = select(func.count(AssetModel.id)).where(AssetModel.asset_type == kind.value)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("asset count", exc) from exc
        return result.scalar_one()

    async def count_by_office(self) -> dict[str, int]:
        stmt = (
            select(AssetModel.office_location, func.count(AssetModel.id))
            .group_by(AssetModel.office_location)
            .order_by(AssetModel.office_location)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("asset grouping", exc) from exc
        return {office: count for office, count in result.all()}
