"""Concrete repository implementation for purchase prices backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from asset_tracking.application.interfaces import PriceRepository
from asset_tracking.domain.entities import Currency, MonetaryValue
from asset_tracking.domain.exceptions import StorageError
from asset_tracking.infrastructure.database.models import PriceModel


def price_to_entity(model: PriceModel) -> MonetaryValue:
    """Map ORM model → domain value object.

    Raises:
        StorageError: If the stored row is not a valid price (unknown
            currency code, negative amount).
    """
    try:
        return MonetaryValue(
            amount=model.amount,
            currency=Currency(model.currency),
            id=model.id,
        )
    except ValueError as exc:
        raise StorageError("price mapping", f"price {model.id}: {exc}") from exc


class SQLAlchemyPriceRepository(PriceRepository):
    """Implements the PriceRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, price: MonetaryValue) -> MonetaryValue:
        model = PriceModel(amount=price.amount, currency=price.currency.value)
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StorageError("price insert", exc) from exc
        return price_to_entity(model)

    async def get_by_id(self, price_id: int) -> MonetaryValue | None:
        try:
            model = await self._session.get(PriceModel, price_id)
        except SQLAlchemyError as exc:
            raise StorageError("price lookup", exc) from exc
        return price_to_entity(model) if model else None

    async def count(self) -> int:
        try:
            result = await self._session.execute(select(func.count(PriceModel.id)))
        except SQLAlchemyError as exc:
            raise StorageError("price count", exc) from exc
        return result.scalar_one()
