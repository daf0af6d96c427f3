"""SQLAlchemy ORM model for purchase prices."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from asset_tracking.infrastructure.database.base import Base


class PriceModel(Base):
    """ORM model — maps to the 'prices' table."""

    __tablename__ = "prices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    # Stored as the currency code, not the enum ordinal
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    def __repr__(self) -> str:
        return f"<PriceModel(id={self.id}, amount={self.amount}, currency='{self.currency}')>"
