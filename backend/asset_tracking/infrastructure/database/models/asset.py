"""SQLAlchemy ORM model for tracked assets."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from asset_tracking.infrastructure.database.base import Base
from asset_tracking.infrastructure.database.models.price import PriceModel


class AssetModel(Base):
    """ORM model — maps to the 'assets' table.

    Computers and phones share one table; ``asset_type`` is the
    discriminator. The purchase price belongs to exactly one asset and is
    deleted with it (and when it is replaced on update).
    """

    __tablename__ = "assets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    asset_type: Mapped[str] = mapped_column(String(20), nullable=False)
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    office_location: Mapped[str] = mapped_column(String(50), nullable=False)
    purchase_price_id: Mapped[int] = mapped_column(
        ForeignKey("prices.id"), nullable=False
    )

    purchase_price: Mapped[PriceModel] = relationship(
        cascade="all, delete-orphan",
        single_parent=True,
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_assets_office_purchase", "office_location", "purchase_date"),
        Index("ix_assets_type", "asset_type"),
    )

    def __repr__(self) -> str:
        return (
            f"<AssetModel(id={self.id}, type='{self.asset_type}', "
            f"brand='{self.brand}', model='{self.model}')>"
        )
