"""SQLAlchemy ORM base shared by the asset and price tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; ``Base.metadata.create_all`` builds the whole schema."""
