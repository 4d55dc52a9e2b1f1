"""SQLAlchemy declarative Base and shared model configuration."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, declared_attr

from app.core.clock import utcnow

# JSONB on Postgres, plain JSON elsewhere (SQLite in tests).
JSONType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class TimestampMixin:
    """created_at / updated_at maintained on insert and update."""

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class SingletonMixin:
    """
    Configuration record of which at most one row per table is active.

    The partial unique index makes a second active row a constraint violation,
    so concurrent activations cannot leave two rows active.
    """

    is_active = Column(Boolean, nullable=False, default=False)

    @declared_attr.directive
    def __table_args__(cls) -> tuple:
        return (
            Index(
                f"uq_{cls.__tablename__}_single_active",
                "is_active",
                unique=True,
                postgresql_where=text("is_active"),
                sqlite_where=text("is_active"),
            ),
        )
