"""ORM model recording which content collections have received their defaults."""

from sqlalchemy import Column, DateTime, String

from app.core.clock import utcnow
from app.models.base import Base


class SeedMarker(Base):
    """
    One row per seeded collection. The primary key makes claiming a collection
    an atomic insert-if-absent: a second concurrent seeder fails on insert.
    """

    __tablename__ = "seed_markers"

    collection = Column(String(100), primary_key=True)
    seeded_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
