"""ORM model for package orders placed by customers."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String

from app.core.clock import utcnow
from app.models.base import Base, TimestampMixin


class Order(TimestampMixin, Base):
    """
    Purchased link-building or guest-posting package.

    order_number: ORD-<year>-<3 digits>, unique.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    order_number = Column(String(32), nullable=False, unique=True)
    package_name = Column(String(255), nullable=False)
    package_type = Column(String(32), nullable=False)
    status = Column(String(16), nullable=False, default="Pending", index=True)
    links_delivered = Column(Integer, nullable=False, default=0)
    links_total = Column(Integer, nullable=False)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    order_date = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    completed_date = Column(DateTime(timezone=True), nullable=True)
