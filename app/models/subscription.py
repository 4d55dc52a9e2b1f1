"""ORM model for plan subscriptions."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.clock import utcnow
from app.models.base import Base, TimestampMixin


class Subscription(TimestampMixin, Base):
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    plan_name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    billing_cycle = Column(String(16), nullable=False)
    status = Column(String(16), nullable=False, default="Active", index=True)
    start_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    next_billing_date = Column(DateTime(timezone=True), nullable=False)
    cancelled_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", lazy="joined")
