"""ORM model for the per-user activity feed shown on the dashboard."""

from sqlalchemy import Column, ForeignKey, Integer, String

from app.models.base import Base, TimestampMixin


class Activity(TimestampMixin, Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    action = Column(String(255), nullable=False)
    site = Column(String(255), nullable=True)
    domain_rating = Column(Integer, nullable=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="SET NULL"), nullable=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True)
