"""ORM model for guest-posting packages."""

from sqlalchemy import Boolean, Column, Float, Integer, String

from app.models.base import Base, JSONType, TimestampMixin


class GuestPostingPackage(TimestampMixin, Base):
    """price NULL is shown as 'Custom'."""

    __tablename__ = "guest_posting_packages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=True)
    description = Column(String(500), nullable=False, default="")
    features = Column(JSONType, nullable=False, default=list)
    icon = Column(String(64), nullable=False, default="FileText")
    popular = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
