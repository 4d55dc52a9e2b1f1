"""ORM model for monthly link-building packages."""

from sqlalchemy import Boolean, Column, Float, Integer, String

from app.models.base import Base, JSONType, TimestampMixin


class LinkBuildingPackage(TimestampMixin, Base):
    """price NULL is shown as 'Custom'."""

    __tablename__ = "link_building_packages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=True)
    links_per_month = Column(String(64), nullable=False)
    features = Column(JSONType, nullable=False, default=list)
    popular = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
