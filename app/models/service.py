"""ORM model for the services catalogue."""

from sqlalchemy import Column, Integer, String, Text

from app.models.base import Base, JSONType, TimestampMixin


class Service(TimestampMixin, Base):
    """
    Service offering. service_id is the stable key used by the site
    (e.g. 'link-building'); packages is a list of {name, price, description?, features?}.
    """

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    service_id = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(64), nullable=False, default="Package")
    status = Column(String(16), nullable=False, default="published")
    packages = Column(JSONType, nullable=False, default=list)
    sort_order = Column(Integer, nullable=False, default=0)
