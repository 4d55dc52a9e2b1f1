"""ORM model for the public pricing table."""

from sqlalchemy import Boolean, Column, Float, Integer, String

from app.models.base import Base, JSONType, TimestampMixin


class PricingPlan(TimestampMixin, Base):
    __tablename__ = "pricing_plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)
    links_per_month = Column(String(64), nullable=False)
    features = Column(JSONType, nullable=False, default=list)
    popular = Column(Boolean, nullable=False, default=False)
    enabled = Column(Boolean, nullable=False, default=True)
    button_text = Column(String(64), nullable=False, default="Get Started")
    button_link = Column(String(2048), nullable=False, default="/contact")
    sort_order = Column(Integer, nullable=False, default=0)
