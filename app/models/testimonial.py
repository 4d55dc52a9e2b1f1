"""ORM model for customer testimonials."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, TimestampMixin


class Testimonial(TimestampMixin, Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    quote = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False, default=5)
    photo = Column(String(2048), nullable=True)
    visible = Column(Boolean, nullable=False, default=True)
    status = Column(String(16), nullable=False, default="published")
    sort_order = Column(Integer, nullable=False, default=0)
