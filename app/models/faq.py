"""ORM model for FAQ entries."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, TimestampMixin


class FAQ(TimestampMixin, Base):
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question = Column(String(500), nullable=False)
    answer = Column(Text, nullable=False)
    visible = Column(Boolean, nullable=False, default=True)
    status = Column(String(16), nullable=False, default="published")
    sort_order = Column(Integer, nullable=False, default=0)
