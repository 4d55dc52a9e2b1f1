"""ORM model for configurable homepage sections."""

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base, JSONType, TimestampMixin


class HomepageSection(TimestampMixin, Base):
    """content is a free-form object whose shape depends on section_id."""

    __tablename__ = "homepage_sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_id = Column(String(100), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    sort_order = Column(Integer, nullable=False, default=0)
    content = Column(JSONType, nullable=False, default=dict)
