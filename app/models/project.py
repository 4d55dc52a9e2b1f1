"""ORM model for customer link-building projects."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.core.clock import utcnow
from app.models.base import Base, TimestampMixin


class Project(TimestampMixin, Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    domain = Column(String(255), nullable=False)
    status = Column(String(16), nullable=False, default="Active")
    links_built = Column(Integer, nullable=False, default=0)
    target_links = Column(Integer, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_activity = Column(DateTime(timezone=True), nullable=False, default=utcnow)
