"""ORM model for periodic customer reports."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.models.base import Base, TimestampMixin


class Report(TimestampMixin, Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(16), nullable=False)
    report_date = Column(DateTime(timezone=True), nullable=False)
    links_count = Column(Integer, nullable=False, default=0)
    status = Column(String(16), nullable=False, default="In Progress")
    file_url = Column(String(2048), nullable=True)
