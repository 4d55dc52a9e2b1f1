"""ORM model for customer support tickets."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.core.clock import utcnow
from app.models.base import Base, TimestampMixin


class SupportTicket(TimestampMixin, Base):
    __tablename__ = "support_tickets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    ticket_number = Column(String(16), nullable=False, unique=True)
    subject = Column(String(200), nullable=False)
    category = Column(String(16), nullable=False)
    priority = Column(String(16), nullable=False, default="Medium")
    status = Column(String(16), nullable=False, default="Open")
    message = Column(Text, nullable=False)
    last_update = Column(DateTime(timezone=True), nullable=False, default=utcnow)
