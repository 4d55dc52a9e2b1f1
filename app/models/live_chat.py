"""ORM model for the live-chat widget configuration."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from app.models.base import Base, SingletonMixin, TimestampMixin


class LiveChat(SingletonMixin, TimestampMixin, Base):
    """display_on: all, homepage, dashboard or exclude-dashboard."""

    __tablename__ = "live_chats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    enabled = Column(Boolean, nullable=False, default=False)
    widget_script = Column(Text, nullable=False, default="")
    display_on = Column(String(32), nullable=False, default="all")
    auto_reply_message = Column(Text, nullable=False, default="")
    support_email = Column(String(255), nullable=False, default="")
