"""ORM model for team members invited onto a customer account."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from app.core.clock import utcnow
from app.models.base import Base, TimestampMixin


class TeamMember(TimestampMixin, Base):
    __tablename__ = "team_members"
    __table_args__ = (UniqueConstraint("user_id", "email", name="uq_team_members_user_email"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    role = Column(String(16), nullable=False)
    status = Column(String(16), nullable=False, default="Pending")
    invited_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    invited_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    joined_at = Column(DateTime(timezone=True), nullable=True)
