"""ORM model for application users (auth, RBAC and account lifecycle)."""

from sqlalchemy import Boolean, Column, Integer, String

from app.models.base import Base, TimestampMixin

ROLES = ("admin", "moderator", "user")


class User(TimestampMixin, Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'admin', 'moderator' or 'user'. The four lifecycle flags gate login and
    every authenticated request; rows are soft-deleted, never removed.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    is_verified = Column(Boolean, nullable=False, default=False)
    is_suspended = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
