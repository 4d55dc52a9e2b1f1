"""Request schemas for admin user management."""

from typing import Any

from pydantic import Field

from app.schemas.auth import Role
from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Admin-created account. Lifecycle flags may be set explicitly."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: Role = "user"
    is_verified: bool | None = None
    is_suspended: bool = False
    is_active: bool = True
    is_deleted: bool = False


class UserUpdate(CamelModel):
    """Partial update. password is accepted only to reject it with a clear message."""

    name: str | None = Field(default=None, min_length=2, max_length=50)
    email: str | None = None
    role: Role | None = None
    is_verified: bool | None = None
    is_suspended: bool | None = None
    is_active: bool | None = None
    is_deleted: bool | None = None
    password: Any = None
