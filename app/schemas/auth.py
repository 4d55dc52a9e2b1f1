"""Request/response schemas for auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel

Role = Literal["admin", "moderator", "user"]


class RegisterRequest(CamelModel):
    """Self-registration. Fields are optional here so missing values get the documented 400 message."""

    name: str | None = Field(default=None, description="Display name (2-50 chars)")
    email: str | None = Field(default=None, description="Email address (unique)")
    password: str | None = Field(default=None, description="Password (6-128 chars)")


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password")


class RefreshRequest(CamelModel):
    refresh_token: str | None = Field(default=None, description="Refresh token from login or register")


class CurrentUser(CamelModel):
    """Public projection of a user: everything except the password hash."""

    id: int
    name: str
    email: str
    role: Role
    is_verified: bool
    is_suspended: bool
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


class AuthResult(CamelModel):
    """Payload returned by register, login and refresh."""

    user: CurrentUser
    access_token: str
    refresh_token: str
