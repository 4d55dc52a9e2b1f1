"""Schemas for team membership."""

from datetime import datetime
from typing import Literal

from pydantic import field_validator

from app.schemas.base import CamelModel, RecordOut, normalize_email

TeamRole = Literal["Owner", "Admin", "Editor", "Viewer"]
TeamStatus = Literal["Pending", "Active", "Inactive"]


class TeamInvite(CamelModel):
    email: str
    role: Literal["Admin", "Editor", "Viewer"]

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class TeamMemberOut(RecordOut):
    user_id: int
    email: str
    role: TeamRole
    status: TeamStatus
    invited_by: int | None = None
    invited_at: datetime
    joined_at: datetime | None = None


class TeamListItem(CamelModel):
    """Row of the team list; the account owner is listed first with no id or status."""

    id: int | None = None
    name: str
    email: str
    role: TeamRole
    initials: str
    status: TeamStatus | None = None
