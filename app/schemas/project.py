"""Schemas for customer projects."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import AfterValidator, Field

from app.schemas.base import CamelModel, RecordOut

ProjectStatus = Literal["Active", "Paused", "Completed"]


def _clean_domain(value: str) -> str:
    domain = value.strip().lower()
    if not domain:
        raise ValueError("domain must be non-empty")
    return domain


Domain = Annotated[str, Field(min_length=1, max_length=255), AfterValidator(_clean_domain)]


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    domain: Domain
    target_links: int = Field(..., ge=1)


class ProjectUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    domain: Domain | None = None
    status: ProjectStatus | None = None
    target_links: int | None = Field(default=None, ge=1)


class ProjectOut(RecordOut):
    user_id: int
    name: str
    domain: str
    status: ProjectStatus
    links_built: int
    target_links: int
    start_date: datetime
    last_activity: datetime


class ProjectStats(CamelModel):
    total_projects: int
    active_projects: int
    total_links_built: int
    avg_progress: int
