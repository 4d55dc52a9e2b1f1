"""Schemas for the services catalogue."""

from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut
from app.schemas.blog import PublishStatus


class ServicePackage(CamelModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    description: str | None = None
    features: list[str] | None = None


class ServiceCreate(CamelModel):
    service_id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    icon: str = "Package"
    status: PublishStatus = "published"
    packages: list[ServicePackage] = Field(default_factory=list)
    sort_order: int = 0


class ServiceUpdate(CamelModel):
    service_id: str | None = Field(default=None, min_length=1, max_length=100)
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    icon: str | None = None
    status: PublishStatus | None = None
    packages: list[ServicePackage] | None = None
    sort_order: int | None = None


class ServiceOut(RecordOut):
    service_id: str
    name: str
    slug: str
    description: str
    icon: str
    status: PublishStatus
    packages: list[dict[str, Any]]
    sort_order: int
