"""Schemas for homepage sections."""

from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut


class HomepageSectionCreate(CamelModel):
    section_id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    enabled: bool = True
    sort_order: int = 0
    content: dict[str, Any] = Field(default_factory=dict)


class HomepageSectionUpdate(CamelModel):
    section_id: str | None = Field(default=None, min_length=1, max_length=100)
    name: str | None = None
    enabled: bool | None = None
    sort_order: int | None = None
    content: dict[str, Any] | None = None


class HomepageSectionOut(RecordOut):
    section_id: str
    name: str
    enabled: bool
    sort_order: int
    content: dict[str, Any]
