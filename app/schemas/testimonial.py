"""Schemas for testimonials."""

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut
from app.schemas.blog import PublishStatus


class TestimonialCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    quote: str = Field(..., min_length=1)
    rating: int = Field(default=5, ge=1, le=5)
    photo: str | None = None
    visible: bool = True
    status: PublishStatus = "published"
    sort_order: int = 0


class TestimonialUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    role: str | None = None
    company: str | None = None
    quote: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    photo: str | None = None
    visible: bool | None = None
    status: PublishStatus | None = None
    sort_order: int | None = None


class TestimonialOut(RecordOut):
    name: str
    role: str
    company: str
    quote: str
    rating: int
    photo: str | None = None
    visible: bool
    status: PublishStatus
    sort_order: int
