"""Schemas for FAQ entries."""

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut
from app.schemas.blog import PublishStatus


class FAQCreate(CamelModel):
    question: str = Field(..., min_length=1, max_length=500)
    answer: str = Field(..., min_length=1)
    visible: bool = True
    status: PublishStatus = "published"
    sort_order: int = 0


class FAQUpdate(CamelModel):
    question: str | None = Field(default=None, min_length=1, max_length=500)
    answer: str | None = Field(default=None, min_length=1)
    visible: bool | None = None
    status: PublishStatus | None = None
    sort_order: int | None = None


class FAQOut(RecordOut):
    question: str
    answer: str
    visible: bool
    status: PublishStatus
    sort_order: int
