"""Schemas for blog posts."""

from typing import Any, Literal

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut

PublishStatus = Literal["published", "draft"]
ISO_DATE = r"^\d{4}-\d{2}-\d{2}$"


class BlogAuthor(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)


class BlogPostCreate(CamelModel):
    """
    New post. date defaults to today, metaTitle / metaDescription fall back to
    title / excerpt, and posts start as drafts unless a status is given.
    """

    slug: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    excerpt: str = Field(..., min_length=1)
    content: str = ""
    category: str = Field(..., min_length=1, max_length=100)
    author: BlogAuthor
    date: str | None = Field(default=None, pattern=ISO_DATE)
    read_time: str = Field(..., min_length=1, max_length=32)
    featured_image: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    featured: bool = False
    status: PublishStatus = "draft"
    views: int = Field(default=0, ge=0)
    sort_order: int = 0


class BlogPostUpdate(CamelModel):
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    excerpt: str | None = None
    content: str | None = None
    category: str | None = Field(default=None, min_length=1, max_length=100)
    author: BlogAuthor | None = None
    date: str | None = Field(default=None, pattern=ISO_DATE)
    read_time: str | None = None
    featured_image: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    featured: bool | None = None
    status: PublishStatus | None = None
    views: int | None = Field(default=None, ge=0)
    sort_order: int | None = None


class BlogPostOut(RecordOut):
    slug: str
    title: str
    excerpt: str
    content: str
    category: str
    author: dict[str, Any]
    date: str
    read_time: str
    featured_image: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    featured: bool
    status: PublishStatus
    views: int
    sort_order: int
