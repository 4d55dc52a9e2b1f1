"""Schemas for case studies."""

from typing import Any

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut
from app.schemas.blog import PublishStatus


class CaseStudyResult(CamelModel):
    label: str
    before: str
    after: str
    change: str


class CaseStudyTestimonial(CamelModel):
    quote: str
    author: str
    role: str


class CaseStudyCreate(CamelModel):
    """name defaults to client, trafficGrowth to trafficIncrease, description to overview."""

    slug: str = Field(..., min_length=1, max_length=255)
    client: str = Field(..., min_length=1, max_length=255)
    name: str | None = None
    industry: str = Field(..., min_length=1, max_length=255)
    logo: str | None = None
    traffic_increase: str = Field(..., min_length=1, max_length=32)
    traffic_growth: str | None = None
    traffic_before: str | None = None
    traffic_after: str | None = None
    links_built: int = Field(default=0, ge=0)
    dr_before: int | None = Field(default=None, ge=0, le=100)
    dr_after: int | None = Field(default=None, ge=0, le=100)
    keywords_top10: int | None = Field(default=None, ge=0)
    duration: str | None = None
    featured_image: str | None = None
    overview: str | None = None
    description: str | None = None
    challenges: list[str] = Field(default_factory=list)
    strategy: list[str] = Field(default_factory=list)
    execution: list[str] = Field(default_factory=list)
    results: list[CaseStudyResult] = Field(default_factory=list)
    testimonial: CaseStudyTestimonial | None = None
    status: PublishStatus = "published"
    sort_order: int = 0


class CaseStudyUpdate(CamelModel):
    slug: str | None = Field(default=None, min_length=1, max_length=255)
    client: str | None = None
    name: str | None = None
    industry: str | None = None
    logo: str | None = None
    traffic_increase: str | None = None
    traffic_growth: str | None = None
    traffic_before: str | None = None
    traffic_after: str | None = None
    links_built: int | None = Field(default=None, ge=0)
    dr_before: int | None = Field(default=None, ge=0, le=100)
    dr_after: int | None = Field(default=None, ge=0, le=100)
    keywords_top10: int | None = Field(default=None, ge=0)
    duration: str | None = None
    featured_image: str | None = None
    overview: str | None = None
    description: str | None = None
    challenges: list[str] | None = None
    strategy: list[str] | None = None
    execution: list[str] | None = None
    results: list[CaseStudyResult] | None = None
    testimonial: CaseStudyTestimonial | None = None
    status: PublishStatus | None = None
    sort_order: int | None = None


class CaseStudyOut(RecordOut):
    slug: str
    client: str
    name: str | None = None
    industry: str
    logo: str | None = None
    traffic_increase: str
    traffic_growth: str | None = None
    traffic_before: str | None = None
    traffic_after: str | None = None
    links_built: int
    dr_before: int | None = None
    dr_after: int | None = None
    keywords_top10: int | None = None
    duration: str | None = None
    featured_image: str | None = None
    overview: str | None = None
    description: str | None = None
    challenges: list[str]
    strategy: list[str]
    execution: list[str]
    results: list[dict[str, Any]]
    testimonial: dict[str, Any] | None = None
    status: PublishStatus
    sort_order: int
