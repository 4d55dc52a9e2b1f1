"""Schemas for customer reports."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut

ReportType = Literal["Monthly", "Quarterly", "Yearly", "Custom"]
ReportStatus = Literal["In Progress", "Ready"]


class ReportCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ReportType
    report_date: datetime
    links_count: int | None = Field(
        default=None,
        ge=0,
        description="Omit to total links delivered by orders within the report period",
    )


class ReportUpdate(CamelModel):
    status: ReportStatus | None = None
    file_url: str | None = Field(default=None, max_length=2048)


class ReportOut(RecordOut):
    user_id: int
    name: str
    type: ReportType
    report_date: datetime
    links_count: int
    status: ReportStatus
    file_url: str | None = None


class ReportStats(CamelModel):
    total_reports: int
    links_this_year: int
    avg_monthly_links: int
