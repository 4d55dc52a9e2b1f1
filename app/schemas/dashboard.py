"""Schemas for dashboard aggregation views."""

from datetime import datetime

from app.schemas.base import CamelModel


class DashboardStats(CamelModel):
    total_backlinks: int
    avg_domain_rating: int
    active_campaigns: int
    est_traffic_value: str
    backlinks_change: str


class ActivityItem(CamelModel):
    action: str
    site: str
    dr: int | None = None
    time: str


class CampaignProgress(CamelModel):
    package_name: str
    links_delivered: int
    links_total: int
    progress: int
    remaining: int
    next_report_date: datetime
