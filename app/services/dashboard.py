"""Activity feed entries and the dashboard aggregations built on orders."""

import math
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.clock import add_months, as_utc, month_start
from app.models.activity import Activity
from app.models.order import Order
from app.schemas.dashboard import ActivityItem, CampaignProgress, DashboardStats

ACTIVE_ORDER_STATUSES = ("Pending", "In Progress")
# Placeholder until per-link domain ratings are tracked.
AVG_DOMAIN_RATING = 54
TRAFFIC_VALUE_PER_LINK = 500
RECENT_ACTIVITY_LIMIT = 10
NEXT_REPORT_DAY = 15


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def record_activity(
    db: Session, user_id: int, action: str, now: datetime, site: str | None = None, **refs
) -> Activity:
    """Add a feed entry stamped with the request clock; the caller commits."""
    entry = Activity(user_id=user_id, action=action, site=site, created_at=now, **refs)
    db.add(entry)
    return entry


def links_delivered(db: Session, user_id: int, start: datetime | None = None, end: datetime | None = None) -> int:
    """Sum of links delivered by the user's orders placed in [start, end)."""
    stmt = select(func.coalesce(func.sum(Order.links_delivered), 0)).where(Order.user_id == user_id)
    if start is not None:
        stmt = stmt.where(Order.order_date >= start)
    if end is not None:
        stmt = stmt.where(Order.order_date < end)
    return int(db.scalar(stmt))


def dashboard_stats(db: Session, user_id: int, now: datetime) -> DashboardStats:
    total = links_delivered(db, user_id)
    active = db.scalar(
        select(func.count())
        .select_from(Order)
        .where(Order.user_id == user_id, Order.status.in_(ACTIVE_ORDER_STATUSES))
    )
    this_month = month_start(now)
    last_month = add_months(this_month, -1)
    this_month_links = links_delivered(db, user_id, start=this_month)
    last_month_links = links_delivered(db, user_id, start=last_month, end=this_month)
    if last_month_links > 0:
        change = f"+{this_month_links - last_month_links} this month"
    else:
        change = f"+{this_month_links} this month"

    return DashboardStats(
        total_backlinks=total,
        avg_domain_rating=AVG_DOMAIN_RATING,
        active_campaigns=active,
        est_traffic_value=f"${total * TRAFFIC_VALUE_PER_LINK / 1000:.1f}K",
        backlinks_change=change,
    )


def time_ago(moment: datetime, now: datetime) -> str:
    seconds = max(int((now - as_utc(moment)).total_seconds()), 0)
    if seconds < 60:
        return f"{seconds} seconds ago"
    for size, unit in ((86400, "day"), (3600, "hour"), (60, "minute")):
        if seconds >= size:
            count = seconds // size
            return f"{count} {unit if count == 1 else unit + 's'} ago"


def recent_activity(db: Session, user_id: int, now: datetime) -> list[ActivityItem]:
    entries = db.scalars(
        select(Activity)
        .where(Activity.user_id == user_id)
        .order_by(Activity.created_at.desc(), Activity.id.desc())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    return [
        ActivityItem(
            action=e.action,
            site=e.site or "",
            dr=e.domain_rating or None,
            time=time_ago(e.created_at, now),
        )
        for e in entries
    ]


def campaign_progress(db: Session, user_id: int, now: datetime) -> CampaignProgress | None:
    """Progress of the most recently placed active order, or None."""
    order = db.scalars(
        select(Order)
        .where(Order.user_id == user_id, Order.status.in_(ACTIVE_ORDER_STATUSES))
        .order_by(Order.order_date.desc(), Order.id.desc())
        .limit(1)
    ).first()
    if order is None:
        return None
    return CampaignProgress(
        package_name=order.package_name,
        links_delivered=order.links_delivered,
        links_total=order.links_total,
        progress=round_half_up(order.links_delivered / order.links_total * 100),
        remaining=order.links_total - order.links_delivered,
        next_report_date=now.replace(day=NEXT_REPORT_DAY),
    )
