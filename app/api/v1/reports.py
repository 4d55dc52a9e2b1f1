"""Customer reports, scoped to the authenticated owner."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import add_months, as_utc
from app.core.database import get_db
from app.models.report import Report
from app.schemas.base import ApiResponse, envelope
from app.schemas.report import ReportCreate, ReportOut, ReportStats, ReportUpdate
from app.services.crud import apply_updates, changes_of, get_or_404
from app.services.dashboard import links_delivered, round_half_up

router = APIRouter()

NOT_FOUND = "Report not found"

# Length of each report period in months. Custom reports have no period.
PERIOD_MONTHS = {"Monthly": 1, "Quarterly": 3, "Yearly": 12, "Custom": 0}


def report_window(report_type: str, start: datetime) -> tuple[datetime, datetime]:
    return start, add_months(start, PERIOD_MONTHS[report_type])


def report_stats(reports: list[Report]) -> ReportStats:
    total_links = sum(r.links_count for r in reports)
    return ReportStats(
        total_reports=len(reports),
        links_this_year=total_links,
        avg_monthly_links=round_half_up(total_links / len(reports)) if reports else 0,
    )


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_reports(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    reports = list(
        db.scalars(
            select(Report).where(Report.user_id == user.id).order_by(Report.report_date.desc(), Report.id.desc())
        )
    )
    return envelope(
        "Reports retrieved successfully",
        reports=[ReportOut.model_validate(r) for r in reports],
        stats=report_stats(reports),
    )


@router.get("/{report_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_report(report_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    report = get_or_404(db, Report, report_id, NOT_FOUND, user_id=user.id)
    return envelope("Report retrieved successfully", report=ReportOut.model_validate(report))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_report(body: ReportCreate, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """
    Create a report in status In Progress. Without linksCount, the count is the
    links delivered by orders placed within the report period.
    """
    report_date = as_utc(body.report_date)
    links_count = body.links_count
    if not links_count:
        start, end = report_window(body.type, report_date)
        links_count = links_delivered(db, user.id, start=start, end=end)
    report = Report(
        user_id=user.id,
        name=body.name,
        type=body.type,
        report_date=report_date,
        links_count=links_count,
        status="In Progress",
    )
    db.add(report)
    db.commit()
    db.refresh(report)
    return envelope("Report created successfully", report=ReportOut.model_validate(report))


@router.patch("/{report_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_report(
    report_id: int,
    body: ReportUpdate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    report = get_or_404(db, Report, report_id, NOT_FOUND, user_id=user.id)
    apply_updates(report, changes_of(body))
    db.commit()
    db.refresh(report)
    return envelope("Report updated successfully", report=ReportOut.model_validate(report))
