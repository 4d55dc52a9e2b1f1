"""Dashboard aggregations for the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.schemas.base import ApiResponse, envelope
from app.services import dashboard

router = APIRouter()


@router.get("/stats", response_model=ApiResponse, response_model_exclude_unset=True)
def get_stats(
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Backlink totals, active campaigns and this month's change against last month."""
    stats = dashboard.dashboard_stats(db, user.id, clock())
    return envelope("Dashboard stats retrieved successfully", **stats.model_dump(by_alias=True))


@router.get("/activity", response_model=ApiResponse, response_model_exclude_unset=True)
def get_activity(
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    activities = dashboard.recent_activity(db, user.id, clock())
    return envelope("Recent activity retrieved successfully", activities=activities)


@router.get("/campaign-progress", response_model=ApiResponse, response_model_exclude_unset=True)
def get_campaign_progress(
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    campaign = dashboard.campaign_progress(db, user.id, clock())
    if campaign is None:
        return envelope("No active campaign", campaign=None)
    return envelope("Campaign progress retrieved successfully", campaign=campaign)
