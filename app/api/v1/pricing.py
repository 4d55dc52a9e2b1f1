"""Pricing plans: public listing of enabled plans plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.models.pricing_plan import PricingPlan
from app.schemas.base import ApiResponse, envelope
from app.schemas.pricing import PricingPlanCreate, PricingPlanOut, PricingPlanUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Pricing plan not found"


def _plans(db: Session, *criteria) -> list[PricingPlanOut]:
    ensure_seeded(db, PricingPlan, seed_data.PRICING_PLANS)
    plans = ordered(db, PricingPlan, *criteria)
    return [PricingPlanOut.model_validate(p) for p in plans]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_enabled(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("Pricing plans retrieved", plans=_plans(db, PricingPlan.enabled.is_(True)))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All pricing plans retrieved", plans=_plans(db))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_plan(
    body: PricingPlanCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    plan = PricingPlan(**fields_of(body))
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return envelope("Pricing plan created", plan=PricingPlanOut.model_validate(plan))


@router.patch("/{plan_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_plan(
    plan_id: int,
    body: PricingPlanUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    plan = get_or_404(db, PricingPlan, plan_id, NOT_FOUND)
    apply_updates(plan, changes_of(body))
    db.commit()
    db.refresh(plan)
    return envelope("Pricing plan updated", plan=PricingPlanOut.model_validate(plan))


@router.delete("/{plan_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_plan(plan_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    plan = get_or_404(db, PricingPlan, plan_id, NOT_FOUND)
    db.delete(plan)
    db.commit()
    return envelope("Pricing plan deleted")
