"""Plan subscriptions: owner routes plus admin listing and cancellation."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.api.v1.auth import AdminUser, AuthUser
from app.core.clock import Clock, add_months, get_clock
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.models.subscription import Subscription
from app.schemas.base import ApiResponse, envelope
from app.schemas.subscription import AdminSubscriptionOut, SubscriptionCreate, SubscriptionOut
from app.services.crud import get_or_404

router = APIRouter()

BILLING_MONTHS = {"Monthly": 1, "Quarterly": 3, "Yearly": 12}


def _newest_first():
    return (Subscription.created_at.desc(), Subscription.id.desc())


@router.get("/current", response_model=ApiResponse, response_model_exclude_unset=True)
def current_subscription(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    subscription = db.scalars(
        select(Subscription)
        .where(Subscription.user_id == user.id, Subscription.status == "Active")
        .order_by(*_newest_first())
    ).first()
    if subscription is None:
        return envelope("No active subscription", subscription=None)
    return envelope(
        "Current subscription retrieved successfully",
        subscription=SubscriptionOut.model_validate(subscription),
    )


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_subscriptions(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    subscriptions = db.scalars(
        select(Subscription).where(Subscription.user_id == user.id).order_by(*_newest_first())
    )
    return envelope(
        "Subscriptions retrieved successfully",
        subscriptions=[SubscriptionOut.model_validate(s) for s in subscriptions],
    )


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_subscription(
    body: SubscriptionCreate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Start a subscription. Any subscription the user already has active is cancelled."""
    now = clock()
    db.execute(
        update(Subscription)
        .where(Subscription.user_id == user.id, Subscription.status == "Active")
        .values(status="Cancelled", cancelled_at=now)
        .execution_options(synchronize_session="fetch")
    )
    subscription = Subscription(
        user_id=user.id,
        plan_name=body.plan_name,
        price=body.price,
        billing_cycle=body.billing_cycle,
        status="Active",
        start_date=now,
        next_billing_date=add_months(now, BILLING_MONTHS[body.billing_cycle]),
    )
    db.add(subscription)
    db.commit()
    db.refresh(subscription)
    return envelope("Subscription created successfully", subscription=SubscriptionOut.model_validate(subscription))


@router.patch("/{subscription_id}/cancel", response_model=ApiResponse, response_model_exclude_unset=True)
def cancel_subscription(
    subscription_id: int,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Cancel one of the owner's active subscriptions."""
    subscription = db.get(Subscription, subscription_id)
    if subscription is None or subscription.user_id != user.id or subscription.status != "Active":
        raise NotFoundError("Active subscription not found")
    subscription.status = "Cancelled"
    subscription.cancelled_at = clock()
    db.commit()
    db.refresh(subscription)
    return envelope("Subscription cancelled successfully", subscription=SubscriptionOut.model_validate(subscription))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all_subscriptions(_admin: AdminUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Every subscription with its owner's name and email."""
    subscriptions = db.scalars(select(Subscription).order_by(*_newest_first())).unique()
    return envelope(
        "All subscriptions retrieved successfully",
        subscriptions=[AdminSubscriptionOut.model_validate(s) for s in subscriptions],
    )


@router.patch("/admin/{subscription_id}/cancel", response_model=ApiResponse, response_model_exclude_unset=True)
def admin_cancel_subscription(
    subscription_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    subscription = get_or_404(db, Subscription, subscription_id, "Subscription not found")
    subscription.status = "Cancelled"
    subscription.cancelled_at = clock()
    db.commit()
    db.refresh(subscription)
    return envelope("Subscription cancelled successfully", subscription=SubscriptionOut.model_validate(subscription))
