"""Package orders, scoped to the authenticated owner."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.models.order import Order
from app.schemas.base import ApiResponse, envelope
from app.schemas.order import OrderCreate, OrderOut, OrderUpdate
from app.services.crud import get_or_404
from app.services.dashboard import record_activity
from app.services.numbering import next_order_number

router = APIRouter()

NOT_FOUND = "Order not found"


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_orders(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """The owner's orders, most recently placed first."""
    orders = db.scalars(
        select(Order).where(Order.user_id == user.id).order_by(Order.order_date.desc(), Order.id.desc())
    )
    return envelope("Orders retrieved successfully", orders=[OrderOut.model_validate(o) for o in orders])


@router.get("/{order_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_order(order_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    order = get_or_404(db, Order, order_id, NOT_FOUND, user_id=user.id)
    return envelope("Order retrieved successfully", order=OrderOut.model_validate(order))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_order(
    body: OrderCreate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Place an order (status Pending) and add a feed entry for it."""
    now = clock()
    order = Order(
        user_id=user.id,
        order_number=next_order_number(db, now),
        package_name=body.package_name,
        package_type=body.package_type,
        links_total=body.links_total,
        amount=body.amount,
        currency=body.currency,
        status="Pending",
        order_date=now,
    )
    db.add(order)
    db.flush()
    record_activity(db, user.id, "New order placed", now, site=order.package_name, order_id=order.id)
    db.commit()
    db.refresh(order)
    return envelope("Order created successfully", order=OrderOut.model_validate(order))


@router.patch("/{order_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_order(
    order_id: int,
    body: OrderUpdate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """
    Update status and/or links delivered. Completing an order stamps
    completedDate; a links-delivered change adds a feed entry.
    """
    order = get_or_404(db, Order, order_id, NOT_FOUND, user_id=user.id)
    now = clock()
    if body.status is not None:
        order.status = body.status
        if body.status == "Completed":
            order.completed_date = now
    if body.links_delivered is not None:
        order.links_delivered = body.links_delivered
        record_activity(db, user.id, "Order updated", now, site=order.package_name, order_id=order.id)
    db.commit()
    db.refresh(order)
    return envelope("Order updated successfully", order=OrderOut.model_validate(order))
