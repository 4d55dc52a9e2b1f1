"""Stored payment methods of the authenticated owner. At most one is the default."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.database import get_db
from app.models.payment_method import PaymentMethod
from app.schemas.base import ApiResponse, envelope
from app.schemas.payment import PaymentMethodCreate, PaymentMethodOut
from app.services.crud import fields_of, get_or_404

router = APIRouter()

NOT_FOUND = "Payment method not found"


def _clear_default(db: Session, user_id: int) -> None:
    db.execute(
        update(PaymentMethod)
        .where(PaymentMethod.user_id == user_id, PaymentMethod.is_default.is_(True))
        .values(is_default=False)
        .execution_options(synchronize_session="fetch")
    )


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_methods(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Default method first."""
    methods = db.scalars(
        select(PaymentMethod)
        .where(PaymentMethod.user_id == user.id)
        .order_by(PaymentMethod.is_default.desc(), PaymentMethod.id)
    )
    return envelope(
        "Payment methods retrieved successfully",
        paymentMethods=[PaymentMethodOut.model_validate(m) for m in methods],
    )


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def add_method(body: PaymentMethodCreate, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    if body.is_default:
        _clear_default(db, user.id)
    method = PaymentMethod(user_id=user.id, **fields_of(body))
    db.add(method)
    db.commit()
    db.refresh(method)
    return envelope("Payment method added successfully", paymentMethod=PaymentMethodOut.model_validate(method))


@router.patch("/{method_id}/set-default", response_model=ApiResponse, response_model_exclude_unset=True)
def set_default(method_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    method = get_or_404(db, PaymentMethod, method_id, NOT_FOUND, user_id=user.id)
    _clear_default(db, user.id)
    method.is_default = True
    db.commit()
    db.refresh(method)
    return envelope(
        "Default payment method updated successfully",
        paymentMethod=PaymentMethodOut.model_validate(method),
    )


@router.delete("/{method_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_method(method_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    method = get_or_404(db, PaymentMethod, method_id, NOT_FOUND, user_id=user.id)
    db.delete(method)
    db.commit()
    return envelope("Payment method deleted successfully")
