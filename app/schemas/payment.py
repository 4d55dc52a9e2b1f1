"""Schemas for stored payment methods."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut

CardType = Literal["Visa", "Mastercard", "American Express", "Discover"]


class PaymentMethodCreate(CamelModel):
    type: CardType
    last4: str = Field(..., pattern=r"^\d{4}$")
    expiry_month: int = Field(..., ge=1, le=12)
    expiry_year: int = Field(..., ge=2000, le=2100)
    is_default: bool = False


class PaymentMethodOut(RecordOut):
    user_id: int
    type: CardType
    last4: str
    expiry_month: int
    expiry_year: int
    is_default: bool
