"""Schemas for package orders."""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, RecordOut

PackageType = Literal["link-building", "guest-posting"]
OrderStatus = Literal["Pending", "In Progress", "Completed", "Cancelled"]


class OrderCreate(CamelModel):
    package_name: str = Field(..., min_length=1, max_length=255)
    package_type: PackageType
    links_total: int = Field(..., ge=1)
    amount: float = Field(..., gt=0)
    currency: str = Field(default="USD", min_length=3, max_length=3)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()


class OrderUpdate(CamelModel):
    status: OrderStatus | None = None
    links_delivered: int | None = Field(default=None, ge=0)


class OrderOut(RecordOut):
    user_id: int
    order_number: str
    package_name: str
    package_type: PackageType
    status: OrderStatus
    links_delivered: int
    links_total: int
    amount: float
    currency: str
    order_date: datetime
    completed_date: datetime | None = None
