"""Schemas for plan subscriptions."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut

BillingCycle = Literal["Monthly", "Quarterly", "Yearly"]
SubscriptionStatus = Literal["Active", "Cancelled", "Expired"]


class SubscriptionCreate(CamelModel):
    plan_name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., gt=0)
    billing_cycle: BillingCycle


class SubscriptionOut(RecordOut):
    user_id: int
    plan_name: str
    price: float
    billing_cycle: BillingCycle
    status: SubscriptionStatus
    start_date: datetime
    next_billing_date: datetime
    cancelled_at: datetime | None = None


class SubscriberSummary(CamelModel):
    id: int
    name: str
    email: str


class AdminSubscriptionOut(SubscriptionOut):
    """Subscription with its owner's name and email, for the admin listing."""

    user: SubscriberSummary | None = None
