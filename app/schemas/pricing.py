"""Schemas for pricing plans."""

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut


class PricingPlanCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    links_per_month: str = Field(..., min_length=1, max_length=64)
    features: list[str] = Field(default_factory=list)
    popular: bool = False
    enabled: bool = True
    button_text: str = "Get Started"
    button_link: str = "/contact"
    sort_order: int = 0


class PricingPlanUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: float | None = Field(default=None, ge=0)
    links_per_month: str | None = None
    features: list[str] | None = None
    popular: bool | None = None
    enabled: bool | None = None
    button_text: str | None = None
    button_link: str | None = None
    sort_order: int | None = None


class PricingPlanOut(RecordOut):
    name: str
    price: float
    links_per_month: str
    features: list[str]
    popular: bool
    enabled: bool
    button_text: str
    button_link: str
    sort_order: int
