"""Schemas for link-building and guest-posting packages."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from app.schemas.base import CamelModel, RecordOut


def _custom_price(value: Any) -> Any:
    """'Custom' is stored as a null price."""
    if isinstance(value, str) and value.strip().lower() == "custom":
        return None
    return value


Price = Annotated[Annotated[float, Field(ge=0)] | None, BeforeValidator(_custom_price)]


class LinkBuildingPackageCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Price = None
    links_per_month: str = Field(..., min_length=1, max_length=64)
    features: list[str] = Field(default_factory=list)
    popular: bool = False
    enabled: bool = True
    sort_order: int = 0


class LinkBuildingPackageUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Price = None
    links_per_month: str | None = None
    features: list[str] | None = None
    popular: bool | None = None
    enabled: bool | None = None
    sort_order: int | None = None


class LinkBuildingPackageOut(RecordOut):
    name: str
    price: float | None = None
    links_per_month: str
    features: list[str]
    popular: bool
    enabled: bool
    sort_order: int


class GuestPostingPackageCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    price: Price = None
    description: str = "Per post placement"
    features: list[str] = Field(default_factory=list)
    icon: str = "FileText"
    popular: bool = False
    enabled: bool = True
    sort_order: int = 0


class GuestPostingPackageUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    price: Price = None
    description: str | None = None
    features: list[str] | None = None
    icon: str | None = None
    popular: bool | None = None
    enabled: bool | None = None
    sort_order: int | None = None


class GuestPostingPackageOut(RecordOut):
    name: str
    price: float | None = None
    description: str
    features: list[str]
    icon: str
    popular: bool
    enabled: bool
    sort_order: int
