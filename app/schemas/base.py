"""Shared schema base classes and the response envelope."""

import re
from datetime import datetime
from typing import Any

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")


def normalize_email(value: str) -> str:
    """Trim and lower-case; raise ValueError if it does not look like an address."""
    email = value.strip().lower()
    if not EMAIL_PATTERN.match(email):
        raise ValueError("Please provide a valid email address")
    return email


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire; both are accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordOut(CamelModel):
    """Common identity and timestamp fields of every stored record."""

    id: int
    created_at: datetime
    updated_at: datetime


class ApiResponse(BaseModel):
    """Envelope carried by every response body, success or failure."""

    success: bool = Field(description="Whether the request succeeded")
    message: str = Field(description="Human-readable outcome")
    data: dict[str, Any] | None = Field(default=None, description="Payload, when there is one")
    error: str | None = Field(default=None, description="Error detail (non-production only)")


def envelope(message: str, **data: Any) -> ApiResponse:
    """
    Build a success envelope. Keyword arguments become the data object;
    schema instances inside it are serialized by alias (camelCase).
    """
    if not data:
        return ApiResponse(success=True, message=message)
    return ApiResponse(success=True, message=message, data=jsonable_encoder(data, by_alias=True))
