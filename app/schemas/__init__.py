"""Pydantic request/response schemas."""

from app.schemas.auth import AuthResult, CurrentUser
from app.schemas.base import ApiResponse, CamelModel, envelope
from app.schemas.health import HealthResponse

__all__ = [
    "ApiResponse",
    "AuthResult",
    "CamelModel",
    "CurrentUser",
    "HealthResponse",
    "envelope",
]
