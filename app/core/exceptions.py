"""
Typed application errors.

Each error carries the HTTP status it maps to and a client-safe message; the
exception handlers in app.main translate them into the response envelope.
"""

from typing import Any


class AppError(Exception):
    """Root of all errors raised deliberately by handlers and services."""

    http_status_code: int = 500

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        self.message = message
        self.detail = detail or {}
        super().__init__(message)


class ValidationError(AppError):
    http_status_code = 400


class AuthenticationError(AppError):
    http_status_code = 401


class AuthorizationError(AppError):
    http_status_code = 403


class AccountStateError(AuthorizationError):
    """Account exists but a lifecycle flag forbids use."""

    reason: str = "account"


class AccountClosedError(AccountStateError):
    def __init__(self, reason: str = "inactive") -> None:
        self.reason = reason
        super().__init__("Account is inactive or deleted. Please contact support.")


class AccountSuspendedError(AccountStateError):
    reason = "suspended"

    def __init__(self) -> None:
        super().__init__("Account is suspended. Please contact support.")


class AccountUnverifiedError(AccountStateError):
    reason = "unverified"

    def __init__(self) -> None:
        super().__init__("Account is pending verification. Please wait for admin approval.")


class NotFoundError(AppError):
    http_status_code = 404


class ConflictError(AppError):
    http_status_code = 409


class InternalError(AppError):
    http_status_code = 500
