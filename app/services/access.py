"""
Account gate and role gate.

Every authenticated request, and every login, passes check_account_status after
the credential (password or token) has been verified. Role checks come after
that and are pure: they only look at the principal's role.
"""

import logging
from collections.abc import Collection

from sqlalchemy.orm import Session

from app.core.exceptions import (
    AccountClosedError,
    AccountStateError,
    AccountSuspendedError,
    AccountUnverifiedError,
    AuthenticationError,
    AuthorizationError,
)
from app.models.user import User
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)


def check_account_status(user: User) -> None:
    """
    Raise the first applicable account-state error, in fixed precedence:
    deleted or inactive, then suspended, then unverified.
    """
    if user.is_deleted or not user.is_active:
        raise AccountClosedError(reason="deleted" if user.is_deleted else "inactive")
    if user.is_suspended:
        raise AccountSuspendedError()
    if not user.is_verified:
        raise AccountUnverifiedError()


def admit(db: Session, subject: str) -> CurrentUser:
    """Resolve a verified token subject to an admitted principal."""
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        user_id = None
    user = db.get(User, user_id) if user_id is not None else None
    if user is None:
        raise AuthenticationError("User not found. Token may be invalid.")
    try:
        check_account_status(user)
    except AccountStateError as e:
        logger.info("Request rejected for user %s: %s", user.id, e.reason)
        raise
    return CurrentUser.model_validate(user)


def authorize(principal: CurrentUser | None, allowed: Collection[str]) -> CurrentUser:
    """Return the principal if its role is allowed. A missing principal is never let through."""
    if principal is None:
        raise AuthenticationError("Authentication required.")
    if principal.role not in allowed:
        raise AuthorizationError("Access denied. Insufficient permissions.")
    return principal
