"""Auth endpoints and the request dependencies (get_current_user, require_roles)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.core.exceptions import AuthenticationError
from app.core.security import TokenError, TokenKind, decode_token
from app.schemas.auth import CurrentUser, LoginRequest, RefreshRequest, RegisterRequest, Role
from app.schemas.base import ApiResponse, envelope
from app.services import accounts
from app.services.access import admit, authorize

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> CurrentUser:
    """Dependency: verify the Bearer access token, then the account gate. Raises 401/403."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required. Please provide a valid token.")
    try:
        subject = decode_token(credentials.credentials, TokenKind.ACCESS, now=clock())
    except TokenError as e:
        logger.info("Access token rejected: %s", type(e).__name__)
        raise
    return admit(db, subject)


def require_roles(*roles: Role) -> Callable[..., CurrentUser]:
    """Dependency factory: authenticated principal whose role is one of roles. Raises 403 otherwise."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        return authorize(current_user, roles)

    return dependency


AuthUser = Annotated[CurrentUser, Depends(get_current_user)]
StaffUser = Annotated[CurrentUser, Depends(require_roles("admin", "moderator"))]
AdminUser = Annotated[CurrentUser, Depends(require_roles("admin"))]


@router.post(
    "/register",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """
    Create an account and return it with an access/refresh token pair.
    New accounts are unverified: they cannot log in until an admin approves them.
    """
    result = accounts.register(db, body, clock())
    return envelope("User registered successfully", **result.model_dump(by_alias=True, mode="json"))


@router.post("/login", response_model=ApiResponse, response_model_exclude_unset=True)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """
    Authenticate with email and password; returns the user and a token pair.
    Include the access token in the Authorization header as: Bearer <accessToken>
    """
    result = accounts.login(db, body, clock())
    return envelope("Login successful", **result.model_dump(by_alias=True, mode="json"))


@router.post("/refresh", response_model=ApiResponse, response_model_exclude_unset=True)
def refresh(
    body: RefreshRequest,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    """Exchange a refresh token for a new token pair."""
    result = accounts.refresh(db, body.refresh_token, clock())
    return envelope("Token refreshed successfully", **result.model_dump(by_alias=True, mode="json"))


@router.get("/me", response_model=ApiResponse, response_model_exclude_unset=True)
def me(current_user: AuthUser) -> ApiResponse:
    return envelope("User retrieved successfully", user=current_user)
