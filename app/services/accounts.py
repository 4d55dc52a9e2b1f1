"""Registration, login and token refresh."""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    AccountStateError,
    AuthenticationError,
    ConflictError,
    ValidationError,
)
from app.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    TokenError,
    TokenKind,
    create_token_pair,
    decode_token,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.schemas.auth import AuthResult, CurrentUser, LoginRequest, RegisterRequest
from app.schemas.base import normalize_email
from app.services.access import admit, check_account_status

logger = logging.getLogger(__name__)


def validate_password(password: str) -> None:
    if len(password) < PASSWORD_MIN_LEN:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN_LEN} characters")
    if len(password) > PASSWORD_MAX_LEN:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_LEN} characters")


def validate_name(name: str) -> str:
    name = name.strip()
    if not (NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN):
        raise ValidationError(f"Name must be between {NAME_MIN_LEN} and {NAME_MAX_LEN} characters")
    return name


def validate_email(email: str) -> str:
    try:
        return normalize_email(email)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def find_by_email(db: Session, email: str) -> User | None:
    return db.scalars(select(User).where(User.email == email.strip().lower())).first()


def create_account(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: str = "user",
    is_verified: bool = False,
    is_suspended: bool = False,
    is_active: bool = True,
    is_deleted: bool = False,
) -> User:
    """
    Validate and insert a new account. Used by self-registration, admin creation
    and the bootstrap CLI. Raises ValidationError or ConflictError.
    """
    validate_password(password)
    email = validate_email(email)
    name = validate_name(name)
    if find_by_email(db, email) is not None:
        raise ConflictError("User with this email already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
        is_verified=is_verified,
        is_suspended=is_suspended,
        is_active=is_active,
        is_deleted=is_deleted,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User with this email already exists") from e
    db.refresh(user)
    return user


def _auth_result(user: User, now: datetime) -> AuthResult:
    tokens = create_token_pair(user.id, now=now)
    return AuthResult(user=CurrentUser.model_validate(user), **tokens)


def register(db: Session, body: RegisterRequest, now: datetime) -> AuthResult:
    """Self-registration. New accounts start unverified and cannot log in until approved."""
    if not body.name or not body.email or not body.password:
        raise ValidationError("Name, email, and password are required")
    user = create_account(db, name=body.name, email=body.email, password=body.password)
    logger.info("User registered: %s", user.id)
    return _auth_result(user, now)


def login(db: Session, body: LoginRequest, now: datetime) -> AuthResult:
    """
    Check credentials, then the account gate, then issue tokens.

    Unknown email and wrong password produce the same error so callers cannot
    tell which accounts exist.
    """
    if not body.email or not body.password:
        raise ValidationError("Email and password are required")

    user = find_by_email(db, body.email)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login rejected: bad credentials")
        raise AuthenticationError("Invalid email or password")
    try:
        check_account_status(user)
    except AccountStateError as e:
        logger.info("Login rejected for user %s: %s", user.id, e.reason)
        raise

    logger.info("Login succeeded for user %s", user.id)
    return _auth_result(user, now)


def refresh(db: Session, refresh_token: str | None, now: datetime) -> AuthResult:
    """Exchange a valid refresh token for a new token pair, re-checking the account."""
    if not refresh_token:
        raise ValidationError("Refresh token is required")
    try:
        subject = decode_token(refresh_token, TokenKind.REFRESH, now=now)
    except TokenError as e:
        logger.info("Refresh token rejected: %s", type(e).__name__)
        raise
    principal = admit(db, subject)
    user = db.get(User, principal.id)
    return _auth_result(user, now)
