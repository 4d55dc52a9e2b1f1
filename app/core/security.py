"""Password hashing and JWT creation/verification for authentication."""

import enum
from datetime import datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.clock import utcnow
from app.core.config import Settings, get_settings
from app.core.exceptions import AuthenticationError, InternalError

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for name and password validation.
NAME_MIN_LEN = 2
NAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


class TokenKind(str, enum.Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenError(AuthenticationError):
    """Token could not be accepted. Subclasses tell malformed and expired apart."""


class InvalidTokenError(TokenError):
    def __init__(self) -> None:
        super().__init__("Invalid token. Please login again.")


class ExpiredTokenError(TokenError):
    def __init__(self) -> None:
        super().__init__("Token expired. Please login again.")


class TokenConfigurationError(InternalError):
    """Signing secret for a token kind is not configured."""


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _secret_and_ttl(kind: TokenKind, settings: Settings) -> tuple[str, int]:
    if kind is TokenKind.ACCESS:
        secret, minutes, name = settings.JWT_SECRET, settings.JWT_ACCESS_EXPIRE_MINUTES, "JWT_SECRET"
    else:
        secret, minutes, name = (
            settings.JWT_REFRESH_SECRET,
            settings.JWT_REFRESH_EXPIRE_MINUTES,
            "JWT_REFRESH_SECRET",
        )
    if secret is None:
        raise TokenConfigurationError(f"{name} is not configured")
    return secret.get_secret_value(), minutes


def create_token(
    sub: str | int,
    kind: TokenKind,
    *,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """Create a signed JWT of the given kind carrying sub, type, iat and exp."""
    settings = settings or get_settings()
    secret, minutes = _secret_and_ttl(kind, settings)
    issued_at = now or utcnow()
    payload: dict[str, Any] = {
        "sub": str(sub),
        "type": kind.value,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=minutes),
    }
    return jwt.encode(payload, secret, algorithm=settings.JWT_ALGORITHM)


def create_token_pair(
    sub: str | int,
    *,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> dict[str, str]:
    """Access and refresh tokens for the same subject."""
    return {
        "access_token": create_token(sub, TokenKind.ACCESS, settings=settings, now=now),
        "refresh_token": create_token(sub, TokenKind.REFRESH, settings=settings, now=now),
    }


def decode_token(
    token: str,
    kind: TokenKind,
    *,
    settings: Settings | None = None,
    now: datetime | None = None,
) -> str:
    """
    Verify signature, token type and expiry; return the subject.

    Expiry is checked against `now` (defaults to the wall clock) rather than
    inside PyJWT so callers can supply their own time source.
    Raises InvalidTokenError or ExpiredTokenError.
    """
    settings = settings or get_settings()
    secret, _ = _secret_and_ttl(kind, settings)
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={
                "verify_exp": False,
                "verify_iat": False,
                "require": ["exp", "iat", "sub"],
            },
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    if payload.get("type") != kind.value:
        raise InvalidTokenError()
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        raise InvalidTokenError()
    current = now or utcnow()
    if current.timestamp() >= exp:
        raise ExpiredTokenError()
    sub = payload.get("sub")
    if not sub:
        raise InvalidTokenError()
    return str(sub)
