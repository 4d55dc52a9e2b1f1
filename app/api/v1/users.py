"""Admin user management. Reads for admins and moderators, writes for admins only."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.v1.auth import AdminUser, StaffUser
from app.core.database import get_db
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models.user import User
from app.schemas.auth import CurrentUser
from app.schemas.base import ApiResponse, envelope
from app.schemas.user import UserCreate, UserUpdate
from app.services import accounts
from app.services.crud import changes_of

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError(f"User with ID {user_id} not found")
    return user


def _save(db: Session, user: User) -> CurrentUser:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("User with this email already exists") from e
    db.refresh(user)
    return CurrentUser.model_validate(user)


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_users(
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    users = [CurrentUser.model_validate(u) for u in db.scalars(select(User).order_by(User.id))]
    logger.info("Listed %s users", len(users))
    return envelope("Users retrieved successfully", users=users, count=len(users))


@router.get("/{user_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_user(
    user_id: int,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    user = _get_user(db, user_id)
    return envelope("User retrieved successfully", user=CurrentUser.model_validate(user))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    body: UserCreate,
    admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    """
    Create an account directly. Lifecycle flags may be set explicitly;
    isVerified defaults to false like every other new account.
    """
    if not body.name or not body.email or not body.password:
        raise ValidationError("Name, email, and password are required")
    user = accounts.create_account(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role,
        is_verified=bool(body.is_verified),
        is_suspended=body.is_suspended,
        is_active=body.is_active,
        is_deleted=body.is_deleted,
    )
    logger.info("User %s created by admin %s", user.id, admin.id)
    return envelope("User created successfully", user=CurrentUser.model_validate(user))


@router.patch("/{user_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_user(
    user_id: int,
    body: UserUpdate,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    """Update profile, role or lifecycle flags. Passwords cannot be changed here."""
    if body.password:
        raise ValidationError("Password cannot be updated through this endpoint")
    user = _get_user(db, user_id)
    changes = {k: v for k, v in changes_of(body, exclude={"password"}).items() if v is not None}
    if "email" in changes:
        changes["email"] = accounts.validate_email(changes["email"])
    if "name" in changes:
        changes["name"] = accounts.validate_name(changes["name"])
    for name, value in changes.items():
        setattr(user, name, value)
    updated = _save(db, user)
    logger.info("User %s updated: %s", user_id, ", ".join(sorted(changes)))
    return envelope("User updated successfully", user=updated)


@router.delete("/{user_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_user(
    user_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    """Soft delete: the account is kept but can no longer authenticate."""
    user = _get_user(db, user_id)
    user.is_deleted = True
    user.is_active = False
    db.commit()
    logger.info("User %s deleted", user_id)
    return envelope("User deleted successfully")


@router.patch("/{user_id}/approve", response_model=ApiResponse, response_model_exclude_unset=True)
def approve_user(
    user_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    """Verify the account and clear every flag that would block login."""
    user = _get_user(db, user_id)
    user.is_verified = True
    user.is_suspended = False
    user.is_active = True
    user.is_deleted = False
    approved = _save(db, user)
    logger.info("User %s approved", user_id)
    return envelope("User approved successfully", user=approved)


@router.patch("/{user_id}/suspend", response_model=ApiResponse, response_model_exclude_unset=True)
def suspend_user(
    user_id: int,
    _admin: AdminUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    user = _get_user(db, user_id)
    user.is_suspended = True
    suspended = _save(db, user)
    logger.info("User %s suspended", user_id)
    return envelope("User suspended successfully", user=suspended)
