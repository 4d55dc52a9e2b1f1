"""
Link-building packages. The public listing shows enabled packages; everything
else is staff-only. A price of "Custom" (or null) is stored as null.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.models.link_building_package import LinkBuildingPackage
from app.schemas.base import ApiResponse, envelope
from app.schemas.packages import (
    LinkBuildingPackageCreate,
    LinkBuildingPackageOut,
    LinkBuildingPackageUpdate,
)
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Package not found"


def _packages(db: Session, *criteria) -> list[LinkBuildingPackageOut]:
    ensure_seeded(db, LinkBuildingPackage, seed_data.LINK_BUILDING_PACKAGES)
    packages = ordered(db, LinkBuildingPackage, *criteria)
    return [LinkBuildingPackageOut.model_validate(p) for p in packages]


@router.get("/public", response_model=ApiResponse, response_model_exclude_unset=True)
def list_enabled(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    packages = _packages(db, LinkBuildingPackage.enabled.is_(True))
    return envelope("Link building packages retrieved", packages=packages)


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All link building packages retrieved", packages=_packages(db))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_package(
    body: LinkBuildingPackageCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    package = LinkBuildingPackage(**fields_of(body))
    db.add(package)
    db.commit()
    db.refresh(package)
    return envelope("Link building package created", package=LinkBuildingPackageOut.model_validate(package))


@router.patch("/{package_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_package(
    package_id: int,
    body: LinkBuildingPackageUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    package = get_or_404(db, LinkBuildingPackage, package_id, NOT_FOUND)
    changes = changes_of(body)
    if "price" in body.model_fields_set:
        changes["price"] = body.price
    apply_updates(package, changes)
    db.commit()
    db.refresh(package)
    return envelope("Link building package updated", package=LinkBuildingPackageOut.model_validate(package))


@router.delete("/{package_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_package(
    package_id: int,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    package = get_or_404(db, LinkBuildingPackage, package_id, NOT_FOUND)
    db.delete(package)
    db.commit()
    return envelope("Link building package deleted")
