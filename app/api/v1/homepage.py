"""Homepage sections: public listing of enabled sections plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.models.homepage_section import HomepageSection
from app.schemas.base import ApiResponse, envelope
from app.schemas.homepage import HomepageSectionCreate, HomepageSectionOut, HomepageSectionUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Homepage section not found"


def _sections(db: Session, *criteria) -> list[HomepageSectionOut]:
    ensure_seeded(db, HomepageSection, seed_data.HOMEPAGE_SECTIONS)
    return [HomepageSectionOut.model_validate(s) for s in ordered(db, HomepageSection, *criteria)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_enabled(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("Homepage sections retrieved", sections=_sections(db, HomepageSection.enabled.is_(True)))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All homepage sections retrieved", sections=_sections(db))


@router.get("/admin/{key}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_section(key: str, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Look up a section by numeric id or by its sectionId key."""
    criteria = [HomepageSection.section_id == key]
    if key.isdigit():
        criteria.append(HomepageSection.id == int(key))
    section = db.scalars(select(HomepageSection).where(or_(*criteria))).first()
    if section is None:
        raise NotFoundError(NOT_FOUND)
    return envelope("Homepage section retrieved", section=HomepageSectionOut.model_validate(section))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_section(
    body: HomepageSectionCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    section = HomepageSection(**fields_of(body))
    db.add(section)
    db.commit()
    db.refresh(section)
    return envelope("Homepage section created", section=HomepageSectionOut.model_validate(section))


@router.patch("/{section_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_section(
    section_id: int,
    body: HomepageSectionUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    section = get_or_404(db, HomepageSection, section_id, NOT_FOUND)
    apply_updates(section, changes_of(body))
    db.commit()
    db.refresh(section)
    return envelope("Homepage section updated", section=HomepageSectionOut.model_validate(section))


@router.delete("/{section_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_section(section_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    section = get_or_404(db, HomepageSection, section_id, NOT_FOUND)
    db.delete(section)
    db.commit()
    return envelope("Homepage section deleted")
