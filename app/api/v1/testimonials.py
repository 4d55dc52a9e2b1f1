"""Testimonials: public listing of visible, published entries plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.models.testimonial import Testimonial
from app.schemas.base import ApiResponse, envelope
from app.schemas.testimonial import TestimonialCreate, TestimonialOut, TestimonialUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Testimonial not found"


def _testimonials(db: Session, *criteria) -> list[TestimonialOut]:
    ensure_seeded(db, Testimonial, seed_data.TESTIMONIALS)
    return [TestimonialOut.model_validate(t) for t in ordered(db, Testimonial, *criteria)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_visible(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    testimonials = _testimonials(db, Testimonial.visible.is_(True), Testimonial.status == "published")
    return envelope("Testimonials retrieved", testimonials=testimonials)


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All testimonials retrieved", testimonials=_testimonials(db))


@router.get("/admin/{testimonial_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_testimonial(
    testimonial_id: int,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    testimonial = get_or_404(db, Testimonial, testimonial_id, NOT_FOUND)
    return envelope("Testimonial retrieved", testimonial=TestimonialOut.model_validate(testimonial))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_testimonial(
    body: TestimonialCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    testimonial = Testimonial(**fields_of(body))
    db.add(testimonial)
    db.commit()
    db.refresh(testimonial)
    return envelope("Testimonial created", testimonial=TestimonialOut.model_validate(testimonial))


@router.patch("/{testimonial_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_testimonial(
    testimonial_id: int,
    body: TestimonialUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    testimonial = get_or_404(db, Testimonial, testimonial_id, NOT_FOUND)
    apply_updates(testimonial, changes_of(body))
    db.commit()
    db.refresh(testimonial)
    return envelope("Testimonial updated", testimonial=TestimonialOut.model_validate(testimonial))


@router.delete("/{testimonial_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_testimonial(
    testimonial_id: int,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    testimonial = get_or_404(db, Testimonial, testimonial_id, NOT_FOUND)
    db.delete(testimonial)
    db.commit()
    return envelope("Testimonial deleted")
