"""FAQs: public listing of visible, published entries plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.models.faq import FAQ
from app.schemas.base import ApiResponse, envelope
from app.schemas.faq import FAQCreate, FAQOut, FAQUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "FAQ not found"


def _faqs(db: Session, *criteria) -> list[FAQOut]:
    ensure_seeded(db, FAQ, seed_data.FAQS)
    return [FAQOut.model_validate(f) for f in ordered(db, FAQ, *criteria)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_visible(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("FAQs retrieved", faqs=_faqs(db, FAQ.visible.is_(True), FAQ.status == "published"))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All FAQs retrieved", faqs=_faqs(db))


@router.get("/admin/{faq_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_faq(faq_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    faq = get_or_404(db, FAQ, faq_id, NOT_FOUND)
    return envelope("FAQ retrieved", faq=FAQOut.model_validate(faq))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_faq(body: FAQCreate, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    faq = FAQ(**fields_of(body))
    db.add(faq)
    db.commit()
    db.refresh(faq)
    return envelope("FAQ created", faq=FAQOut.model_validate(faq))


@router.patch("/{faq_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_faq(
    faq_id: int,
    body: FAQUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    faq = get_or_404(db, FAQ, faq_id, NOT_FOUND)
    apply_updates(faq, changes_of(body))
    db.commit()
    db.refresh(faq)
    return envelope("FAQ updated", faq=FAQOut.model_validate(faq))


@router.delete("/{faq_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_faq(faq_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    faq = get_or_404(db, FAQ, faq_id, NOT_FOUND)
    db.delete(faq)
    db.commit()
    return envelope("FAQ deleted")
