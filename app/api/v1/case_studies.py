"""Case studies: public listing of published studies plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.models.case_study import CaseStudy
from app.schemas.base import ApiResponse, envelope
from app.schemas.case_study import CaseStudyCreate, CaseStudyOut, CaseStudyUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Case study not found"


def _case_studies(db: Session, *criteria) -> list[CaseStudyOut]:
    ensure_seeded(db, CaseStudy, seed_data.CASE_STUDIES)
    return [CaseStudyOut.model_validate(c) for c in ordered(db, CaseStudy, *criteria)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_published(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("Case studies retrieved", caseStudies=_case_studies(db, CaseStudy.status == "published"))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All case studies retrieved", caseStudies=_case_studies(db))


@router.get("/admin/{key}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_case_study(key: str, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Look up a case study by numeric id or by slug."""
    criteria = [CaseStudy.slug == key]
    if key.isdigit():
        criteria.append(CaseStudy.id == int(key))
    case_study = db.scalars(select(CaseStudy).where(or_(*criteria))).first()
    if case_study is None:
        raise NotFoundError(NOT_FOUND)
    return envelope("Case study retrieved", caseStudy=CaseStudyOut.model_validate(case_study))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_case_study(
    body: CaseStudyCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    values = fields_of(body)
    # Older admin screens read name, trafficGrowth and description.
    values["name"] = body.name or body.client
    values["traffic_growth"] = body.traffic_growth or body.traffic_increase
    values["description"] = body.description or body.overview
    case_study = CaseStudy(**values)
    db.add(case_study)
    db.commit()
    db.refresh(case_study)
    return envelope("Case study created", caseStudy=CaseStudyOut.model_validate(case_study))


@router.patch("/{case_study_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_case_study(
    case_study_id: int,
    body: CaseStudyUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    case_study = get_or_404(db, CaseStudy, case_study_id, NOT_FOUND)
    apply_updates(case_study, changes_of(body))
    db.commit()
    db.refresh(case_study)
    return envelope("Case study updated", caseStudy=CaseStudyOut.model_validate(case_study))


@router.delete("/{case_study_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_case_study(
    case_study_id: int,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    case_study = get_or_404(db, CaseStudy, case_study_id, NOT_FOUND)
    db.delete(case_study)
    db.commit()
    return envelope("Case study deleted")
