"""Services catalogue: public listing of published services plus staff management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.api.v1.auth import StaffUser
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.models.service import Service
from app.schemas.base import ApiResponse, envelope
from app.schemas.service import ServiceCreate, ServiceOut, ServiceUpdate
from app.services import seed_data
from app.services.crud import apply_updates, changes_of, fields_of, get_or_404, ordered
from app.services.seeding import ensure_seeded

router = APIRouter()

NOT_FOUND = "Service not found"


def _services(db: Session, *criteria) -> list[ServiceOut]:
    ensure_seeded(db, Service, seed_data.SERVICES)
    return [ServiceOut.model_validate(s) for s in ordered(db, Service, *criteria)]


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_published(db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("Services retrieved", services=_services(db, Service.status == "published"))


@router.get("/admin/all", response_model=ApiResponse, response_model_exclude_unset=True)
def list_all(_staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    return envelope("All services retrieved", services=_services(db))


@router.get("/admin/{key}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_service(key: str, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    """Look up a service by numeric id or by its serviceId key."""
    criteria = [Service.service_id == key]
    if key.isdigit():
        criteria.append(Service.id == int(key))
    service = db.scalars(select(Service).where(or_(*criteria))).first()
    if service is None:
        raise NotFoundError(NOT_FOUND)
    return envelope("Service retrieved", service=ServiceOut.model_validate(service))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_service(
    body: ServiceCreate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    service = Service(**fields_of(body))
    db.add(service)
    db.commit()
    db.refresh(service)
    return envelope("Service created", service=ServiceOut.model_validate(service))


@router.patch("/{service_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_service(
    service_id: int,
    body: ServiceUpdate,
    _staff: StaffUser,
    db: Annotated[Session, Depends(get_db)],
) -> ApiResponse:
    service = get_or_404(db, Service, service_id, NOT_FOUND)
    apply_updates(service, changes_of(body))
    db.commit()
    db.refresh(service)
    return envelope("Service updated", service=ServiceOut.model_validate(service))


@router.delete("/{service_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def delete_service(service_id: int, _staff: StaffUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    service = get_or_404(db, Service, service_id, NOT_FOUND)
    db.delete(service)
    db.commit()
    return envelope("Service deleted")
