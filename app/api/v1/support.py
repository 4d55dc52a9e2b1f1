"""Support tickets, scoped to the authenticated owner."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.v1.auth import AuthUser
from app.core.clock import Clock, get_clock
from app.core.database import get_db
from app.models.support_ticket import SupportTicket
from app.schemas.base import ApiResponse, envelope
from app.schemas.support import TicketCreate, TicketOut, TicketUpdate
from app.services.crud import apply_updates, changes_of, get_or_404
from app.services.numbering import next_ticket_number

router = APIRouter()

NOT_FOUND = "Support ticket not found"


@router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
def list_tickets(user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    tickets = db.scalars(
        select(SupportTicket)
        .where(SupportTicket.user_id == user.id)
        .order_by(SupportTicket.created_at.desc(), SupportTicket.id.desc())
    )
    return envelope("Support tickets retrieved successfully", tickets=[TicketOut.model_validate(t) for t in tickets])


@router.get("/{ticket_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def get_ticket(ticket_id: int, user: AuthUser, db: Annotated[Session, Depends(get_db)]) -> ApiResponse:
    ticket = get_or_404(db, SupportTicket, ticket_id, NOT_FOUND, user_id=user.id)
    return envelope("Support ticket retrieved successfully", ticket=TicketOut.model_validate(ticket))


@router.post(
    "",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_ticket(
    body: TicketCreate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    ticket = SupportTicket(
        user_id=user.id,
        ticket_number=next_ticket_number(db),
        subject=body.subject,
        category=body.category,
        priority=body.priority,
        message=body.message,
        status="Open",
        last_update=clock(),
    )
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    return envelope("Support ticket created successfully", ticket=TicketOut.model_validate(ticket))


@router.patch("/{ticket_id}", response_model=ApiResponse, response_model_exclude_unset=True)
def update_ticket(
    ticket_id: int,
    body: TicketUpdate,
    user: AuthUser,
    db: Annotated[Session, Depends(get_db)],
    clock: Annotated[Clock, Depends(get_clock)],
) -> ApiResponse:
    ticket = get_or_404(db, SupportTicket, ticket_id, NOT_FOUND, user_id=user.id)
    apply_updates(ticket, changes_of(body))
    ticket.last_update = clock()
    db.commit()
    db.refresh(ticket)
    return envelope("Support ticket updated successfully", ticket=TicketOut.model_validate(ticket))
