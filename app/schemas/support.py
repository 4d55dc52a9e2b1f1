"""Schemas for support tickets."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, RecordOut

TicketCategory = Literal["billing", "technical", "order", "general"]
TicketPriority = Literal["Low", "Medium", "High"]
TicketStatus = Literal["Open", "In Progress", "Resolved", "Closed"]


class TicketCreate(CamelModel):
    subject: str = Field(..., min_length=1, max_length=200)
    category: TicketCategory
    priority: TicketPriority = "Medium"
    message: str = Field(..., min_length=1)


class TicketUpdate(CamelModel):
    status: TicketStatus | None = None
    priority: TicketPriority | None = None


class TicketOut(RecordOut):
    user_id: int
    ticket_number: str
    subject: str
    category: TicketCategory
    priority: TicketPriority
    status: TicketStatus
    message: str
    last_update: datetime
