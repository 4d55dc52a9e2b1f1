"""Human-readable identifiers for orders and support tickets."""

import random
from datetime import datetime

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from app.models.order import Order
from app.models.support_ticket import SupportTicket

MAX_ATTEMPTS = 50


def _unused(db: Session, column, candidates) -> str:
    for candidate in candidates:
        if not db.scalar(select(exists().where(column == candidate))):
            return candidate
    raise RuntimeError(f"No unused identifier after {MAX_ATTEMPTS} attempts")


def next_order_number(db: Session, now: datetime) -> str:
    """ORD-<year>-<3 digits>, unused at the time of the call."""
    candidates = (f"ORD-{now.year}-{random.randint(0, 999):03d}" for _ in range(MAX_ATTEMPTS))
    return _unused(db, Order.order_number, candidates)


def next_ticket_number(db: Session) -> str:
    """TKT-<4 digits>, unused at the time of the call."""
    candidates = (f"TKT-{random.randint(1000, 9999)}" for _ in range(MAX_ATTEMPTS))
    return _unused(db, SupportTicket.ticket_number, candidates)
