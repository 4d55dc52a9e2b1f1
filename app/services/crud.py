"""Helpers shared by the thin CRUD handlers: lookups, payload conversion and ordered listing."""

from typing import Any

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.base import Base


def get_or_404(db: Session, model: type[Base], record_id: int, message: str, **owner: Any) -> Any:
    """
    Load a record by primary key or raise NotFoundError(message).

    Keyword arguments (e.g. user_id=...) further restrict the match, so a
    record owned by someone else is reported exactly like a missing one.
    """
    record = db.get(model, record_id)
    if record is None or any(getattr(record, k) != v for k, v in owner.items()):
        raise NotFoundError(message)
    return record


def _stored(value: Any) -> Any:
    """Nested schema objects are stored in their wire (camelCase) shape."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json", exclude_none=True)
    if isinstance(value, list):
        return [_stored(v) for v in value]
    return value


def fields_of(payload: BaseModel) -> dict[str, Any]:
    """All fields of a create payload, ready for the ORM constructor."""
    return {name: _stored(getattr(payload, name)) for name in type(payload).model_fields}


def changes_of(payload: BaseModel, exclude: set[str] | None = None) -> dict[str, Any]:
    """Fields the client actually sent in a partial update. Explicit nulls are ignored."""
    exclude = exclude or set()
    return {
        name: _stored(getattr(payload, name))
        for name in payload.model_fields_set
        if name not in exclude and getattr(payload, name) is not None
    }


def apply_updates(record: Base, changes: dict[str, Any]) -> Base:
    for name, value in changes.items():
        setattr(record, name, value)
    return record


def ordered(db: Session, model: type[Base], *criteria: Any, newest_first: bool = False) -> list[Any]:
    """Rows matching criteria, by sort_order, then creation time."""
    created = (model.created_at.desc(), model.id.desc()) if newest_first else (model.created_at, model.id)
    stmt = select(model).where(*criteria).order_by(model.sort_order, *created)
    return list(db.scalars(stmt))
