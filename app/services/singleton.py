"""
Singleton configuration records (theme, navigation, live chat, global settings).

At most one row per table is active. Activation clears every other active row
and sets the target inside one transaction; the partial unique index on
is_active rejects a concurrent second activation instead of letting two rows
end up active.
"""

import copy
import logging
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError
from app.models.base import Base
from app.services.seeding import ensure_seeded

logger = logging.getLogger(__name__)


def find_active(db: Session, model: type[Base]) -> Any:
    return db.scalars(select(model).where(model.is_active.is_(True)).limit(1)).first()


def get_active(db: Session, model: type[Base], defaults: dict[str, Any], label: str) -> Any:
    """
    The active record. A never-seeded collection first receives its default
    record; when no row is active afterwards (deactivated or deleted) a fresh
    default is inserted as the active one.
    """
    record = find_active(db, model)
    if record is not None:
        return record
    ensure_seeded(db, model, [{**defaults, "is_active": True}])
    record = find_active(db, model)
    if record is None:
        record = _restore_default(db, model, defaults, label)
    return record


def _restore_default(db: Session, model: type[Base], defaults: dict[str, Any], label: str) -> Any:
    record = model(**copy.deepcopy(defaults), is_active=True)
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        # Another session restored or activated a record first.
        db.rollback()
        record = find_active(db, model)
        if record is None:
            raise ConflictError(f"{label} is being updated. Please retry.") from None
        return record
    db.refresh(record)
    logger.info("Restored default %s record %s as active", model.__tablename__, record.id)
    return record


def _activate(db: Session, model: type[Base], record: Base) -> None:
    db.execute(
        update(model)
        .where(model.is_active.is_(True), model.id != record.id)
        .values(is_active=False)
        .execution_options(synchronize_session="fetch")
    )
    record.is_active = True
    db.flush()


def _commit(db: Session, model: type[Base]) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(
            "Another record was activated at the same time. Please retry."
        ) from e


def create(db: Session, model: type[Base], values: dict[str, Any]) -> Any:
    """Insert a record; when is_active is requested it becomes the only active one."""
    wants_active = bool(values.pop("is_active", False))
    record = model(**values, is_active=False)
    db.add(record)
    db.flush()
    if wants_active:
        _activate(db, model, record)
    _commit(db, model)
    db.refresh(record)
    if wants_active:
        logger.info("Activated %s record %s", model.__tablename__, record.id)
    return record


def update_record(db: Session, model: type[Base], record: Base, changes: dict[str, Any]) -> Any:
    """Apply changes; is_active true activates the record, false just deactivates it."""
    activate = changes.pop("is_active", None)
    for name, value in changes.items():
        setattr(record, name, value)
    if activate is True:
        _activate(db, model, record)
    elif activate is False:
        record.is_active = False
    _commit(db, model)
    db.refresh(record)
    if activate is True:
        logger.info("Activated %s record %s", model.__tablename__, record.id)
    return record


def delete_record(db: Session, record: Base) -> None:
    db.delete(record)
    db.commit()
