"""Generic create/read/update/delete over one ORM model, used by every resource router."""

import logging
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def _primary_key_column(model: type[Base]):
    return model.__mapper__.primary_key[0]


def _commit(db: Session, model: type[Base]) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise Conflict(f"{model.__name__} violates a database constraint: {e.orig}") from e


def list_records(db: Session, model: type[ModelT]) -> list[ModelT]:
    """Return every row of the table ordered by primary key."""
    return db.query(model).order_by(_primary_key_column(model)).all()


def get_record(db: Session, model: type[ModelT], record_id: int) -> ModelT:
    record = db.get(model, record_id)
    if record is None:
        raise NotFound(f"{model.__name__} not found")
    return record


def create_record(db: Session, model: type[ModelT], body: BaseModel) -> ModelT:
    record = model(**body.model_dump())
    db.add(record)
    _commit(db, model)
    db.refresh(record)
    logger.info(
        "Record created",
        extra={"model": model.__name__, "id": inspect(record).identity[0]},
    )
    return record


def update_record(
    db: Session, model: type[ModelT], record_id: int, body: BaseModel
) -> ModelT:
    """Apply only the fields present in the request body; NotFound if the row is absent."""
    record = get_record(db, model, record_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(record, field, value)
    _commit(db, model)
    db.refresh(record)
    logger.info("Record updated", extra={"model": model.__name__, "id": record_id})
    return record


def delete_record(db: Session, model: type[ModelT], record_id: int) -> None:
    record = get_record(db, model, record_id)
    db.delete(record)
    _commit(db, model)
    logger.info("Record deleted", extra={"model": model.__name__, "id": record_id})
