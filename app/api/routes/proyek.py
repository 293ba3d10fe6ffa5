"""CRUD endpoints for projects (/proyek)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import FinanceOfficerRoute
from app.core.database import get_db
from app.models import Proyek
from app.schemas.keuangan import (
    DeleteResponse,
    ProyekCreate,
    ProyekRead,
    ProyekUpdate,
)
from app.services.crud import create_record, delete_record, list_records, update_record

router = APIRouter(route_class=FinanceOfficerRoute)


@router.get("", response_model=list[ProyekRead])
def list_proyek(db: Annotated[Session, Depends(get_db)]) -> list[ProyekRead]:
    """All projects, oldest first."""
    return [ProyekRead.model_validate(r) for r in list_records(db, Proyek)]


@router.post("", response_model=ProyekRead, status_code=status.HTTP_201_CREATED)
def create_proyek(
    body: ProyekCreate,
    db: Annotated[Session, Depends(get_db)],
) -> ProyekRead:
    return ProyekRead.model_validate(create_record(db, Proyek, body))


@router.put("/{record_id}", response_model=ProyekRead)
def update_proyek(
    record_id: int,
    body: ProyekUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> ProyekRead:
    """Partial update; 404 when the record does not exist."""
    return ProyekRead.model_validate(update_record(db, Proyek, record_id, body))


@router.delete("/{record_id}", response_model=DeleteResponse)
def delete_proyek(
    record_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    delete_record(db, Proyek, record_id)
    return DeleteResponse(message="Proyek successfully deleted")
