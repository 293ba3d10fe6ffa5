"""CRUD endpoints for project costs (/biaya-proyek)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import FinanceOfficerRoute
from app.core.database import get_db
from app.models import BiayaProyek
from app.schemas.keuangan import (
    BiayaProyekCreate,
    BiayaProyekRead,
    BiayaProyekUpdate,
    DeleteResponse,
)
from app.services.crud import create_record, delete_record, list_records, update_record

router = APIRouter(route_class=FinanceOfficerRoute)


@router.get("", response_model=list[BiayaProyekRead])
def list_biaya_proyek(db: Annotated[Session, Depends(get_db)]) -> list[BiayaProyekRead]:
    return [BiayaProyekRead.model_validate(r) for r in list_records(db, BiayaProyek)]


@router.post("", response_model=BiayaProyekRead, status_code=status.HTTP_201_CREATED)
def create_biaya_proyek(
    body: BiayaProyekCreate,
    db: Annotated[Session, Depends(get_db)],
) -> BiayaProyekRead:
    return BiayaProyekRead.model_validate(create_record(db, BiayaProyek, body))


@router.put("/{record_id}", response_model=BiayaProyekRead)
def update_biaya_proyek(
    record_id: int,
    body: BiayaProyekUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> BiayaProyekRead:
    """Partial update; 404 when the record does not exist."""
    return BiayaProyekRead.model_validate(update_record(db, BiayaProyek, record_id, body))


@router.delete("/{record_id}", response_model=DeleteResponse)
def delete_biaya_proyek(
    record_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    delete_record(db, BiayaProyek, record_id)
    return DeleteResponse(message="BiayaProyek successfully deleted")
