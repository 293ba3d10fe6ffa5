"""CRUD endpoints for customer receivables (/piutang-pelanggan)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import FinanceOfficerRoute
from app.core.database import get_db
from app.models import PiutangPelanggan
from app.schemas.keuangan import (
    DeleteResponse,
    PiutangPelangganCreate,
    PiutangPelangganRead,
    PiutangPelangganUpdate,
)
from app.services.crud import create_record, delete_record, list_records, update_record

router = APIRouter(route_class=FinanceOfficerRoute)


@router.get("", response_model=list[PiutangPelangganRead])
def list_piutang_pelanggan(db: Annotated[Session, Depends(get_db)]) -> list[PiutangPelangganRead]:
    """
    Return every customer receivable.

    There is no filtering or paging; the full table is returned.
    """
    return [PiutangPelangganRead.model_validate(r) for r in list_records(db, PiutangPelanggan)]


@router.post("", response_model=PiutangPelangganRead, status_code=status.HTTP_201_CREATED)
def create_piutang_pelanggan(
    body: PiutangPelangganCreate,
    db: Annotated[Session, Depends(get_db)],
) -> PiutangPelangganRead:
    return PiutangPelangganRead.model_validate(create_record(db, PiutangPelanggan, body))


@router.put("/{record_id}", response_model=PiutangPelangganRead)
def update_piutang_pelanggan(
    record_id: int,
    body: PiutangPelangganUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> PiutangPelangganRead:
    """Partial update; 404 when the record does not exist."""
    return PiutangPelangganRead.model_validate(update_record(db, PiutangPelanggan, record_id, body))


@router.delete("/{record_id}", response_model=DeleteResponse)
def delete_piutang_pelanggan(
    record_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    delete_record(db, PiutangPelanggan, record_id)
    return DeleteResponse(message="PiutangPelanggan successfully deleted")
