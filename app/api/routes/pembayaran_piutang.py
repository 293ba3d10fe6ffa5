"""CRUD endpoints for receivable payments (/pembayaran-piutang)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import FinanceOfficerRoute
from app.core.database import get_db
from app.models import PembayaranPiutang
from app.schemas.keuangan import (
    DeleteResponse,
    PembayaranPiutangCreate,
    PembayaranPiutangRead,
    PembayaranPiutangUpdate,
)
from app.services.crud import create_record, delete_record, list_records, update_record

router = APIRouter(route_class=FinanceOfficerRoute)


@router.get("", response_model=list[PembayaranPiutangRead])
def list_pembayaran_piutang(db: Annotated[Session, Depends(get_db)]) -> list[PembayaranPiutangRead]:
    return [PembayaranPiutangRead.model_validate(r) for r in list_records(db, PembayaranPiutang)]


@router.post("", response_model=PembayaranPiutangRead, status_code=status.HTTP_201_CREATED)
def create_pembayaran_piutang(
    body: PembayaranPiutangCreate,
    db: Annotated[Session, Depends(get_db)],
) -> PembayaranPiutangRead:
    return PembayaranPiutangRead.model_validate(create_record(db, PembayaranPiutang, body))


@router.put("/{record_id}", response_model=PembayaranPiutangRead)
def update_pembayaran_piutang(
    record_id: int,
    body: PembayaranPiutangUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> PembayaranPiutangRead:
    """Update a payment. Only the fields sent are changed."""
    return PembayaranPiutangRead.model_validate(update_record(db, PembayaranPiutang, record_id, body))


@router.delete("/{record_id}", response_model=DeleteResponse)
def delete_pembayaran_piutang(
    record_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DeleteResponse:
    delete_record(db, PembayaranPiutang, record_id)
    return DeleteResponse(message="PembayaranPiutang successfully deleted")
