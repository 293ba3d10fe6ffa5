"""Pydantic request/response schemas."""

from app.schemas.auth import LoginRequest, PenggunaRead, RegisterRequest, TokenResponse
from app.schemas.health import HealthResponse
from app.schemas.keuangan import (
    BiayaProyekCreate,
    BiayaProyekRead,
    BiayaProyekUpdate,
    DeleteResponse,
    PembayaranPiutangCreate,
    PembayaranPiutangRead,
    PembayaranPiutangUpdate,
    PiutangPelangganCreate,
    PiutangPelangganRead,
    PiutangPelangganUpdate,
    ProyekCreate,
    ProyekRead,
    ProyekUpdate,
)

__all__ = [
    "BiayaProyekCreate",
    "BiayaProyekRead",
    "BiayaProyekUpdate",
    "DeleteResponse",
    "HealthResponse",
    "LoginRequest",
    "PembayaranPiutangCreate",
    "PembayaranPiutangRead",
    "PembayaranPiutangUpdate",
    "PenggunaRead",
    "PiutangPelangganCreate",
    "PiutangPelangganRead",
    "PiutangPelangganUpdate",
    "ProyekCreate",
    "ProyekRead",
    "ProyekUpdate",
    "RegisterRequest",
    "TokenResponse",
]
