"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.keuangan import BiayaProyek, PembayaranPiutang, PiutangPelanggan, Proyek
from app.models.user import Pengguna

__all__ = [
    "Base",
    "BiayaProyek",
    "PembayaranPiutang",
    "Pengguna",
    "PiutangPelanggan",
    "Proyek",
]
