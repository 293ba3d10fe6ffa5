"""Pydantic schemas for receivables, payments, projects and project costs."""

from datetime import date
from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

Money = Annotated[Decimal, Field(ge=0, max_digits=15, decimal_places=2)]


class _CreateModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _UpdateModel(BaseModel):
    """Partial update: only fields present in the body are written."""

    model_config = ConfigDict(extra="forbid")

    # Columns that are NOT NULL in the database and so cannot be cleared.
    required_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        for name in self.model_fields_set & self.required_fields:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self


# Piutang pelanggan


class PiutangPelangganCreate(_CreateModel):
    nama_pelanggan: str = Field(..., min_length=1, max_length=255)
    nomor_faktur: str | None = Field(default=None, max_length=64)
    tanggal_faktur: date
    tanggal_jatuh_tempo: date | None = None
    jumlah_piutang: Money
    status_piutang: str = Field(default="belum_lunas", min_length=1, max_length=32)
    keterangan: str | None = None


class PiutangPelangganUpdate(_UpdateModel):
    required_fields = frozenset(
        {"nama_pelanggan", "tanggal_faktur", "jumlah_piutang", "status_piutang"}
    )

    nama_pelanggan: str | None = Field(default=None, min_length=1, max_length=255)
    nomor_faktur: str | None = Field(default=None, max_length=64)
    tanggal_faktur: date | None = None
    tanggal_jatuh_tempo: date | None = None
    jumlah_piutang: Money | None = None
    status_piutang: str | None = Field(default=None, min_length=1, max_length=32)
    keterangan: str | None = None


class PiutangPelangganRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_piutang_pelanggan: int
    nama_pelanggan: str
    nomor_faktur: str | None
    tanggal_faktur: date
    tanggal_jatuh_tempo: date | None
    jumlah_piutang: Decimal
    status_piutang: str
    keterangan: str | None


# Pembayaran piutang


class PembayaranPiutangCreate(_CreateModel):
    id_piutang_pelanggan: int = Field(..., ge=1)
    tanggal_pembayaran: date
    jumlah_pembayaran: Money
    metode_pembayaran: str | None = Field(default=None, max_length=64)
    keterangan: str | None = None


class PembayaranPiutangUpdate(_UpdateModel):
    required_fields = frozenset(
        {"id_piutang_pelanggan", "tanggal_pembayaran", "jumlah_pembayaran"}
    )

    id_piutang_pelanggan: int | None = Field(default=None, ge=1)
    tanggal_pembayaran: date | None = None
    jumlah_pembayaran: Money | None = None
    metode_pembayaran: str | None = Field(default=None, max_length=64)
    keterangan: str | None = None


class PembayaranPiutangRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_pembayaran_piutang: int
    id_piutang_pelanggan: int
    tanggal_pembayaran: date
    jumlah_pembayaran: Decimal
    metode_pembayaran: str | None
    keterangan: str | None


# Proyek


class ProyekCreate(_CreateModel):
    nama_proyek: str = Field(..., min_length=1, max_length=255)
    deskripsi: str | None = None
    tanggal_mulai: date | None = None
    tanggal_selesai: date | None = None
    anggaran: Money | None = None
    status_proyek: str = Field(default="berjalan", min_length=1, max_length=32)


class ProyekUpdate(_UpdateModel):
    required_fields = frozenset({"nama_proyek", "status_proyek"})

    nama_proyek: str | None = Field(default=None, min_length=1, max_length=255)
    deskripsi: str | None = None
    tanggal_mulai: date | None = None
    tanggal_selesai: date | None = None
    anggaran: Money | None = None
    status_proyek: str | None = Field(default=None, min_length=1, max_length=32)


class ProyekRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_proyek: int
    nama_proyek: str
    deskripsi: str | None
    tanggal_mulai: date | None
    tanggal_selesai: date | None
    anggaran: Decimal | None
    status_proyek: str


# Biaya proyek


class BiayaProyekCreate(_CreateModel):
    id_proyek: int = Field(..., ge=1)
    deskripsi_biaya: str = Field(..., min_length=1, max_length=255)
    tanggal_biaya: date
    jumlah_biaya: Money
    kategori_biaya: str | None = Field(default=None, max_length=64)


class BiayaProyekUpdate(_UpdateModel):
    required_fields = frozenset(
        {"id_proyek", "deskripsi_biaya", "tanggal_biaya", "jumlah_biaya"}
    )

    id_proyek: int | None = Field(default=None, ge=1)
    deskripsi_biaya: str | None = Field(default=None, min_length=1, max_length=255)
    tanggal_biaya: date | None = None
    jumlah_biaya: Money | None = None
    kategori_biaya: str | None = Field(default=None, max_length=64)


class BiayaProyekRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_biaya_proyek: int
    id_proyek: int
    deskripsi_biaya: str
    tanggal_biaya: date
    jumlah_biaya: Decimal
    kategori_biaya: str | None


class DeleteResponse(BaseModel):
    """Confirmation returned after a record is deleted."""

    message: str
