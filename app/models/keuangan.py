"""ORM models for receivables, receivable payments, projects and project costs."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, Text

from app.models.base import Base

# Rupiah amounts: 13 integer digits, 2 decimals.
MONEY = Numeric(15, 2)


class PiutangPelanggan(Base):
    """Customer receivable: one invoice owed by a customer."""

    __tablename__ = "piutang_pelanggan"

    id_piutang_pelanggan = Column(Integer, primary_key=True, autoincrement=True)
    nama_pelanggan = Column(String(255), nullable=False)
    nomor_faktur = Column(String(64), nullable=True, index=True)
    tanggal_faktur = Column(Date, nullable=False)
    tanggal_jatuh_tempo = Column(Date, nullable=True)
    jumlah_piutang = Column(MONEY, nullable=False)
    status_piutang = Column(String(32), nullable=False, default="belum_lunas")
    keterangan = Column(Text, nullable=True)


class PembayaranPiutang(Base):
    """Payment received against a customer receivable."""

    __tablename__ = "pembayaran_piutang"

    id_pembayaran_piutang = Column(Integer, primary_key=True, autoincrement=True)
    id_piutang_pelanggan = Column(
        Integer,
        ForeignKey("piutang_pelanggan.id_piutang_pelanggan", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tanggal_pembayaran = Column(Date, nullable=False)
    jumlah_pembayaran = Column(MONEY, nullable=False)
    metode_pembayaran = Column(String(64), nullable=True)
    keterangan = Column(Text, nullable=True)


class Proyek(Base):
    """Project whose costs are tracked against a budget."""

    __tablename__ = "proyek"

    id_proyek = Column(Integer, primary_key=True, autoincrement=True)
    nama_proyek = Column(String(255), nullable=False)
    deskripsi = Column(Text, nullable=True)
    tanggal_mulai = Column(Date, nullable=True)
    tanggal_selesai = Column(Date, nullable=True)
    anggaran = Column(MONEY, nullable=True)
    status_proyek = Column(String(32), nullable=False, default="berjalan")


class BiayaProyek(Base):
    """Single cost line booked to a project."""

    __tablename__ = "biaya_proyek"

    id_biaya_proyek = Column(Integer, primary_key=True, autoincrement=True)
    id_proyek = Column(
        Integer,
        ForeignKey("proyek.id_proyek", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    deskripsi_biaya = Column(String(255), nullable=False)
    tanggal_biaya = Column(Date, nullable=False)
    jumlah_biaya = Column(MONEY, nullable=False)
    kategori_biaya = Column(String(64), nullable=True)
