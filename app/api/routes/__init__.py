"""API routes."""

from fastapi import APIRouter

from app.api.routes import (
    auth,
    biaya_proyek,
    health,
    pembayaran_piutang,
    piutang_pelanggan,
    proyek,
)

# The finance routers are built with FinanceOfficerRoute, which checks the
# token and the petugas_keuangan role before the request body is read.
router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(
    piutang_pelanggan.router, prefix="/piutang-pelanggan", tags=["piutang-pelanggan"]
)
router.include_router(
    pembayaran_piutang.router, prefix="/pembayaran-piutang", tags=["pembayaran-piutang"]
)
router.include_router(proyek.router, prefix="/proyek", tags=["proyek"])
router.include_router(biaya_proyek.router, prefix="/biaya-proyek", tags=["biaya-proyek"])
