"""Public liveness endpoint for the Keuangan API."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """No token needed. Reports the APP_ENV and whether SELECT 1 succeeds."""
    connected = check_db_connected(db)
    if not connected:
        logger.warning("Health probe could not reach the database")
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if connected else "disconnected",
    )
