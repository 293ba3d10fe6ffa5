"""Response model for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """The process is up; `database` says whether the store answered."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"] = Field(
        description="Outcome of SELECT 1 on the configured DATABASE_URL"
    )
