from typing import Literal

from pydantic import BaseModel


class HealthStatus(BaseModel):
    """Response model for the liveness probe."""

    status: Literal["ok"] = "ok"
