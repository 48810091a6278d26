"""API schemas package"""

from app.api.schemas.health import HealthStatus

__all__ = [
    "HealthStatus",
]
