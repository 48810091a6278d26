"""API routes package"""

from app.api.routes import health

__all__ = [
    "health",
]
