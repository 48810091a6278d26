from fastapi import APIRouter, Response

from app.api.schemas.health import HealthStatus

router = APIRouter()


@router.get("/health", response_model=HealthStatus, summary="Liveness probe")
def health_check() -> HealthStatus:
    """Return a fixed payload confirming the process is alive."""
    return HealthStatus()


@router.head("/health", include_in_schema=False)
def health_check_head() -> Response:
    return Response(status_code=200)
