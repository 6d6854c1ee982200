"""
Health check router.

Provides a simple liveness endpoint. Does not touch the database.
"""

from fastapi import APIRouter, Request

from app.interfaces.users.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns service liveness, name and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy", service=settings.project_name, version=settings.version
    )
