"""
Service status routes.
"""

from fastapi import APIRouter, Request, Response, status

from huissier.di.container import get_container

router = APIRouter(tags=["Health"])


@router.get("/")
async def root(request: Request):
    """Service banner."""
    settings = request.app.state.settings
    return {
        "service": settings.APP_NAME,
        "status": "running",
        "version": settings.APP_VERSION,
    }


@router.get("/health")
async def health_check(response: Response):
    """
    Database-backed health check.

    Returns 503 when the user store cannot be reached.
    """
    db_healthy = await get_container().database.health_check()
    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "components": {"database": "healthy" if db_healthy else "unhealthy"},
    }
