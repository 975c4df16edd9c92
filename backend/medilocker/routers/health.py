"""
Health check and monitoring endpoints.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from medilocker.core.database import Database
from medilocker.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/")
async def root(request: Request) -> dict:
    """API root endpoint."""
    settings = request.app.state.settings
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
        "message": "Backend is running!",
    }


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": request.app.state.settings.app_version,
    }


@router.get("/health/ready")
async def readiness_check(request: Request) -> dict:
    """
    Readiness probe - checks if the service can handle requests.
    Verifies database connectivity.
    """
    database: Database = request.app.state.database
    try:
        await database.ping()
        db_status = "connected"
    except Exception as e:
        logger.warning("Readiness check failed", error=str(e))
        db_status = "unreachable"

    is_ready = db_status == "connected"

    return {
        "status": "ready" if is_ready else "not_ready",
        "checks": {
            "database": db_status,
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """
    Liveness probe - checks if the service is alive.
    Simple check that doesn't verify dependencies.
    """
    return {
        "status": "alive",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
