"""
API routers package.
"""
from medilocker.routers.activities import router as activities_router
from medilocker.routers.admin import router as admin_router
from medilocker.routers.auth import router as auth_router
from medilocker.routers.health import router as health_router
from medilocker.routers.profile import router as profile_router

__all__ = [
    "health_router",
    "auth_router",
    "profile_router",
    "activities_router",
    "admin_router",
]
