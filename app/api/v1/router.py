"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
The cron router is mounted by main under /api/cron.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    admin_content,
    admin_registrations,
    auth,
    content,
    health,
    live,
    monitoring,
    registrations,
    setup,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(content.router, prefix="/content", tags=["content"])
api_router.include_router(
    registrations.router, prefix="/registrations", tags=["registrations"]
)
api_router.include_router(admin_content.router, prefix="/admin", tags=["admin-content"])
api_router.include_router(
    admin_registrations.router,
    prefix="/admin/registrations",
    tags=["admin-registrations"],
)
api_router.include_router(setup.router, prefix="/setup", tags=["setup"])
api_router.include_router(monitoring.router, prefix="/monitoring", tags=["monitoring"])
api_router.include_router(live.router, prefix="/live", tags=["live"])

cron_router = APIRouter()
cron_router.include_router(monitoring.cron_router, tags=["cron"])
