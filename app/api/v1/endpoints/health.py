"""Health check endpoints. Used for liveness and readiness checks."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Not ready (Firestore not configured)", "model": ReadinessErrorResponse}},
)
async def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the content store is configured; 503 otherwise.

    The public site still renders fallback content when not ready; this
    check tells the orchestrator that admin writes will fail.
    """
    settings = get_settings()
    if not request.app.state.content_service.store_configured:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(
                status="not_ready",
                message="Firestore is not configured",
            ).model_dump(),
        )
    return ReadinessResponse(cache_backend=settings.content_cache_backend)
