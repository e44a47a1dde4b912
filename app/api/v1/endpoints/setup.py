"""Installation setup: default content and admin creation.

Open while no admin exists (first run); afterwards both routes require
an admin session.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.v1.dependencies import (
    AuthServiceDep,
    ContentServiceDep,
    get_setup_admin,
)
from app.api.v1.endpoints.auth import to_admin_response
from app.application.dtos.admin import AdminUserResult
from app.core.limiter import limit_writes
from app.schemas.auth import AdminResponse, CreateAdminRequest
from app.schemas.content import InitializeContentResponse
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

SetupActor = Annotated[AdminUserResult | None, Depends(get_setup_admin)]


@router.get("/status")
async def setup_status(request: Request, service: ContentServiceDep):
    """What is configured, and whether the first admin still needs creating."""
    state = request.app.state
    admin_repo = state.admin_repo
    return {
        "firestore": service.store_configured,
        "authentication": state.identity_provider is not None,
        "has_admin": await admin_repo.any_exists() if admin_repo is not None else False,
    }


@router.post("/content", response_model=InitializeContentResponse)
@limit_writes
async def initialize_content(
    request: Request,
    actor: SetupActor,
    service: ContentServiceDep,
):
    """Overwrite all six documents with the default festival content."""
    written = await service.initialize_default_content()
    logger.info(
        "Default content initialized by %s", actor.email if actor else "setup (no admin yet)"
    )
    return InitializeContentResponse(initialized=written)


@router.post("/admin", response_model=AdminResponse, status_code=201)
@limit_writes
async def create_admin(
    request: Request,
    body: CreateAdminRequest,
    actor: SetupActor,
    auth_service: AuthServiceDep,
):
    """Create a Firebase Authentication account and its admin record."""
    admin = await auth_service.create_admin(body.email, body.password, body.name, body.role)
    return to_admin_response(admin)
