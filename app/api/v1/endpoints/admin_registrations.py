"""Admin registrations API: list, add, edit, delete, CSV export."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from app.api.v1.dependencies import CurrentAdmin, RegistrationServiceDep
from app.api.v1.endpoints.registrations import to_outcome_response, to_registration_response
from app.core.limiter import limit_writes
from app.schemas.auth import MessageResponse
from app.schemas.registration import (
    RegistrationListResponse,
    RegistrationOutcomeResponse,
    RegistrationRequest,
)

router = APIRouter()


@router.get("", response_model=RegistrationListResponse)
async def list_registrations(admin: CurrentAdmin, service: RegistrationServiceDep):
    """All registrations, newest first."""
    registrations = await service.list_registrations()
    return RegistrationListResponse(
        items=[to_registration_response(r) for r in registrations],
        total=len(registrations),
    )


@router.get("/export")
async def export_registrations(admin: CurrentAdmin, service: RegistrationServiceDep) -> Response:
    """Download every registration as CSV. 404 when there are none."""
    filename, text = await service.export_csv()
    return Response(
        content=text,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", response_model=RegistrationOutcomeResponse, status_code=201)
@limit_writes
async def add_registration(
    request: Request,
    body: RegistrationRequest,
    admin: CurrentAdmin,
    service: RegistrationServiceDep,
):
    """Add a registration by hand (same duplicate gate as the public form)."""
    outcome = await service.register(body.name, body.email, body.phone)
    response = to_outcome_response(outcome)
    if outcome.is_duplicate:
        return JSONResponse(status_code=200, content=response.model_dump(mode="json"))
    return response


@router.put("/{registration_id}", response_model=RegistrationOutcomeResponse)
@limit_writes
async def edit_registration(
    request: Request,
    registration_id: str,
    body: RegistrationRequest,
    admin: CurrentAdmin,
    service: RegistrationServiceDep,
):
    """Replace name, e-mail and phone; the record itself is excluded from the duplicate check."""
    outcome = await service.edit(registration_id, body.name, body.email, body.phone)
    return to_outcome_response(outcome)


@router.delete("/{registration_id}", response_model=MessageResponse)
@limit_writes
async def delete_registration(
    request: Request,
    registration_id: str,
    admin: CurrentAdmin,
    service: RegistrationServiceDep,
):
    await service.delete(registration_id)
    return MessageResponse(message="Registration deleted")
