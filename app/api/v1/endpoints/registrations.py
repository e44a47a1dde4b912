"""Public registration API (the landing-page sign-up as JSON).

A duplicate is not an error: it returns 200 with status "duplicate" and
a friendly message; a new sign-up returns 201.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import RegistrationServiceDep
from app.application.dtos.registration import RegistrationOutcome, RegistrationResult
from app.core.limiter import limit_registration
from app.schemas.registration import (
    RegistrationOutcomeResponse,
    RegistrationRequest,
    RegistrationResponse,
)

router = APIRouter()


def to_registration_response(reg: RegistrationResult) -> RegistrationResponse:
    return RegistrationResponse(
        id=reg.id,
        name=reg.name,
        email=reg.email,
        phone=reg.phone,
        timestamp=reg.timestamp,
    )


def to_outcome_response(outcome: RegistrationOutcome) -> RegistrationOutcomeResponse:
    return RegistrationOutcomeResponse(
        status=outcome.status,
        message=outcome.message,
        registration=(
            to_registration_response(outcome.registration)
            if outcome.registration is not None
            else None
        ),
    )


@router.post(
    "",
    response_model=RegistrationOutcomeResponse,
    status_code=201,
    responses={200: {"description": "Already registered", "model": RegistrationOutcomeResponse}},
)
@limit_registration
async def register(
    request: Request,
    body: RegistrationRequest,
    service: RegistrationServiceDep,
):
    """Sign up for festival updates."""
    outcome = await service.register(body.name, body.email, body.phone)
    response = to_outcome_response(outcome)
    if outcome.is_duplicate:
        return JSONResponse(status_code=200, content=response.model_dump(mode="json"))
    return response
