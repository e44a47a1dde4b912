"""Public site routes: landing page with sign-up form, lineup, schedule, tickets.

Pages always render: documents come from the store when reachable and
from the static fallback set otherwise.
"""

import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import get_content_service, get_registration_service
from app.application.services.content_service import ContentService
from app.application.services.registration_service import RegistrationService
from app.core.limiter import limit_registration
from app.domain.enums import ContentId
from app.domain.exceptions import ServiceNotConfiguredException, ValidationException
from app.pages.site import (
    FormNotice,
    FormValues,
    render_home,
    render_lineup,
    render_schedule,
    render_tickets,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]


async def _load(service: ContentService, page: ContentId):
    """Page document plus navigation and site metadata, fetched concurrently."""
    return await asyncio.gather(
        service.get_document_or_fallback(page),
        service.get_document_or_fallback(ContentId.NAVIGATION),
        service.get_document_or_fallback(ContentId.SITE_METADATA),
    )


@router.get("/", response_class=HTMLResponse)
async def home_page(service: ContentServiceDep) -> HTMLResponse:
    home, navigation, metadata = await _load(service, ContentId.HOME)
    return HTMLResponse(render_home(home, navigation, metadata))


@router.post("/", response_class=HTMLResponse)
@limit_registration
async def submit_registration(
    request: Request,
    service: ContentServiceDep,
    registrations: Annotated[RegistrationService, Depends(get_registration_service)],
    name: Annotated[str, Form(max_length=200)] = "",
    email: Annotated[str, Form(max_length=320)] = "",
    phone: Annotated[str, Form(max_length=40)] = "",
) -> HTMLResponse:
    """Handle the landing-page form; re-render with a notice."""
    home, navigation, metadata = await _load(service, ContentId.HOME)
    values = FormValues(name=name, email=email, phone=phone)
    try:
        outcome = await registrations.register(name, email, phone)
    except ValidationException as e:
        notice = FormNotice("Please check the form", e.message, error=True)
        return HTMLResponse(render_home(home, navigation, metadata, notice, values), status_code=400)
    except ServiceNotConfiguredException:
        logger.error("Registration submitted but Firestore is not configured")
        notice = FormNotice(
            "Sign-ups are unavailable", "Please try again later.", error=True
        )
        return HTMLResponse(render_home(home, navigation, metadata, notice, values), status_code=503)
    except Exception:
        logger.exception("Registration write failed")
        notice = FormNotice(
            "Something went wrong",
            "There was an error submitting your registration. Please try again.",
            error=True,
        )
        return HTMLResponse(render_home(home, navigation, metadata, notice, values), status_code=503)
    if outcome.is_duplicate:
        notice = FormNotice("Already aboard", outcome.message)
    else:
        notice = FormNotice(home.success_message.title, home.success_message.description)
    return HTMLResponse(render_home(home, navigation, metadata, notice))


@router.get("/lineup", response_class=HTMLResponse)
async def lineup_page(service: ContentServiceDep) -> HTMLResponse:
    lineup, navigation, metadata = await _load(service, ContentId.LINEUP)
    return HTMLResponse(render_lineup(lineup, navigation, metadata))


@router.get("/schedule", response_class=HTMLResponse)
async def schedule_page(service: ContentServiceDep) -> HTMLResponse:
    schedule, navigation, metadata = await _load(service, ContentId.SCHEDULE)
    return HTMLResponse(render_schedule(schedule, navigation, metadata))


@router.get("/tickets", response_class=HTMLResponse)
async def tickets_page(service: ContentServiceDep) -> HTMLResponse:
    tickets, navigation, metadata = await _load(service, ContentId.TICKETS)
    return HTMLResponse(render_tickets(tickets, navigation, metadata))
