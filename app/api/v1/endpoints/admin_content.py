"""Admin content API: typed partial updates, ordered lists, history, preview.

Every write goes through ContentService, so version records and cache
invalidation apply uniformly. Requires an admin session.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError as PydanticValidationError

from app.api.v1.dependencies import ContentServiceDep, CurrentAdmin
from app.application.dtos.content import VersionRecordResult
from app.core.limiter import limit_writes
from app.domain.enums import ContentId, OrderedList
from app.domain.exceptions import ValidationException
from app.pages.site import render_preview
from app.schemas.content import (
    DOCUMENT_MODELS,
    ContentResponse,
    HomePageUpdate,
    ItemMoveRequest,
    ItemReorderRequest,
    LineupPageUpdate,
    NavigationUpdate,
    SchedulePageUpdate,
    SiteMetadataUpdate,
    TicketsPageUpdate,
    VersionRecordResponse,
)

router = APIRouter()

ChangeNote = Annotated[str | None, Query(max_length=500, description="Optional note stored on the version record")]


def to_version_response(record: VersionRecordResult) -> VersionRecordResponse:
    return VersionRecordResponse(
        id=record.id,
        content_type=record.content_type,
        content_id=record.content_id,
        data=record.data,
        changed_by=record.changed_by,
        changed_at=record.changed_at,
        change_note=record.change_note,
    )


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


# --- documents -------------------------------------------------------------


@router.get("/content/{content_id}", response_model=ContentResponse)
async def get_document(content_id: ContentId, admin: CurrentAdmin, service: ContentServiceDep):
    """Current document (cache-backed, fallback when absent)."""
    document, source = await service.get_document_with_source(content_id)
    return ContentResponse(content_id=content_id, source=source, data=_dump(document))


@router.patch("/content/site_metadata", response_model=VersionRecordResponse)
@limit_writes
async def update_site_metadata(
    request: Request,
    body: SiteMetadataUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.patch("/content/home_page", response_model=VersionRecordResponse)
@limit_writes
async def update_home_page(
    request: Request,
    body: HomePageUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.patch("/content/lineup_page", response_model=VersionRecordResponse)
@limit_writes
async def update_lineup_page(
    request: Request,
    body: LineupPageUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.patch("/content/schedule_page", response_model=VersionRecordResponse)
@limit_writes
async def update_schedule_page(
    request: Request,
    body: SchedulePageUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.patch("/content/tickets_page", response_model=VersionRecordResponse)
@limit_writes
async def update_tickets_page(
    request: Request,
    body: TicketsPageUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.patch("/content/navigation", response_model=VersionRecordResponse)
@limit_writes
async def update_navigation(
    request: Request,
    body: NavigationUpdate,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    note: ChangeNote = None,
):
    record = await service.update_document(body, admin.id, change_note=note)
    return to_version_response(record)


@router.get("/content/{content_id}/history", response_model=list[VersionRecordResponse])
async def get_history(content_id: ContentId, admin: CurrentAdmin, service: ContentServiceDep):
    """Version records for one document, newest first."""
    records = await service.get_version_history(content_id)
    return [to_version_response(r) for r in records]


# --- ordered lists ---------------------------------------------------------


@router.get("/lists/{list_name}")
async def list_items(list_name: OrderedList, admin: CurrentAdmin, service: ContentServiceDep):
    """Items of an ordered list (artists, events, tiers, nav_items), in order."""
    return [_dump(item) for item in await service.get_items(list_name)]


@router.post("/lists/{list_name}", status_code=201)
@limit_writes
async def add_item(
    request: Request,
    list_name: OrderedList,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    body: Annotated[dict[str, Any], Body(...)],
):
    """Append an item; it gets order N+1 and a generated id when none is given."""
    item = await service.add_item(list_name, body, admin.id)
    return _dump(item)


@router.delete("/lists/{list_name}/{item_id}")
@limit_writes
async def remove_item(
    request: Request,
    list_name: OrderedList,
    item_id: str,
    admin: CurrentAdmin,
    service: ContentServiceDep,
):
    """Remove an item; the rest are renumbered 1..N."""
    return [_dump(item) for item in await service.remove_item(list_name, item_id, admin.id)]


@router.post("/lists/{list_name}/{item_id}/move")
@limit_writes
async def move_item(
    request: Request,
    list_name: OrderedList,
    item_id: str,
    body: ItemMoveRequest,
    admin: CurrentAdmin,
    service: ContentServiceDep,
):
    """Swap an item with its neighbour; no-op at either end."""
    items = await service.move_item(list_name, item_id, body.direction, admin.id)
    return [_dump(item) for item in items]


@router.put("/lists/{list_name}/order")
@limit_writes
async def reorder_items(
    request: Request,
    list_name: OrderedList,
    body: ItemReorderRequest,
    admin: CurrentAdmin,
    service: ContentServiceDep,
):
    """Drag-to-reorder: body lists every current id in the new order."""
    items = await service.reorder_items(list_name, body.ids, admin.id)
    return [_dump(item) for item in items]


# --- preview ---------------------------------------------------------------


@router.post("/preview/{content_id}", response_class=HTMLResponse)
async def preview(
    content_id: ContentId,
    admin: CurrentAdmin,
    service: ContentServiceDep,
    body: Annotated[dict[str, Any], Body(...)],
) -> HTMLResponse:
    """Render the public page from an unsaved document. Nothing is written."""
    try:
        document = DOCUMENT_MODELS[content_id].model_validate({**body, "id": content_id.value})
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or None
        raise ValidationException(first.get("msg", "Invalid document"), field=field) from e
    documents = {cid: await service.get_document_or_fallback(cid) for cid in ContentId}
    return HTMLResponse(render_preview(document, documents))
