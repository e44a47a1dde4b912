"""Public content read API.

Returns the stored document, or the static fallback when the store is not
configured, unreachable, or the document was never created.
"""

from fastapi import APIRouter

from app.api.v1.dependencies import ContentServiceDep
from app.domain.enums import ContentId
from app.schemas.content import ContentResponse

router = APIRouter()


def _public_dump(document) -> dict:
    return document.model_dump(mode="json", by_alias=True)


@router.get("", response_model=list[ContentResponse])
async def list_content(service: ContentServiceDep):
    """All six documents."""
    out = []
    for content_id in ContentId:
        document, source = await service.get_document_with_source(content_id)
        out.append(ContentResponse(content_id=content_id, source=source, data=_public_dump(document)))
    return out


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(content_id: ContentId, service: ContentServiceDep):
    """One document by its fixed id (e.g. lineup_page)."""
    document, source = await service.get_document_with_source(content_id)
    return ContentResponse(content_id=content_id, source=source, data=_public_dump(document))
