"""Content service: read-through cache accessors and versioned writers.

Reads never raise: a missing document or a failed fetch returns None and
the caller substitutes fallback content. Writes merge only the fields a
typed update sets, append a version record, and always clear the cache,
also when the write fails, so the next read goes back to the store.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal, cast

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.application.dtos.content import VersionRecordCreate, VersionRecordResult
from app.application.interfaces.repositories import (
    IContentRepository,
    IVersionRepository,
)
from app.application.interfaces.services import IContentCache
from app.application.services.content_defaults import default_content, fallback_content
from app.domain import ordering
from app.domain.enums import ContentId, MoveDirection, OrderedList
from app.domain.exceptions import (
    ContentWriteException,
    ResourceNotFoundException,
    ServiceNotConfiguredException,
    ValidationException,
)
from app.schemas.content import (
    DOCUMENT_MODELS,
    Artist,
    ContentDocument,
    ContentUpdate,
    HomePage,
    HomePageUpdate,
    LineupPage,
    LineupPageUpdate,
    Navigation,
    NavigationItem,
    NavigationUpdate,
    ScheduleEvent,
    SchedulePage,
    SchedulePageUpdate,
    SiteMetadata,
    SiteMetadataUpdate,
    TicketsPage,
    TicketsPageUpdate,
    TicketTier,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ContentSource = Literal["store", "fallback"]
ChangeNotifier = Callable[[ContentId], Awaitable[None]]


@dataclass(frozen=True)
class _ListBinding:
    """Where an ordered list lives and how to write it back."""

    content_id: ContentId
    field: str
    item_model: type[BaseModel]
    update_model: type[ContentUpdate]
    kind: str


ORDERED_LISTS: dict[OrderedList, _ListBinding] = {
    OrderedList.ARTISTS: _ListBinding(ContentId.LINEUP, "artists", Artist, LineupPageUpdate, "artist"),
    OrderedList.SCHEDULE_EVENTS: _ListBinding(ContentId.SCHEDULE, "events", ScheduleEvent, SchedulePageUpdate, "schedule event"),
    OrderedList.TICKET_TIERS: _ListBinding(ContentId.TICKETS, "tiers", TicketTier, TicketsPageUpdate, "ticket tier"),
    OrderedList.NAV_ITEMS: _ListBinding(ContentId.NAVIGATION, "items", NavigationItem, NavigationUpdate, "navigation item"),
}


class ContentService:
    """Accessors and writers for the six content documents.

    Owns the cache instance it is given. Repositories are None when
    Firestore is not configured: reads then return None and writes raise
    ServiceNotConfiguredException.
    """

    def __init__(
        self,
        content_repo: IContentRepository | None,
        version_repo: IVersionRepository | None,
        cache: IContentCache,
        on_change: ChangeNotifier | None = None,
    ) -> None:
        self._content = content_repo
        self._versions = version_repo
        self._cache = cache
        self._on_change = on_change

    @property
    def store_configured(self) -> bool:
        return self._content is not None

    def set_change_notifier(self, on_change: ChangeNotifier | None) -> None:
        """Attach the in-process change feed (done at startup)."""
        self._on_change = on_change

    # --- reads ---------------------------------------------------------

    async def get_document(self, content_id: ContentId) -> ContentDocument | None:
        """Cache first; on miss fetch by id, cache and return. Never raises."""
        model = DOCUMENT_MODELS[content_id]
        key = content_id.value
        cached = await self._cache.get(key)
        if cached is not None:
            try:
                return model.model_validate(cached)
            except PydanticValidationError:
                logger.warning("Discarding unreadable cache entry for %s", key)
        if self._content is None:
            return None
        try:
            snapshot = await self._content.get(content_id)
            if snapshot is None:
                logger.info("Content document %s does not exist yet", key)
                return None
            document = model.model_validate({**snapshot.data, "id": key})
        except Exception:
            logger.exception("Error fetching content document %s", key)
            return None
        await self._cache.set(key, document.model_dump(mode="json", by_alias=True))
        return document

    async def get_document_with_source(
        self, content_id: ContentId
    ) -> tuple[ContentDocument, ContentSource]:
        """Stored document, or the static fallback when absent or unreadable."""
        document = await self.get_document(content_id)
        if document is not None:
            return document, "store"
        return fallback_content()[content_id], "fallback"

    async def get_document_or_fallback(self, content_id: ContentId) -> ContentDocument:
        document, _ = await self.get_document_with_source(content_id)
        return document

    async def get_site_metadata(self) -> SiteMetadata | None:
        return cast(SiteMetadata | None, await self.get_document(ContentId.SITE_METADATA))

    async def get_home_page(self) -> HomePage | None:
        return cast(HomePage | None, await self.get_document(ContentId.HOME))

    async def get_lineup_page(self) -> LineupPage | None:
        return cast(LineupPage | None, await self.get_document(ContentId.LINEUP))

    async def get_schedule_page(self) -> SchedulePage | None:
        return cast(SchedulePage | None, await self.get_document(ContentId.SCHEDULE))

    async def get_tickets_page(self) -> TicketsPage | None:
        return cast(TicketsPage | None, await self.get_document(ContentId.TICKETS))

    async def get_navigation(self) -> Navigation | None:
        return cast(Navigation | None, await self.get_document(ContentId.NAVIGATION))

    # --- writes --------------------------------------------------------

    def _require_store(self) -> IContentRepository:
        if self._content is None:
            raise ServiceNotConfiguredException(
                "Firestore", "set FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH"
            )
        return self._content

    async def update_document(
        self,
        update: ContentUpdate,
        changed_by: str,
        *,
        content_id: ContentId | None = None,
        change_note: str | None = None,
    ) -> VersionRecordResult:
        """Merge-write the fields set on update, then append a version record.

        Args:
            update: Typed partial update; its kind determines the document.
            changed_by: Admin uid recorded on the version.
            content_id: Optional target id; must match the update's kind.
            change_note: Optional note stored on the version record.

        Returns:
            The appended version record.

        Raises:
            ValidationException: Empty update or content id mismatch.
            ServiceNotConfiguredException: Firestore not configured.
            ContentWriteException: The store rejected the write.
        """
        target = update.content_id
        if content_id is not None and content_id != target:
            raise ValidationException(
                f"Update for {target.value} cannot be applied to {content_id.value}",
                field="content_id",
            )
        payload = update.to_write()
        if not payload:
            raise ValidationException("No fields to update")
        repo = self._require_store()
        try:
            try:
                await repo.merge(target, payload)
            except Exception as e:
                logger.exception("Content write failed for %s", target.value)
                raise ContentWriteException(target.value, str(e) or type(e).__name__) from e
            version = await self._append_version(target, payload, changed_by, change_note)
        finally:
            await self._cache.clear()
        logger.info(
            "Content %s updated by %s (fields=%s)",
            target.value,
            changed_by,
            sorted(payload),
        )
        await self._notify(target)
        return version

    async def _append_version(
        self,
        content_id: ContentId,
        payload: dict[str, Any],
        changed_by: str,
        change_note: str | None,
    ) -> VersionRecordResult:
        if self._versions is None:
            raise ServiceNotConfiguredException("Firestore")
        record = VersionRecordCreate(
            content_type=content_id.content_type,
            content_id=content_id,
            data=payload,
            changed_by=changed_by,
            change_note=change_note,
        )
        try:
            return await self._versions.append(record)
        except Exception as e:
            logger.exception("Version record failed for %s", content_id.value)
            raise ContentWriteException(
                content_id.value, "saved, but the version record could not be written"
            ) from e

    async def update_site_metadata(self, update: SiteMetadataUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    async def update_home_page(self, update: HomePageUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    async def update_lineup_page(self, update: LineupPageUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    async def update_schedule_page(self, update: SchedulePageUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    async def update_tickets_page(self, update: TicketsPageUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    async def update_navigation(self, update: NavigationUpdate, changed_by: str) -> VersionRecordResult:
        return await self.update_document(update, changed_by)

    # --- ordered sub-entity lists ----------------------------------------

    async def _load_for_write(self, content_id: ContentId) -> ContentDocument:
        """Read the current document straight from the store (no cache)."""
        repo = self._require_store()
        try:
            snapshot = await repo.get(content_id)
        except Exception as e:
            logger.exception("Could not read %s before writing", content_id.value)
            raise ContentWriteException(content_id.value, str(e) or type(e).__name__) from e
        if snapshot is None:
            raise ResourceNotFoundException("content", content_id.value)
        return DOCUMENT_MODELS[content_id].model_validate(
            {**snapshot.data, "id": content_id.value}
        )

    async def get_items(self, list_name: OrderedList) -> list[Any]:
        """Current items of an ordered list, in order (fresh read)."""
        binding = ORDERED_LISTS[list_name]
        document = await self._load_for_write(binding.content_id)
        return list(getattr(document, binding.field))

    async def _write_items(
        self, binding: _ListBinding, items: list[Any], changed_by: str
    ) -> list[Any]:
        update = binding.update_model(**{binding.field: items})
        await self.update_document(update, changed_by)
        return list(getattr(update, binding.field))

    async def add_item(
        self, list_name: OrderedList, item: BaseModel | dict[str, Any], changed_by: str
    ) -> Any:
        """Append an item at position N+1; returns the stored item."""
        binding = ORDERED_LISTS[list_name]
        if isinstance(item, dict):
            try:
                item = binding.item_model.model_validate(item)
            except PydanticValidationError as e:
                first = e.errors()[0]
                field = ".".join(str(p) for p in first.get("loc", ())) or None
                raise ValidationException(first.get("msg", "Invalid item"), field=field) from e
        items = await self.get_items(list_name)
        written = await self._write_items(binding, ordering.add_item(items, item), changed_by)
        return written[-1]

    async def remove_item(self, list_name: OrderedList, item_id: str, changed_by: str) -> list[Any]:
        binding = ORDERED_LISTS[list_name]
        items = await self.get_items(list_name)
        updated = ordering.remove_item(items, item_id, binding.kind)
        return await self._write_items(binding, updated, changed_by)

    async def move_item(
        self,
        list_name: OrderedList,
        item_id: str,
        direction: MoveDirection,
        changed_by: str,
    ) -> list[Any]:
        binding = ORDERED_LISTS[list_name]
        items = await self.get_items(list_name)
        updated = ordering.move_item(items, item_id, direction, binding.kind)
        return await self._write_items(binding, updated, changed_by)

    async def reorder_items(
        self, list_name: OrderedList, ordered_ids: list[str], changed_by: str
    ) -> list[Any]:
        binding = ORDERED_LISTS[list_name]
        items = await self.get_items(list_name)
        updated = ordering.reorder_items(items, ordered_ids)
        return await self._write_items(binding, updated, changed_by)

    # --- setup / lifecycle ------------------------------------------------

    async def initialize_default_content(self) -> list[ContentId]:
        """Overwrite all six documents with the default seed. No version records."""
        repo = self._require_store()
        written: list[ContentId] = []
        try:
            for content_id, document in default_content().items():
                data = document.model_dump(mode="json", by_alias=True, exclude={"updated_at"})
                try:
                    await repo.replace(content_id, data)
                except Exception as e:
                    logger.exception("Default content write failed for %s", content_id.value)
                    raise ContentWriteException(content_id.value, str(e) or type(e).__name__) from e
                written.append(content_id)
        finally:
            await self._cache.clear()
        logger.info("Default content initialized (%d documents)", len(written))
        for content_id in written:
            await self._notify(content_id)
        return written

    async def clear_cache(self) -> None:
        await self._cache.clear()

    async def _notify(self, content_id: ContentId) -> None:
        if self._on_change is None:
            return
        try:
            await self._on_change(content_id)
        except Exception:
            logger.exception("Change notification failed for %s", content_id.value)

    # --- version log -----------------------------------------------------

    async def get_version_history(self, content_id: ContentId) -> list[VersionRecordResult]:
        """All versions of one document, newest first.

        Fetches the whole log and filters here (no composite index needed).
        """
        if self._versions is None:
            raise ServiceNotConfiguredException("Firestore")
        records = await self._versions.list_newest_first()
        return [r for r in records if r.content_id == content_id.value]
