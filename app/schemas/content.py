"""Content document schemas.

Stored field names are camelCase (formLabels, updatedAt); models use
snake_case with camelCase aliases. Every document kind has a matching
``...Update`` model whose fields are all optional: only fields the caller
sets are written, and nested objects are replaced as a whole.
"""

from datetime import datetime
from typing import Any, ClassVar, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

from app.domain.enums import ArtistCategory, ContentId, MoveDirection
from app.domain.ordering import repack, sort_and_repack
from app.shared.utils.generators import generate_item_id


class CamelModel(BaseModel):
    """Accepts camelCase (stored/JSON) or snake_case names; dumps camelCase with by_alias."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _UpdateModel(CamelModel):
    """Base for partial updates: unknown fields rejected.

    Explicit null is accepted only where the document declares the field
    nullable (clears it); elsewhere it is rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    content_id: ClassVar[ContentId]

    @model_validator(mode="after")
    def _no_nulls(self):
        document_fields = DOCUMENT_MODELS[self.content_id].model_fields
        for name in self.model_fields_set:
            if getattr(self, name) is None and not _nullable(document_fields[name]):
                raise ValueError(f"{name} cannot be null")
        return self

    def to_write(self) -> dict[str, Any]:
        """Fields explicitly set, with stored (camelCase) names and JSON-safe values.

        Only top-level fields are filtered: a nested object or list is
        written whole, defaults (generated item ids) included.
        """
        dumped = self.model_dump(by_alias=True, mode="json")
        fields = type(self).model_fields
        return {
            key: dumped[key]
            for key in (fields[name].alias or name for name in self.model_fields_set)
        }


def _nullable(field: FieldInfo) -> bool:
    return type(None) in get_args(field.annotation)


# --- Sub-entities ---------------------------------------------------------


class Artist(CamelModel):
    id: str = Field(default_factory=generate_item_id)
    name: str = Field(..., min_length=1, max_length=200)
    time: str = ""
    category: ArtistCategory = ArtistCategory.OPENER
    image: str | None = None
    description: str | None = None
    order: int = Field(default=0, ge=0)


class ScheduleEvent(CamelModel):
    id: str = Field(default_factory=generate_item_id)
    time: str = ""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    icon: str | None = None
    order: int = Field(default=0, ge=0)


class TicketTier(CamelModel):
    id: str = Field(default_factory=generate_item_id)
    name: str = Field(..., min_length=1, max_length=200)
    price: float = Field(default=0, ge=0)
    features: list[str] = Field(default_factory=list)
    popular: bool = False
    sold_out: bool = False
    order: int = Field(default=0, ge=0)


class NavigationItem(CamelModel):
    id: str = Field(default_factory=generate_item_id)
    label: str = Field(..., min_length=1, max_length=100)
    href: str = "/"
    order: int = Field(default=0, ge=0)
    active: bool = True


# --- Nested objects -------------------------------------------------------


class FormFields(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""


class SuccessMessage(CamelModel):
    title: str = ""
    description: str = ""


class EventDetails(CamelModel):
    date: str = ""
    time: str = ""
    venue: str = ""
    address: str = ""


class InfoSection(CamelModel):
    title: str = ""
    items: list[str] = Field(default_factory=list)


class LinkButton(CamelModel):
    label: str = ""
    href: str = "/"


class NavEventInfo(CamelModel):
    date: str = ""
    venue: str = ""


# --- Documents ------------------------------------------------------------


class SiteMetadata(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.SITE_METADATA

    id: str = ContentId.SITE_METADATA.value
    title: str = ""
    description: str = ""
    keywords: list[str] = Field(default_factory=list)
    og_image: str | None = None
    updated_at: datetime | None = None


class HomePage(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.HOME

    id: str = ContentId.HOME.value
    headline: str = ""
    subheadline: str = ""
    description: str = ""
    form_title: str | None = None
    form_labels: FormFields = Field(default_factory=FormFields)
    form_placeholders: FormFields = Field(default_factory=FormFields)
    submit_button: str = ""
    success_message: SuccessMessage = Field(default_factory=SuccessMessage)
    trust_builders: list[str] = Field(default_factory=list)
    event_details: EventDetails = Field(default_factory=EventDetails)
    updated_at: datetime | None = None


class LineupPage(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.LINEUP

    id: str = ContentId.LINEUP.value
    title: str = ""
    subtitle: str = ""
    artists: list[Artist] = Field(default_factory=list)
    footer_text: str = ""
    updated_at: datetime | None = None

    @field_validator("artists")
    @classmethod
    def _sort_artists(cls, v: list[Artist]) -> list[Artist]:
        return sort_and_repack(v)


class SchedulePage(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.SCHEDULE

    id: str = ContentId.SCHEDULE.value
    title: str = ""
    date: str = ""
    events: list[ScheduleEvent] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    updated_at: datetime | None = None

    @field_validator("events")
    @classmethod
    def _sort_events(cls, v: list[ScheduleEvent]) -> list[ScheduleEvent]:
        return sort_and_repack(v)


class TicketsPage(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.TICKETS

    id: str = ContentId.TICKETS.value
    title: str = ""
    subtitle: str = ""
    tickets_enabled: bool = False
    tiers: list[TicketTier] = Field(default_factory=list)
    info_section: InfoSection = Field(default_factory=InfoSection)
    contact_email: str = ""
    updated_at: datetime | None = None

    @field_validator("tiers")
    @classmethod
    def _sort_tiers(cls, v: list[TicketTier]) -> list[TicketTier]:
        return sort_and_repack(v)


class Navigation(CamelModel):
    content_id: ClassVar[ContentId] = ContentId.NAVIGATION

    id: str = ContentId.NAVIGATION.value
    title: str = ""
    items: list[NavigationItem] = Field(default_factory=list)
    cta_button: LinkButton = Field(default_factory=LinkButton)
    event_info: NavEventInfo = Field(default_factory=NavEventInfo)
    updated_at: datetime | None = None

    @field_validator("items")
    @classmethod
    def _sort_items(cls, v: list[NavigationItem]) -> list[NavigationItem]:
        return sort_and_repack(v)

    @property
    def active_items(self) -> list[NavigationItem]:
        return [item for item in self.items if item.active]


# --- Partial updates ------------------------------------------------------


class SiteMetadataUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.SITE_METADATA

    title: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    og_image: str | None = None


class HomePageUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.HOME

    headline: str | None = None
    subheadline: str | None = None
    description: str | None = None
    form_title: str | None = None
    form_labels: FormFields | None = None
    form_placeholders: FormFields | None = None
    submit_button: str | None = None
    success_message: SuccessMessage | None = None
    trust_builders: list[str] | None = None
    event_details: EventDetails | None = None


class LineupPageUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.LINEUP

    title: str | None = None
    subtitle: str | None = None
    artists: list[Artist] | None = None
    footer_text: str | None = None

    @field_validator("artists")
    @classmethod
    def _repack_artists(cls, v: list[Artist] | None) -> list[Artist] | None:
        return repack(v) if v is not None else v


class SchedulePageUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.SCHEDULE

    title: str | None = None
    date: str | None = None
    events: list[ScheduleEvent] | None = None
    notes: list[str] | None = None

    @field_validator("events")
    @classmethod
    def _repack_events(cls, v: list[ScheduleEvent] | None) -> list[ScheduleEvent] | None:
        return repack(v) if v is not None else v


class TicketsPageUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.TICKETS

    title: str | None = None
    subtitle: str | None = None
    tickets_enabled: bool | None = None
    tiers: list[TicketTier] | None = None
    info_section: InfoSection | None = None
    contact_email: str | None = None

    @field_validator("tiers")
    @classmethod
    def _repack_tiers(cls, v: list[TicketTier] | None) -> list[TicketTier] | None:
        return repack(v) if v is not None else v


class NavigationUpdate(_UpdateModel):
    content_id: ClassVar[ContentId] = ContentId.NAVIGATION

    title: str | None = None
    items: list[NavigationItem] | None = None
    cta_button: LinkButton | None = None
    event_info: NavEventInfo | None = None

    @field_validator("items")
    @classmethod
    def _repack_items(cls, v: list[NavigationItem] | None) -> list[NavigationItem] | None:
        return repack(v) if v is not None else v


ContentDocument = SiteMetadata | HomePage | LineupPage | SchedulePage | TicketsPage | Navigation
ContentUpdate = (
    SiteMetadataUpdate
    | HomePageUpdate
    | LineupPageUpdate
    | SchedulePageUpdate
    | TicketsPageUpdate
    | NavigationUpdate
)

DOCUMENT_MODELS: dict[ContentId, type[ContentDocument]] = {
    model.content_id: model
    for model in (SiteMetadata, HomePage, LineupPage, SchedulePage, TicketsPage, Navigation)
}

UPDATE_MODELS: dict[ContentId, type[ContentUpdate]] = {
    model.content_id: model
    for model in (
        SiteMetadataUpdate,
        HomePageUpdate,
        LineupPageUpdate,
        SchedulePageUpdate,
        TicketsPageUpdate,
        NavigationUpdate,
    )
}


# --- API envelopes --------------------------------------------------------


class ContentResponse(BaseModel):
    """Public read of one document: stored copy, or fallback when unavailable."""

    content_id: ContentId
    source: Literal["store", "fallback"]
    data: dict[str, Any]


class VersionRecordResponse(BaseModel):
    """One entry of a document's version history."""

    id: str
    content_type: str
    content_id: str
    data: dict[str, Any]
    changed_by: str
    changed_at: datetime | None
    change_note: str | None = None


class ItemMoveRequest(BaseModel):
    """Move an ordered item one position."""

    direction: MoveDirection


class ItemReorderRequest(BaseModel):
    """Drag-to-reorder: every current item id, in the new order."""

    ids: list[str] = Field(..., min_length=1)


class InitializeContentResponse(BaseModel):
    """Result of writing the default content set."""

    initialized: list[ContentId]
