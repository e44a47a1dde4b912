"""Domain enumerations for the festival CMS.

Enums represent fixed sets of domain values (content documents, artist
categories, live-binding states).
"""

from enum import Enum


class ContentId(str, Enum):
    """Fixed identifiers of the six singleton content documents."""

    SITE_METADATA = "site_metadata"
    HOME = "home_page"
    LINEUP = "lineup_page"
    SCHEDULE = "schedule_page"
    TICKETS = "tickets_page"
    NAVIGATION = "navigation"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid content ids as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [content_id.value for content_id in cls]

    @property
    def content_type(self) -> "ContentType":
        """Short type tag recorded on version records for this document."""
        return _CONTENT_TYPES[self]


class ContentType(str, Enum):
    """Version-record tag for each document kind."""

    METADATA = "metadata"
    HOME = "home"
    LINEUP = "lineup"
    SCHEDULE = "schedule"
    TICKETS = "tickets"
    NAVIGATION = "navigation"


_CONTENT_TYPES: dict[ContentId, ContentType] = {
    ContentId.SITE_METADATA: ContentType.METADATA,
    ContentId.HOME: ContentType.HOME,
    ContentId.LINEUP: ContentType.LINEUP,
    ContentId.SCHEDULE: ContentType.SCHEDULE,
    ContentId.TICKETS: ContentType.TICKETS,
    ContentId.NAVIGATION: ContentType.NAVIGATION,
}


class ArtistCategory(str, Enum):
    """Billing tier of a lineup artist."""

    HEADLINER = "headliner"
    FEATURED = "featured"
    OPENER = "opener"


class MoveDirection(str, Enum):
    """Direction for moving an ordered item one position."""

    UP = "up"
    DOWN = "down"


class AdminRole(str, Enum):
    """Stored admin role. Not used to gate capabilities."""

    ADMIN = "admin"
    EDITOR = "editor"


class BindingState(str, Enum):
    """Live-binding lifecycle for one watched document."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
    CLOSED = "closed"


class RegistrationStatus(str, Enum):
    """Outcome of a registration write."""

    CREATED = "created"
    UPDATED = "updated"
    DUPLICATE = "duplicate"


class OrderedList(str, Enum):
    """Ordered sub-entity lists editable through add/remove/move/reorder."""

    ARTISTS = "artists"
    SCHEDULE_EVENTS = "events"
    TICKET_TIERS = "tiers"
    NAV_ITEMS = "nav_items"


class MonitoringStatus(str, Enum):
    """Outcome of one registration monitoring check."""

    NOT_CONFIGURED = "not_configured"
    OK = "ok"
    ALERT_SENT = "alert_sent"
    ALERT_FAILED = "alert_failed"
