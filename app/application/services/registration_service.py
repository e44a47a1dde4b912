"""Registration service: dedup gate, admin CRUD, and CSV export.

The duplicate check is read-then-write with no transaction around it:
two identical submissions racing each other can both be stored.
"""

from __future__ import annotations

import csv
import io
from datetime import datetime
from zoneinfo import ZoneInfo

from app.application.dtos.registration import RegistrationOutcome, RegistrationResult
from app.application.interfaces.repositories import IRegistrationRepository
from app.core.constants import CSV_EXPORT_HEADERS, DUPLICATE_REGISTRATION_MESSAGE
from app.domain.enums import RegistrationStatus
from app.domain.exceptions import ResourceNotFoundException, ServiceNotConfiguredException
from app.domain.value_objects import RegistrantIdentity
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc, utc_now

logger = get_logger(__name__)


def _csv_timestamp(value: datetime | None, tz_name: str) -> str:
    """Format like 10/11/2025, 5:00:00 PM in the festival's timezone."""
    if value is None:
        return ""
    local = ensure_utc(value).astimezone(ZoneInfo(tz_name))
    hour = local.strftime("%I").lstrip("0") or "12"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.strftime('%M:%S %p')}"


class RegistrationService:
    """Attendee registrations behind a duplicate-check gate."""

    def __init__(
        self,
        registration_repo: IRegistrationRepository | None,
        timezone: str = "America/Los_Angeles",
    ) -> None:
        self._repo = registration_repo
        self._timezone = timezone

    def _require_store(self) -> IRegistrationRepository:
        if self._repo is None:
            raise ServiceNotConfiguredException("Firestore")
        return self._repo

    async def find_duplicates(
        self, identity: RegistrantIdentity, exclude_id: str | None = None
    ) -> list[str]:
        """Ids matching (name, email) or, when a phone is given, (name, phone)."""
        repo = self._require_store()
        matches = set(await repo.find_ids(identity.name, "email", identity.email))
        if identity.has_phone:
            matches.update(await repo.find_ids(identity.name, "phone", identity.phone))
        if exclude_id is not None:
            matches.discard(exclude_id)
        return sorted(matches)

    async def register(self, name: str, email: str, phone: str = "") -> RegistrationOutcome:
        """Gate then insert. Used by the public form and by admin add.

        Raises:
            ValidationException: Missing name or malformed e-mail.
            ServiceNotConfiguredException: Firestore not configured.
        """
        identity = RegistrantIdentity(name=name, email=email, phone=phone)
        if await self.find_duplicates(identity):
            logger.info("Duplicate registration ignored for %s", identity.email)
            return RegistrationOutcome(
                status=RegistrationStatus.DUPLICATE,
                message=DUPLICATE_REGISTRATION_MESSAGE,
            )
        registration = await self._require_store().create(
            identity.name, identity.email, identity.phone
        )
        logger.info("Registration %s created", registration.id)
        return RegistrationOutcome(
            status=RegistrationStatus.CREATED,
            message="You're on the list!",
            registration=registration,
        )

    async def edit(
        self, registration_id: str, name: str, email: str, phone: str = ""
    ) -> RegistrationOutcome:
        """Gate (excluding the edited record) then update."""
        repo = self._require_store()
        if await repo.get_by_id(registration_id) is None:
            raise ResourceNotFoundException("registration", registration_id)
        identity = RegistrantIdentity(name=name, email=email, phone=phone)
        if await self.find_duplicates(identity, exclude_id=registration_id):
            logger.info("Edit of %s would duplicate an existing registration", registration_id)
            return RegistrationOutcome(
                status=RegistrationStatus.DUPLICATE,
                message=DUPLICATE_REGISTRATION_MESSAGE,
            )
        registration = await repo.update(
            registration_id, identity.name, identity.email, identity.phone
        )
        if registration is None:
            raise ResourceNotFoundException("registration", registration_id)
        return RegistrationOutcome(
            status=RegistrationStatus.UPDATED,
            message="Registration updated",
            registration=registration,
        )

    async def delete(self, registration_id: str) -> None:
        if not await self._require_store().delete(registration_id):
            raise ResourceNotFoundException("registration", registration_id)
        logger.info("Registration %s deleted", registration_id)

    async def list_registrations(self) -> list[RegistrationResult]:
        """All registrations, newest first."""
        return await self._require_store().list_newest_first()

    async def export_csv(self) -> tuple[str, str]:
        """Render every registration as CSV.

        Returns:
            (filename, csv text). Header row plain, every data field quoted.

        Raises:
            ResourceNotFoundException: No registrations to export.
        """
        registrations = await self.list_registrations()
        if not registrations:
            raise ResourceNotFoundException(
                "registrations", "*", message="No registrations to export"
            )
        buffer = io.StringIO()
        buffer.write(",".join(CSV_EXPORT_HEADERS) + "\n")
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for reg in registrations:
            writer.writerow(
                [reg.name, reg.email, reg.phone, _csv_timestamp(reg.timestamp, self._timezone)]
            )
        filename = f"festival-registrations-{utc_now().date().isoformat()}.csv"
        return filename, buffer.getvalue()
