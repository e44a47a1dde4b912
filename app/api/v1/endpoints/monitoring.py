"""Registration monitoring: hourly cron check and admin dry run.

The cron route lives outside /api/v1 (scheduler URL is /api/cron/...) and
is authorized by a shared secret, not an admin session.
"""

import hmac
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.api.v1.dependencies import CurrentAdmin, get_registration_monitor
from app.application.dtos.monitoring import MonitoringCheckResult, RegistrationStats
from app.application.services.registration_monitor import RegistrationMonitor
from app.core.config import Settings, get_settings
from app.domain.enums import MonitoringStatus
from app.schemas.monitoring import MonitoringCheckResponse, MonitoringStatusResponse
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()
cron_router = APIRouter()

MonitorDep = Annotated[RegistrationMonitor | None, Depends(get_registration_monitor)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def _secret_value(secret) -> str:
    return secret.get_secret_value() if secret is not None else ""


def monitoring_config(settings: Settings, store_configured: bool) -> dict[str, bool]:
    """Configuration status per environment variable."""
    return {
        "CRON_SECRET": bool(_secret_value(settings.cron_secret)),
        "FIREBASE_SERVICE_ACCOUNT": store_configured,
        "RESEND_API_KEY": bool(_secret_value(settings.resend_api_key)),
        "NOTIFICATION_EMAIL": bool(settings.notification_email),
    }


def _provided_secret(request: Request, query_secret: str | None) -> str:
    auth = request.headers.get("Authorization", "")
    if auth[:7].lower() == "bearer ":
        return auth[7:].strip()
    return query_secret or ""


def _stats_fields(stats: RegistrationStats | None) -> dict:
    if stats is None:
        return {}
    last = stats.last_registration
    return {
        "recent": stats.recent,
        "total": stats.total,
        "last_registration_at": last.timestamp if last is not None else None,
        "hours_since_last": stats.hours_since_last,
        "checked_at": stats.checked_at,
    }


def to_check_response(result: MonitoringCheckResult) -> MonitoringCheckResponse:
    return MonitoringCheckResponse(
        status=result.status,
        alert_sent=result.alert_sent,
        email_id=result.email_id,
        error=result.error,
        missing=list(result.missing),
        **_stats_fields(result.stats),
    )


@cron_router.get("/check-registrations", response_model=MonitoringCheckResponse)
async def check_registrations(
    request: Request,
    settings: SettingsDep,
    monitor: MonitorDep,
    secret: Annotated[str | None, Query(description="CRON_SECRET, when no Authorization header")] = None,
):
    """Count sign-ups in the last hour; e-mail an alert when there were none.

    Authorized by ``Authorization: Bearer <CRON_SECRET>`` or ``?secret=``.
    Missing configuration is reported as status ``not_configured``.
    """
    expected = _secret_value(settings.cron_secret)
    if expected:
        provided = _provided_secret(request, secret)
        if not hmac.compare_digest(provided.encode(), expected.encode()):
            logger.warning("Registration check rejected: bad cron secret")
            raise HTTPException(status_code=401, detail="Unauthorized")
    config = monitoring_config(settings, store_configured=monitor is not None)
    missing = tuple(name for name, ok in config.items() if not ok)
    if missing or monitor is None:
        logger.warning("Registration check skipped; not configured: %s", ", ".join(missing))
        return to_check_response(
            MonitoringCheckResult(status=MonitoringStatus.NOT_CONFIGURED, missing=missing)
        )
    return to_check_response(await monitor.check())


@router.get("/status", response_model=MonitoringStatusResponse)
async def monitoring_status(admin: CurrentAdmin, settings: SettingsDep, monitor: MonitorDep):
    """Configuration status and current statistics; never sends e-mail."""
    config = monitoring_config(settings, store_configured=monitor is not None)
    if monitor is None:
        return MonitoringStatusResponse(configured=config)
    stats = await monitor.collect_stats()
    return MonitoringStatusResponse(
        configured=config,
        alert_would_trigger=stats.needs_alert,
        **_stats_fields(stats),
    )
