"""Hourly registration monitoring: count recent sign-ups and alert on silence."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from html import escape

from app.application.dtos.monitoring import (
    AlertMessage,
    MonitoringCheckResult,
    RegistrationStats,
)
from app.application.interfaces.repositories import IRegistrationRepository
from app.application.interfaces.services import INotificationService
from app.core.constants import MONITORING_WINDOW_HOURS
from app.domain.enums import MonitoringStatus
from app.domain.exceptions import EmailDeliveryException
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import format_local, utc_now, whole_hours_between

logger = get_logger(__name__)


def alert_subject(hours_since_last: int | None) -> str:
    """Subject line; falls back to 1h when there is no (or a same-hour) last registration."""
    since = f"{hours_since_last}h" if hours_since_last else "1h"
    return f"🚨 Registration Alert: No New Sign-ups ({since} since last)"


_ALERT_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .alert-box { background: #667eea; color: white; padding: 20px; border-radius: 10px; }
    .stat-card { background: #f7f7f7; padding: 15px; border-radius: 8px; margin: 10px 0; }
    .stat-label { color: #666; font-size: 12px; text-transform: uppercase; }
    .stat-value { font-size: 20px; font-weight: bold; }
    .time-alert { color: #ff6b6b; }
    .button { display: inline-block; padding: 12px 24px; background: #667eea; color: white; text-decoration: none; border-radius: 6px; }
    .footer { margin-top: 30px; color: #666; font-size: 12px; }
"""


class RegistrationMonitor:
    """Checks the trailing window for registrations and e-mails an alert when it is empty.

    Stateless apart from the e-mail side effect; safe to call repeatedly.
    """

    def __init__(
        self,
        registration_repo: IRegistrationRepository,
        notifier: INotificationService,
        *,
        recipient: str,
        timezone: str,
        dashboard_url: str,
        window_hours: int = MONITORING_WINDOW_HOURS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = registration_repo
        self._notifier = notifier
        self._recipient = recipient
        self._timezone = timezone
        self._dashboard_url = dashboard_url
        self._window = timedelta(hours=window_hours)
        self._clock = clock

    async def collect_stats(self) -> RegistrationStats:
        now = self._clock()
        recent = await self._repo.count_since(now - self._window)
        total = await self._repo.count_all()
        last = await self._repo.latest()
        hours = (
            whole_hours_between(last.timestamp, now)
            if last is not None and last.timestamp is not None
            else None
        )
        logger.info(
            "Registration check at %s: %d new in the last %s, %d total",
            now.isoformat(),
            recent,
            self._window,
            total,
        )
        return RegistrationStats(
            checked_at=now,
            recent=recent,
            total=total,
            last_registration=last,
            hours_since_last=hours,
        )

    def build_alert(self, stats: RegistrationStats) -> AlertMessage:
        """Render the alert e-mail for a silent window."""
        current_time = format_local(stats.checked_at, self._timezone)
        last = stats.last_registration
        last_time = (
            format_local(last.timestamp, self._timezone)
            if last is not None and last.timestamp is not None
            else "No registrations yet"
        )
        hours = stats.hours_since_last
        emphasis = " time-alert" if hours and hours > 2 else ""
        since_text = f"{hours} hours ago" if hours else "N/A"
        last_details = ""
        if last is not None:
            last_details = (
                '<div class="stat-card"><strong>Last Registration Details:</strong><br>'
                f"Name: {escape(last.name or 'Not provided')}<br>"
                f"Email: {escape(last.email or 'Not provided')}<br>"
                f"Time: {escape(last_time)}</div>"
            )
        html = f"""<!DOCTYPE html>
<html>
<head><style>{_ALERT_STYLE}</style></head>
<body>
  <div class="container">
    <div class="alert-box">
      <div class="stat-value">⚠️ Registration Alert</div>
      <div>No new registrations in the last hour!</div>
    </div>
    <p><strong>Attention Required:</strong> the registration form has not received any
    sign-ups in the past hour. Check that the form works and that Firestore is reachable,
    or confirm this is a normal low-traffic period.</p>
    <div class="stat-card"><div class="stat-label">Current Time</div><div class="stat-value">{escape(current_time)}</div></div>
    <div class="stat-card"><div class="stat-label">Total Registrations</div><div class="stat-value">{stats.total}</div></div>
    <div class="stat-card"><div class="stat-label">Last Registration</div><div class="stat-value{emphasis}">{escape(last_time)}</div></div>
    <div class="stat-card"><div class="stat-label">Time Since Last</div><div class="stat-value{emphasis}">{since_text}</div></div>
    <a class="button" href="{escape(self._dashboard_url, quote=True)}">View Registration Dashboard</a>
    {last_details}
    <div class="footer">Automated alert from the festival registration monitor. Runs every hour.</div>
  </div>
</body>
</html>
"""
        return AlertMessage(to=self._recipient, subject=alert_subject(hours), html=html)

    async def check(self) -> MonitoringCheckResult:
        """Collect stats and, when the window is empty, send the alert."""
        stats = await self.collect_stats()
        if not stats.needs_alert:
            return MonitoringCheckResult(status=MonitoringStatus.OK, stats=stats)
        message = self.build_alert(stats)
        try:
            email_id = await self._notifier.send(message)
        except EmailDeliveryException as e:
            logger.error("Failed to send registration alert: %s", e.message)
            return MonitoringCheckResult(
                status=MonitoringStatus.ALERT_FAILED,
                stats=stats,
                error=e.message,
            )
        logger.info("Registration alert sent to %s (id=%s)", self._recipient, email_id)
        return MonitoringCheckResult(
            status=MonitoringStatus.ALERT_SENT,
            stats=stats,
            alert_sent=True,
            email_id=email_id,
        )
