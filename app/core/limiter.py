"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators
keep rate limits DRY.
"""

import time
from collections import defaultdict
from threading import Lock

from fastapi import HTTPException
from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
LOGIN_LIMIT = "10/minute"
PASSWORD_RESET_LIMIT = "5/minute"
REGISTRATION_LIMIT = "10/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"
AUTH_PER_EMAIL_LIMIT = 5  # sign-in attempts per minute per e-mail address
AUTH_PER_EMAIL_WINDOW_SEC = 60

limit_auth = limiter.limit(LOGIN_LIMIT)
limit_password_reset = limiter.limit(PASSWORD_RESET_LIMIT)
limit_registration = limiter.limit(REGISTRATION_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)

# In-memory sliding window for per-account sign-in attempts (across client IPs).
_auth_per_email: defaultdict[str, list[float]] = defaultdict(list)
_auth_per_email_lock = Lock()


def check_auth_rate_per_email(email: str) -> None:
    """Raise 429 if too many sign-in attempts for this e-mail in the last minute."""
    if not email:
        return
    now = time.monotonic()
    cutoff = now - AUTH_PER_EMAIL_WINDOW_SEC
    key = email.strip().lower()
    with _auth_per_email_lock:
        _auth_per_email[key] = [t for t in _auth_per_email[key] if t > cutoff]
        if len(_auth_per_email[key]) >= AUTH_PER_EMAIL_LIMIT:
            raise HTTPException(
                status_code=429,
                detail="Too many failed attempts. Please try again later.",
            )
        _auth_per_email[key].append(now)


def reset_auth_rate_limits() -> None:
    """Forget all per-account attempts (tests)."""
    with _auth_per_email_lock:
        _auth_per_email.clear()
