"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Optional integrations (Firestore, Firebase Auth, e-mail,
monitoring secret) may be absent: the public site must still render, so
missing credentials are reported as "not configured" where they are used
rather than failing at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "festival-cms"
    app_version: str = "1.0.0"
    debug: bool = False

    # Firebase / Firestore: use key (env) or path (file). For Vercel, use key.
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file
    # Web API key for Firebase Authentication (Identity Toolkit REST).
    firebase_web_api_key: SecretStr | None = None

    # Admin sessions
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours

    # Content cache: "memory" (process-local) or "redis"
    content_cache_backend: str = "memory"
    content_cache_ttl_seconds: int = 300
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # Live binding: how often watched documents are polled for changes.
    live_poll_interval_seconds: float = 2.0

    # Registration monitoring (hourly cron)
    cron_secret: SecretStr | None = None
    resend_api_key: SecretStr | None = None
    notification_email: str | None = None
    alert_from_address: str = "Festival Registrations <onboarding@resend.dev>"
    alert_timezone: str = "America/Los_Angeles"
    registrations_dashboard_url: str = "http://localhost:8000/api/v1/admin/registrations"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_backend(self) -> "Settings":
        """Reject unknown cache backends and non-positive TTLs."""
        if self.content_cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"content_cache_backend must be 'memory' or 'redis', got: {self.content_cache_backend!r}"
            )
        if self.content_cache_ttl_seconds <= 0:
            raise ValueError("content_cache_ttl_seconds must be positive")
        if self.live_poll_interval_seconds <= 0:
            raise ValueError("live_poll_interval_seconds must be positive")
        return self

    @property
    def firestore_configured(self) -> bool:
        """True when a service account key or path is set."""
        has_key = (
            self.firebase_service_account_key is not None
            and bool(self.firebase_service_account_key.get_secret_value())
        )
        return has_key or bool(self.firebase_service_account_path)

    @property
    def email_configured(self) -> bool:
        """True when alert e-mails can be delivered (API key and recipient)."""
        has_key = (
            self.resend_api_key is not None
            and bool(self.resend_api_key.get_secret_value())
        )
        return has_key and bool(self.notification_email)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
