"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Used by
infrastructure cache and the content service.
"""

# Cache key prefixes (used with :id:<content_id>)
CACHE_PREFIX_CONTENT = "content"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Friendly messages surfaced to users (never raw provider codes).
DUPLICATE_REGISTRATION_MESSAGE = (
    "You're already registered! We'll notify you when tickets go on sale."
)
ADMIN_REQUIRED_MESSAGE = "Access denied. Admin privileges required."

# Monitoring window for the hourly registration check.
MONITORING_WINDOW_HOURS = 1

CSV_EXPORT_HEADERS = ("Name", "Email", "Phone", "Registration Date")
