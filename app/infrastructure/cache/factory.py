"""Content cache factory: creates the memory or Redis backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.interfaces.services import IContentCache

if TYPE_CHECKING:
    from app.core.config import Settings


class ContentCacheFactory:
    """Factory for content cache instances based on configuration."""

    @staticmethod
    def create_content_cache(settings: "Settings | None" = None) -> IContentCache:
        """Create content cache from settings.

        Args:
            settings: Application settings; if None, uses get_settings().

        Returns:
            MemoryContentCache or RedisContentCache (not yet connected).

        Raises:
            ValueError: Unknown backend.
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        backend = s.content_cache_backend.lower()

        if backend == "memory":
            from app.infrastructure.cache.memory_cache import MemoryContentCache

            return MemoryContentCache(ttl_seconds=s.content_cache_ttl_seconds)
        if backend == "redis":
            from app.infrastructure.cache.redis_cache import RedisContentCache

            return RedisContentCache(s)
        raise ValueError(f"Unknown content cache backend: {backend}")
