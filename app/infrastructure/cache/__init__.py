"""Content cache: process-local and Redis backends plus key utilities.

Owned by the content service; constructed at startup by ContentCacheFactory.
"""

from app.infrastructure.cache.factory import ContentCacheFactory
from app.infrastructure.cache.keys import content_key, content_pattern
from app.infrastructure.cache.memory_cache import MemoryContentCache
from app.infrastructure.cache.redis_cache import RedisContentCache

__all__ = [
    "ContentCacheFactory",
    "MemoryContentCache",
    "RedisContentCache",
    "content_key",
    "content_pattern",
]
