"""Redis-based content cache shared across worker processes.

Same contract as MemoryContentCache. Keys are namespaced under content:id:,
values expire after the TTL (SETEX) and clear() drops the content namespace.
Redis errors degrade to cache misses so reads fall through to Firestore.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import redis.asyncio as redis

from app.infrastructure.cache.keys import content_key, content_pattern

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class RedisContentCache:
    """Async Redis content cache with TTL (implements IContentCache).

    Call connect() at startup and disconnect() at shutdown.
    """

    def __init__(
        self,
        settings: "Settings",
        redis_client: redis.Redis | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            settings: Connection settings and TTL.
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = settings
        self.ttl_seconds = settings.content_cache_ttl_seconds
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis content cache connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis connection failed: %s. Content cache disabled.",
                    e,
                )
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis content cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after disconnect. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing broken Redis connection")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable."""
        key = content_key(key)
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    value = await self.redis.get(key)
                except redis.RedisError:
                    logger.exception("Cache get error for key %s after reconnect", key)
                    return None
            else:
                logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
                return None
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value for ttl_seconds. Failures are logged, not raised."""
        key = content_key(key)
        if not self.is_available() or self.redis is None:
            return
        serialized = json.dumps(value)
        try:
            await self.redis.setex(key, self.ttl_seconds, serialized)
            logger.debug("Cache SET: %s (TTL: %ss)", key, self.ttl_seconds)
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                try:
                    await self.redis.setex(key, self.ttl_seconds, serialized)
                    return
                except redis.RedisError:
                    logger.exception("Cache set error for key %s after reconnect", key)
                    return
            logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)

    async def clear(self) -> None:
        """Drop every content key."""
        await self.delete_pattern(content_pattern())

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        Args:
            pattern: Redis SCAN match pattern (e.g. content:*).

        Returns:
            Number of keys deleted.
        """
        if not self.is_available() or self.redis is None:
            return 0
        chunk_size = 500
        deleted = 0
        try:
            chunk: list[str] = []
            async for key in self.redis.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= chunk_size:
                    deleted += await self._unlink(chunk)
                    chunk = []
            if chunk:
                deleted += await self._unlink(chunk)
            logger.debug("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
            return deleted
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect():
                return await self.delete_pattern(pattern)
            logger.warning(
                "Cache delete_pattern unavailable for %s (Redis disconnected)", pattern
            )
            return 0
        except redis.RedisError:
            logger.exception("Cache delete_pattern error for %s", pattern)
            return 0

    async def _unlink(self, keys: list[str]) -> int:
        async with self.redis.pipeline(transaction=False) as pipe:
            pipe.unlink(*keys)
            results = await pipe.execute()
        return sum(int(r or 0) for r in results)
