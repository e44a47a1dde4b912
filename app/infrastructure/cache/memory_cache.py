"""Process-local content cache: key -> (value, fetch_time) with a fixed TTL."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class MemoryContentCache:
    """In-process TTL cache (implements IContentCache).

    A get is a hit only when now - fetch_time < ttl; expired entries are
    dropped on access. No size bound: keys are the fixed set of content ids.
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty cache.

        Args:
            ttl_seconds: Entry lifetime in seconds.
            clock: Monotonic time source; tests pass a controllable one.
        """
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache MISS: %s", key)
            return None
        value, fetched_at = entry
        if self._clock() - fetched_at >= self._ttl:
            del self._entries[key]
            logger.debug("Cache EXPIRED: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock())
        logger.debug("Cache SET: %s (TTL: %ss)", key, self._ttl)

    async def clear(self) -> None:
        self._entries.clear()
        logger.debug("Cache CLEARED")

    def __len__(self) -> int:
        return len(self._entries)
