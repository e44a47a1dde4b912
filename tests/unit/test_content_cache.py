"""Unit tests for the content cache backends and factory."""

from unittest.mock import AsyncMock

import pytest

from app.core.config import Settings
from app.infrastructure.cache import (
    ContentCacheFactory,
    MemoryContentCache,
    RedisContentCache,
    content_key,
    content_pattern,
)


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


async def test_memory_cache_hit_within_ttl() -> None:
    clock = _Clock()
    cache = MemoryContentCache(ttl_seconds=300, clock=clock)
    await cache.set("home_page", {"headline": "Ahoy"})
    clock.now += 299
    assert await cache.get("home_page") == {"headline": "Ahoy"}


async def test_memory_cache_expires_at_ttl() -> None:
    """An entry is a hit only while now - fetch_time < ttl."""
    clock = _Clock()
    cache = MemoryContentCache(ttl_seconds=300, clock=clock)
    await cache.set("home_page", {"headline": "Ahoy"})
    clock.now += 300
    assert await cache.get("home_page") is None
    assert len(cache) == 0


async def test_memory_cache_clear_drops_everything() -> None:
    cache = MemoryContentCache()
    await cache.set("home_page", {})
    await cache.set("navigation", {})
    await cache.clear()
    assert await cache.get("home_page") is None
    assert len(cache) == 0


def test_content_keys() -> None:
    assert content_key("lineup_page") == "content:id:lineup_page"
    assert content_pattern() == "content:*"
    with pytest.raises(ValueError):
        content_key("bad:id")


def test_factory_selects_backend() -> None:
    memory = ContentCacheFactory.create_content_cache(Settings(content_cache_ttl_seconds=60))
    assert isinstance(memory, MemoryContentCache)
    assert memory.ttl_seconds == 60
    redis_cache = ContentCacheFactory.create_content_cache(Settings(content_cache_backend="redis"))
    assert isinstance(redis_cache, RedisContentCache)


def test_settings_reject_unknown_backend() -> None:
    with pytest.raises(ValueError):
        Settings(content_cache_backend="memcached")


async def test_redis_cache_without_connection_is_a_miss() -> None:
    """Redis unavailable degrades to cache misses."""
    cache = RedisContentCache(Settings(content_cache_backend="redis"))
    assert not cache.is_available()
    assert await cache.get("home_page") is None
    await cache.set("home_page", {"headline": "Ahoy"})
    await cache.clear()


async def test_redis_cache_namespaces_keys_and_sets_ttl() -> None:
    client = AsyncMock()
    client.get.return_value = '{"headline": "Ahoy"}'
    cache = RedisContentCache(
        Settings(content_cache_backend="redis", content_cache_ttl_seconds=120),
        redis_client=client,
    )
    await cache.set("home_page", {"headline": "Ahoy"})
    client.setex.assert_awaited_once_with("content:id:home_page", 120, '{"headline": "Ahoy"}')
    assert await cache.get("home_page") == {"headline": "Ahoy"}
    client.get.assert_awaited_once_with("content:id:home_page")
