"""Tests for ResultCache (stage/fetch of hits with the 60 second TTL)."""

from unittest.mock import AsyncMock

from docsearch.core.config import Settings
from docsearch.domain.hit import Hierarchy, Hit
from docsearch.infrastructure.cache.redis_cache import CacheService
from docsearch.infrastructure.cache.result_cache import ResultCache

HIT = Hit(
    url="https://discord.com/developers/docs/topics/rate-limits#global-rate-limit",
    hierarchy=Hierarchy(lvl0="Topics", lvl1="Rate Limits", lvl2="Global Rate Limit"),
)


async def _result_cache(settings: Settings, fake_redis) -> ResultCache:
    cache = CacheService(settings, redis_client=fake_redis)
    await cache.connect()
    return ResultCache(cache)


async def test_stage_then_fetch_returns_hit_unchanged(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    assert await result_cache.stage("ddocs", "rate limit", 0, HIT) is True
    assert await result_cache.fetch("ddocs", "rate limit", 0) == HIT


async def test_stage_sets_sixty_second_expiry(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await result_cache.stage("ddocs", "rate limit", 0, HIT)
    assert fake_redis.keys() == ["staged:ddocs:rate limit:0"]
    assert fake_redis.ttl_of("staged:ddocs:rate limit:0") == 60


async def test_fetch_within_ttl(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await result_cache.stage("ddocs", "rate limit", 0, HIT)
    fake_redis.now += 59
    assert await result_cache.fetch("ddocs", "rate limit", 0) == HIT


async def test_fetch_after_ttl_is_absent(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await result_cache.stage("ddocs", "rate limit", 0, HIT)
    fake_redis.now += 61
    assert await result_cache.fetch("ddocs", "rate limit", 0) is None


async def test_fetch_never_staged_is_absent(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    assert await result_cache.fetch("ddocs", "rate limit", 3) is None


async def test_restage_overwrites_and_refreshes_expiry(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await result_cache.stage("ddocs", "q", 0, HIT)
    fake_redis.now += 50
    other = Hit(url="https://discord.com/developers/docs/intro", hierarchy=Hierarchy(lvl1="Intro"))
    await result_cache.stage("ddocs", "q", 0, other)
    fake_redis.now += 50
    assert await result_cache.fetch("ddocs", "q", 0) == other


async def test_namespaces_are_isolated(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await result_cache.stage("ddocs", "q", 0, HIT)
    assert await result_cache.fetch("djsguide", "q", 0) is None


async def test_malformed_payload_is_absent(settings: Settings, fake_redis) -> None:
    result_cache = await _result_cache(settings, fake_redis)
    await fake_redis.setex("staged:ddocs:q:0", 60, '{"hierarchy": {}}')
    await fake_redis.setex("staged:ddocs:q:1", 60, '["not", "a", "hit"]')
    assert await result_cache.fetch("ddocs", "q", 0) is None
    assert await result_cache.fetch("ddocs", "q", 1) is None


async def test_unavailable_cache_stage_false_fetch_absent(settings: Settings) -> None:
    result_cache = ResultCache(CacheService(settings))
    assert await result_cache.stage("ddocs", "q", 0, HIT) is False
    assert await result_cache.fetch("ddocs", "q", 0) is None


async def test_custom_ttl_passed_to_cache() -> None:
    cache = AsyncMock()
    cache.set.return_value = True
    result_cache = ResultCache(cache, ttl=30)
    await result_cache.stage("ddocs", "q", 4, HIT)
    cache.set.assert_awaited_once_with("staged:ddocs:q:4", HIT.to_dict(), ttl=30)
