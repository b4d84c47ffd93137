"""Redis-based cache service for staged search hits.

Provides async Redis caching with TTL support. Cache faults never reach
the caller: reads degrade to None and writes to False, so the search
pipeline treats an unavailable Redis like a cache miss.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import redis.asyncio as redis

from docsearch.core.config import Settings
from docsearch.core.constants import STAGED_HIT_TTL

logger = logging.getLogger(__name__)


class CacheService:
    """Async Redis cache service with TTL support.

    Call connect() at startup and disconnect() at shutdown. When Redis is
    unreachable the service stays disabled (is_available() is False).
    A dropped connection is replaced at most once per failed client, even
    when many reads and writes fail at the same time.
    """

    def __init__(self, settings: Settings, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            settings: Application settings (Redis connection parameters).
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = settings
        self._connected = False
        self._reconnect_lock = asyncio.Lock()

    def _create_client(self) -> redis.Redis:
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        try:
            if self.redis is None:
                self.redis = self._create_client()
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(
                "Redis connection failed: %s. Cache disabled.",
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
            logger.info("Redis cache disconnected")

    async def _reconnect(self, stale: redis.Redis) -> redis.Redis | None:
        """Replace a client that raised a connection error.

        Only the first caller holding a given stale client reconnects; the
        others wait and reuse its outcome.

        Returns:
            The usable client, or None when Redis is still unreachable.
        """
        async with self._reconnect_lock:
            if self.redis is stale:
                try:
                    await stale.aclose()
                except redis.RedisError:
                    logger.debug("Ignoring error while closing stale Redis connection")
                self.redis = None
                self._connected = False
                await self.connect()
            return self.redis if self.is_available() else None

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    @staticmethod
    def _decode(key: str, value: str | None) -> Any | None:
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Cache value for key %s is not valid JSON; ignoring", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return decoded

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable.

        Args:
            key: Cache key (use docsearch.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        client = self.redis
        if client is None or not self._connected:
            return None
        try:
            return self._decode(key, await client.get(key))
        except (redis.ConnectionError, redis.TimeoutError):
            client = await self._reconnect(client)
            if client is None:
                logger.warning("Cache get unavailable for key %s (Redis disconnected)", key)
                return None
            try:
                return self._decode(key, await client.get(key))
            except redis.RedisError:
                logger.exception("Cache get error for key %s after reconnect", key)
                return None
        except redis.RedisError:
            logger.exception("Cache get error for key %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int = STAGED_HIT_TTL) -> bool:
        """Store value with TTL. Overwrites and refreshes expiry of an existing key.

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable).
            ttl: Time-to-live in seconds (default: staged hit TTL).

        Returns:
            True if stored, False otherwise.
        """
        client = self.redis
        if client is None or not self._connected:
            return False
        serialized = json.dumps(value)
        try:
            await client.setex(key, ttl, serialized)
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
            return True
        except (redis.ConnectionError, redis.TimeoutError):
            client = await self._reconnect(client)
            if client is None:
                logger.warning("Cache set unavailable for key %s (Redis disconnected)", key)
                return False
            try:
                await client.setex(key, ttl, serialized)
                logger.debug("Cache SET after reconnect: %s (TTL: %ss)", key, ttl)
                return True
            except redis.RedisError:
                logger.exception("Cache set error for key %s after reconnect", key)
                return False
        except redis.RedisError:
            logger.exception("Cache set error for key %s", key)
            return False
