"""Result cache: hits staged between autocomplete and submit.

Thin layer over ICacheService that owns the staged-hit key format, the
staging TTL and the Hit (de)serialization. Absence is the only failure
signal fetch() reports.
"""

from __future__ import annotations

import logging

from docsearch.application.interfaces import ICacheService
from docsearch.core.constants import STAGED_HIT_TTL
from docsearch.domain.hit import Hit
from docsearch.infrastructure.cache.keys import staged_hit_key

logger = logging.getLogger(__name__)


class ResultCache:
    """Namespaced, short-TTL store of staged hits keyed by (namespace, query, ordinal)."""

    def __init__(self, cache: ICacheService, ttl: int = STAGED_HIT_TTL) -> None:
        self.cache = cache
        self.ttl = ttl

    async def stage(self, namespace: str, query: str, ordinal: int, hit: Hit) -> bool:
        """Upsert hit with a fresh TTL. Returns False when the cache did not store it."""
        key = staged_hit_key(namespace, query, ordinal)
        return await self.cache.set(key, hit.to_dict(), ttl=self.ttl)

    async def fetch(self, namespace: str, query: str, ordinal: int) -> Hit | None:
        """Return the staged hit, or None if absent, expired, unreadable or unavailable."""
        key = staged_hit_key(namespace, query, ordinal)
        payload = await self.cache.get(key)
        if payload is None:
            return None
        if not isinstance(payload, dict):
            logger.warning("Ignoring staged hit with unexpected payload type at %s", key)
            return None
        try:
            return Hit.from_dict(payload)
        except ValueError as e:
            logger.warning("Ignoring malformed staged hit at %s: %s", key, e)
            return None
