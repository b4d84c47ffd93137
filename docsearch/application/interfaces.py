"""Service interfaces (ports) for the application layer.

Protocols define contracts for the search pipeline's collaborators (DIP).
Infrastructure implements them (Algolia client, Redis-backed result cache).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from docsearch.core.constants import STAGED_HIT_TTL

if TYPE_CHECKING:
    from docsearch.domain.hit import Hit


class ICacheService(Protocol):
    """Minimal key/value cache protocol with TTL (DIP)."""

    def is_available(self) -> bool:
        """Return True if cache is connected."""

    async def get(self, key: str) -> Any:
        """Return cached value or None."""

    async def set(self, key: str, value: Any, ttl: int = STAGED_HIT_TTL) -> bool:
        """Store value with TTL. Returns True on success."""


class ISearchClient(Protocol):
    """Ranked search against one documentation index."""

    async def search(self, query: str, hits_per_page: int) -> list[Hit]:
        """Return hits in backend rank order (empty list is not an error).

        Raises:
            SearchBackendError: On network, HTTP or payload failure.
        """


class IResultCache(Protocol):
    """Short-lived store for hits staged between autocomplete and submit."""

    async def stage(self, namespace: str, query: str, ordinal: int, hit: Hit) -> bool:
        """Upsert hit under (namespace, query, ordinal) with the staging TTL."""

    async def fetch(self, namespace: str, query: str, ordinal: int) -> Hit | None:
        """Return the staged hit, or None when never staged, expired or unavailable."""
