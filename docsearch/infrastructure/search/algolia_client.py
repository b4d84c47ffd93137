"""Algolia DocSearch client for one documentation index.

All HTTP calls use a shared httpx.AsyncClient so they do not block the
event loop. Failures are raised as SearchBackendError; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from docsearch.core.doc_sources import DocSourceConfig
from docsearch.domain.exceptions import SearchBackendError
from docsearch.domain.hit import Hit

logger = logging.getLogger(__name__)


class AlgoliaSearchClient:
    """Ranked search against the Algolia index of a documentation source."""

    def __init__(
        self,
        source: DocSourceConfig,
        http_client: httpx.AsyncClient,
        user_agent: str,
    ) -> None:
        """Initialize the client.

        Args:
            source: Source configuration (index endpoint and credentials).
            http_client: Shared httpx.AsyncClient (connection reuse; closed by owner).
            user_agent: User-Agent header sent with every request.
        """
        self.source = source
        self._http = http_client
        self._user_agent = user_agent

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Algolia-API-Key": self.source.api_key,
            "X-Algolia-Application-Id": self.source.application_id,
            "User-Agent": self._user_agent,
        }

    async def search(self, query: str, hits_per_page: int) -> list[Hit]:
        """Query the index and return hits in backend rank order.

        Args:
            query: Free-text query.
            hits_per_page: Maximum number of hits to return.

        Returns:
            Hits in ranked order; empty list when nothing matched.

        Raises:
            SearchBackendError: On transport failure, non-2xx status or a
                response body without a hits list.
        """
        namespace = self.source.namespace.value
        body = {"params": urlencode({"query": query, "hitsPerPage": str(hits_per_page)})}
        try:
            response = await self._http.post(
                self.source.index_endpoint, json=body, headers=self._headers()
            )
        except httpx.HTTPError as e:
            logger.warning("%s search request failed: %s", namespace, e)
            raise SearchBackendError(namespace, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            logger.warning(
                "%s search failed: status=%d", namespace, response.status_code
            )
            raise SearchBackendError(
                namespace,
                f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload: Any = response.json()
        except ValueError as e:
            raise SearchBackendError(namespace, "response body is not valid JSON") from e
        raw_hits = payload.get("hits") if isinstance(payload, dict) else None
        if not isinstance(raw_hits, list):
            raise SearchBackendError(namespace, "response body has no hits list")

        hits: list[Hit] = []
        for raw in raw_hits:
            if not isinstance(raw, dict):
                continue
            try:
                hits.append(Hit.from_dict(raw))
            except ValueError as e:
                logger.debug("Skipping malformed %s hit: %s", namespace, e)
        logger.debug(
            "%s search %r returned %d hits", namespace, query, len(hits)
        )
        return hits
