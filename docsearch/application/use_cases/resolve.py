"""Submit use case: turn a selected lookup key (or free text) into a reply.

Fast path: a key whose hit is still staged renders as a single link with
no backend call. Anything else (free text, expired or missing entry,
unreadable hit) re-queries the backend for the top results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docsearch.application.dtos import RenderedMessage
from docsearch.application.services.hierarchy_formatter import build_hierarchical_name
from docsearch.application.services.message_builder import (
    build_response_content,
    error_response,
    hide_link_embed,
    hyperlink,
    inline_code,
    mention_list,
)
from docsearch.core.constants import RESOLUTION_HITS_PER_PAGE
from docsearch.domain.lookup_key import LookupKey
from docsearch.shared.utils.text import decode_entities

if TYPE_CHECKING:
    from docsearch.application.interfaces import IResultCache, ISearchClient
    from docsearch.core.doc_sources import DocSourceConfig
    from docsearch.domain.hit import Hit

logger = logging.getLogger(__name__)


def format_hit_line(hit: "Hit") -> str:
    """Render one hit as a bullet: category, linked section, optional anchor."""
    h = hit.hierarchy
    label = h.lvl0 or h.lvl1 or ""
    link_text = h.lvl2 or h.lvl1 or "click here"
    line = f"• {label}: {hyperlink(link_text, hide_link_embed(hit.url))}"
    if h.lvl3:
        line = f"{line} - {h.lvl3}"
    return decode_entities(line)


class ResolveDocsUseCase:
    """Resolve a submitted value into the rendered documentation reply."""

    def __init__(
        self,
        source: "DocSourceConfig",
        search_client: "ISearchClient",
        result_cache: "IResultCache",
    ) -> None:
        self.source = source
        self.search_client = search_client
        self.result_cache = result_cache

    @property
    def namespace(self) -> str:
        return self.source.namespace.value

    def _reply(self, content: str | list[str], target: str | None) -> RenderedMessage:
        return RenderedMessage(
            content=build_response_content(
                content=content,
                header_text=self.source.header_text,
                icon=self.source.icon,
                target=target,
            ),
            allowed_mentions=mention_list(target),
        )

    async def _cached_link(self, key: LookupKey) -> str | None:
        hit = await self.result_cache.fetch(key.namespace, key.query, key.ordinal)
        if hit is None:
            logger.debug("%s: staged hit %s not found, re-querying", self.namespace, key)
            return None
        name = build_hierarchical_name(hit.hierarchy, verbose=True)
        if name is None:
            return None
        return hyperlink(name, hide_link_embed(hit.url))

    async def execute(self, value: str, target: str | None = None) -> RenderedMessage:
        """Resolve value (lookup key or free text) and render the reply.

        Args:
            value: Submitted option value.
            target: Optional user ID to mention alongside the results.

        Returns:
            Rendered reply; an ephemeral "no results" error when nothing matched.

        Raises:
            SearchBackendError: When the fallback search fails (not handled here).
        """
        key = LookupKey.parse(value, self.namespace)
        query = key.query if key is not None else value

        if key is not None:
            link = await self._cached_link(key)
            if link is not None:
                return self._reply(link, target)

        hits = await self.search_client.search(query, RESOLUTION_HITS_PER_PAGE)
        lines = [
            format_hit_line(hit)
            for hit in hits
            if build_hierarchical_name(hit.hierarchy) is not None
        ]
        if not lines:
            return error_response(
                f"no results were found for {inline_code(query)}",
                target=target,
            )
        return self._reply(lines, target)
