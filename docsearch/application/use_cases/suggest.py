"""Autocomplete use case: search as the user types and stage the candidates.

Every displayable hit is staged in the result cache under its backend
ordinal before the choices are returned, so a submit that follows finds
the whole batch already written.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from docsearch.application.dtos import Suggestion
from docsearch.application.services.hierarchy_formatter import build_hierarchical_name
from docsearch.core.constants import (
    MAX_CHOICE_NAME_LENGTH,
    MAX_CHOICES,
    SUGGESTION_HITS_PER_PAGE,
)
from docsearch.domain.lookup_key import LookupKey
from docsearch.shared.utils.text import cut_text

if TYPE_CHECKING:
    from docsearch.application.interfaces import IResultCache, ISearchClient

logger = logging.getLogger(__name__)


class SuggestDocsUseCase:
    """Return up to MAX_CHOICES (name, lookup key) choices for a partial query."""

    def __init__(
        self,
        namespace: str,
        search_client: "ISearchClient",
        result_cache: "IResultCache",
    ) -> None:
        self.namespace = namespace
        self.search_client = search_client
        self.result_cache = result_cache

    async def execute(self, query: str | None) -> list[Suggestion]:
        if not query or not query.strip():
            return []

        hits = await self.search_client.search(query, SUGGESTION_HITS_PER_PAGE)

        staging = []
        suggestions: list[Suggestion] = []
        for ordinal, hit in enumerate(hits):
            name = build_hierarchical_name(hit.hierarchy)
            if name is None:
                continue
            staging.append(self.result_cache.stage(self.namespace, query, ordinal, hit))
            key = LookupKey(namespace=self.namespace, query=query, ordinal=ordinal)
            suggestions.append(
                Suggestion(name=cut_text(name, MAX_CHOICE_NAME_LENGTH), value=key.encode())
            )

        if staging:
            acks = await asyncio.gather(*staging)
            if not all(acks):
                logger.debug(
                    "%s: %d of %d hits not staged for %r",
                    self.namespace,
                    acks.count(False),
                    len(acks),
                    query,
                )

        return suggestions[:MAX_CHOICES]
