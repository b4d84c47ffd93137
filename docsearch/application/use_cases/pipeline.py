"""Per-source search pipeline: autocomplete and submit sharing one backend and cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docsearch.application.use_cases.resolve import ResolveDocsUseCase
from docsearch.application.use_cases.suggest import SuggestDocsUseCase

if TYPE_CHECKING:
    from docsearch.application.dtos import RenderedMessage, Suggestion
    from docsearch.application.interfaces import IResultCache, ISearchClient
    from docsearch.core.doc_sources import DocSourceConfig


@dataclass(frozen=True)
class DocSearchPipeline:
    """Both interaction phases for one documentation source."""

    source: "DocSourceConfig"
    suggester: SuggestDocsUseCase
    resolver: ResolveDocsUseCase

    async def suggest(self, query: str | None) -> list["Suggestion"]:
        return await self.suggester.execute(query)

    async def resolve(self, value: str, target: str | None = None) -> "RenderedMessage":
        return await self.resolver.execute(value, target)


def build_pipeline(
    source: "DocSourceConfig",
    search_client: "ISearchClient",
    result_cache: "IResultCache",
) -> DocSearchPipeline:
    """Wire both use cases for source over the same client and cache."""
    return DocSearchPipeline(
        source=source,
        suggester=SuggestDocsUseCase(
            namespace=source.namespace.value,
            search_client=search_client,
            result_cache=result_cache,
        ),
        resolver=ResolveDocsUseCase(
            source=source,
            search_client=search_client,
            result_cache=result_cache,
        ),
    )
