"""Search backend clients."""

from docsearch.infrastructure.search.algolia_client import AlgoliaSearchClient

__all__ = ["AlgoliaSearchClient"]
