"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (shared HTTP
client, Redis cache, one search pipeline per configured source).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from docsearch.application.interfaces import ICacheService
from docsearch.application.use_cases import DocSearchPipeline, build_pipeline
from docsearch.core.config import Settings, get_settings
from docsearch.core.doc_sources import build_doc_sources
from docsearch.infrastructure.cache import CacheService, ResultCache
from docsearch.infrastructure.search import AlgoliaSearchClient
from docsearch.shared.enums import DocSource

logger = logging.getLogger(__name__)


def create_pipelines(
    settings: Settings,
    http_client: httpx.AsyncClient,
    cache: ICacheService,
) -> dict[DocSource, DocSearchPipeline]:
    """Build a search pipeline for every source with credentials.

    All pipelines share the HTTP client and the result cache; their
    staged hits are kept apart by namespace.
    """
    result_cache = ResultCache(cache, ttl=settings.staged_hit_ttl_seconds)
    pipelines: dict[DocSource, DocSearchPipeline] = {}
    for key, source in build_doc_sources(settings).items():
        client = AlgoliaSearchClient(source, http_client, user_agent=settings.user_agent)
        pipelines[key] = build_pipeline(source, client, result_cache)
    return pipelines


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: shared HTTP client, Redis cache (if enabled), pipelines.
    Shutdown order: HTTP client close, cache disconnect.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    cache = CacheService(settings)
    if settings.redis_enabled:
        await cache.connect()
    else:
        logger.info("Redis disabled; every submit will re-query the search backend")
    app.state.cache = cache

    app.state.pipelines = create_pipelines(settings, app.state.http_client, cache)
    logger.info(
        "Documentation sources enabled: %s",
        ", ".join(source.value for source in app.state.pipelines) or "none",
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")

    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        logger.info("Cache disconnected")
