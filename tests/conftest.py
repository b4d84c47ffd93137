"""Pytest configuration and fixtures for docsearch.

Provides explicit Settings (no .env), a documentation source record, an
in-memory Redis double with a controllable clock, and an HTTP client
against the FastAPI app with pipelines injected into app.state.
"""

import asyncio
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from docsearch.core.config import Settings
from docsearch.core.doc_sources import DocSourceConfig, build_doc_sources
from docsearch.domain.hit import Hierarchy, Hit
from docsearch.main import create_app
from docsearch.shared.enums import DocSource


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis (get/setex with expiry).

    Advance ``now`` to simulate time passing; set ``error`` to make every
    call raise it. With ``slow`` set, each call yields to the event loop
    once before running, so concurrent callers interleave.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.error: Exception | None = None
        self.slow = False
        self.closed = False
        self._store: dict[str, tuple[str, float]] = {}

    async def _check(self) -> None:
        if self.slow:
            await asyncio.sleep(0)
        if self.error is not None:
            raise self.error

    async def ping(self) -> bool:
        await self._check()
        return True

    async def get(self, key: str) -> str | None:
        await self._check()
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self._store[key]
            return None
        return value

    async def setex(self, key: str, ttl: int, value: str) -> bool:
        await self._check()
        self._store[key] = (value, self.now + ttl)
        return True

    async def aclose(self) -> None:
        self.closed = True

    def ttl_of(self, key: str) -> float | None:
        entry = self._store.get(key)
        return None if entry is None else entry[1] - self.now

    def keys(self) -> list[str]:
        return list(self._store)


@pytest.fixture
def settings() -> Settings:
    """Settings with both sources configured; ignores any local .env file."""
    return Settings(
        _env_file=None,
        discord_developer_docs_algolia_application_id="DDOCSAPP",
        discord_developer_docs_algolia_application_key="ddocs-key",
        djs_guide_algolia_application_id="DJSAPP",
        djs_guide_algolia_application_key="djs-key",
    )


@pytest.fixture
def source(settings: Settings) -> DocSourceConfig:
    """Discord Developer docs source record (namespace ddocs)."""
    return build_doc_sources(settings)[DocSource.DISCORD_DEVELOPER_DOCS]


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def make_fake_redis() -> Callable[[], FakeRedis]:
    """Factory for extra Redis doubles (e.g. the client a reconnect creates)."""
    return FakeRedis


@pytest.fixture
def make_hit() -> Callable[..., Hit]:
    """Factory for hits: make_hit(lvl0=..., lvl1=..., url=...)."""

    def _make(url: str = "https://discord.com/developers/docs/topics/rate-limits", **levels: str | None) -> Hit:
        return Hit(url=url, hierarchy=Hierarchy(**levels))

    return _make


@pytest.fixture
def search_client() -> AsyncMock:
    """Search client double; set search_client.search.return_value per test."""
    client = AsyncMock()
    client.search.return_value = []
    return client


@pytest.fixture
def app() -> FastAPI:
    """Fresh FastAPI app with no pipelines. The lifespan is not run, so tests
    populate app.state.pipelines and app.state.cache themselves."""
    app = create_app()
    app.state.pipelines = {}
    app.state.cache = None
    return app


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def redis_connection_error() -> Exception:
    return redis.ConnectionError("connection refused")
