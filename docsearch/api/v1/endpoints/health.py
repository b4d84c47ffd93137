"""Health check endpoints. Used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from docsearch.api.v1.dependencies import get_pipelines
from docsearch.application.use_cases import DocSearchPipeline
from docsearch.schemas.health import HealthResponse, ReadinessResponse
from docsearch.shared.enums import DocSource

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    request: Request,
    pipelines: Annotated[dict[DocSource, DocSearchPipeline], Depends(get_pipelines)],
) -> ReadinessResponse:
    """Report cache connectivity and enabled sources.

    A disconnected cache does not make the service unready: submits fall
    back to re-querying the search backend.
    """
    cache = getattr(request.app.state, "cache", None)
    return ReadinessResponse(
        cache=bool(cache is not None and cache.is_available()),
        sources=[source.value for source in pipelines],
    )
