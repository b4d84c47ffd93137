"""Request dependencies (composition root for endpoints).

Pipelines and the cache are built once in the lifespan and read from
app.state; endpoints never construct infrastructure themselves.
"""

from fastapi import Request

from docsearch.application.use_cases import DocSearchPipeline
from docsearch.domain.exceptions import DocSourceNotConfiguredException
from docsearch.shared.enums import DocSource


def get_pipelines(request: Request) -> dict[DocSource, DocSearchPipeline]:
    """All configured pipelines (empty when startup enabled none)."""
    return getattr(request.app.state, "pipelines", None) or {}


def get_pipeline(source: str, request: Request) -> DocSearchPipeline:
    """Pipeline for the path's source; 404 when unknown or without credentials."""
    pipelines = get_pipelines(request)
    try:
        return pipelines[DocSource(source)]
    except (ValueError, KeyError):
        raise DocSourceNotConfiguredException(source) from None
