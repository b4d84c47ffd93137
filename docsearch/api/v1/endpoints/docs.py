"""Documentation search API: autocomplete choices and rendered submit replies."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docsearch.api.v1.dependencies import get_pipeline, get_pipelines
from docsearch.application.use_cases import DocSearchPipeline
from docsearch.schemas.docs import (
    AutocompleteRequest,
    AutocompleteResponse,
    ChoiceResponse,
    DocSourceResponse,
    MessageResponse,
    SearchRequest,
)
from docsearch.shared.enums import DocSource

router = APIRouter()


@router.get("/sources", response_model=list[DocSourceResponse])
def list_sources(
    pipelines: Annotated[dict[DocSource, DocSearchPipeline], Depends(get_pipelines)],
) -> list[DocSourceResponse]:
    """Documentation sources with credentials configured."""
    return [
        DocSourceResponse(key=key, name=p.source.name, home_url=p.source.home_url)
        for key, p in pipelines.items()
    ]


@router.post("/{source}/autocomplete", response_model=AutocompleteResponse)
async def autocomplete(
    body: AutocompleteRequest,
    pipeline: Annotated[DocSearchPipeline, Depends(get_pipeline)],
) -> AutocompleteResponse:
    """Choices for the text typed so far; hits are staged for the submit that follows."""
    if body.focused != "query":
        return AutocompleteResponse()
    suggestions = await pipeline.suggest(body.query)
    return AutocompleteResponse(
        choices=[ChoiceResponse.from_suggestion(s) for s in suggestions]
    )


@router.post("/{source}/search", response_model=MessageResponse)
async def search(
    body: SearchRequest,
    pipeline: Annotated[DocSearchPipeline, Depends(get_pipeline)],
) -> MessageResponse:
    """Render the selected choice (or free text) as a reply message."""
    message = await pipeline.resolve(body.query, target=body.target)
    return MessageResponse.from_message(message)
