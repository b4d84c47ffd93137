"""Use cases: autocomplete (suggest) and submit (resolve) per documentation source."""

from docsearch.application.use_cases.pipeline import DocSearchPipeline, build_pipeline
from docsearch.application.use_cases.resolve import ResolveDocsUseCase
from docsearch.application.use_cases.suggest import SuggestDocsUseCase

__all__ = [
    "DocSearchPipeline",
    "ResolveDocsUseCase",
    "SuggestDocsUseCase",
    "build_pipeline",
]
