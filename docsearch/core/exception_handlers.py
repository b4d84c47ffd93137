"""Exception handlers for the documentation search API.

Register with register_exception_handlers(app). Backend failures are
logged with their source and status and reach the client as a short
retryable error that omits the upstream response. Other docsearch
errors are returned as their to_dict() body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docsearch.domain.exceptions import DocSearchException, SearchBackendError

logger = logging.getLogger(__name__)

SEARCH_UNAVAILABLE_MESSAGE = "Documentation search is unavailable right now, try again later"

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "DOC_SOURCE_NOT_CONFIGURED": 404,
    "VALIDATION_ERROR": 400,
    "SEARCH_BACKEND_ERROR": 502,
}


def _search_backend_error_handler(request: Request, exc: SearchBackendError) -> JSONResponse:
    source = exc.details.get("source")
    logger.warning(
        "Search backend failed for %s (status=%s, reason=%s) on %s",
        source,
        exc.details.get("status_code"),
        exc.details.get("reason"),
        request.url.path,
    )
    return JSONResponse(
        status_code=_ERROR_CODE_STATUS[exc.error_code],
        content={
            "error": exc.error_code,
            "message": SEARCH_UNAVAILABLE_MESSAGE,
            "details": {"source": source},
        },
    )


def _docsearch_exception_handler(request: Request, exc: DocSearchException) -> JSONResponse:
    """Return JSON from DocSearchException.to_dict() with the mapped status code."""
    return JSONResponse(
        status_code=_ERROR_CODE_STATUS.get(exc.error_code, 400),
        content=exc.to_dict(),
    )


def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 422 listing each invalid request field."""
    fields = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid search request",
            "details": fields,
        },
    )


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; the exception text is only exposed when the app runs in debug."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if request.app.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the docsearch exception handlers on the FastAPI app.

    The SearchBackendError handler is registered alongside the base
    DocSearchException handler; Starlette picks the most specific class.
    """
    app.add_exception_handler(SearchBackendError, _search_backend_error_handler)
    app.add_exception_handler(DocSearchException, _docsearch_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
