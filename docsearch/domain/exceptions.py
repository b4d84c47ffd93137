"""Domain exceptions for the docsearch application.

Only genuine faults are exceptions. An empty query, a search with no
results, an undisplayable hit and a cache miss are ordinary outcomes and
are handled in the pipeline without raising. Presentation maps these
exceptions to HTTP responses in exception handlers.
"""

from typing import Any


class DocSearchException(Exception):
    """Base exception for all docsearch application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. source, status_code).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DocSearchException):
    """Raised when input validation fails (e.g. invalid key component)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class DocSourceNotConfiguredException(DocSearchException):
    """Raised when a documentation source is unknown or has no credentials."""

    def __init__(self, source: str) -> None:
        super().__init__(
            f"Documentation source not configured: {source}",
            "DOC_SOURCE_NOT_CONFIGURED",
            {"source": source},
        )


class SearchBackendError(DocSearchException):
    """Raised when the search backend fails (network, HTTP status or bad payload).

    Retryable by the caller; the pipeline itself never retries.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with the failing source and reason.

        Args:
            source: Namespace of the documentation source that was queried.
            reason: Short description of the failure.
            status_code: HTTP status returned by the backend, if any.
        """
        details: dict[str, Any] = {"source": source, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Search backend request failed for {source}: {reason}",
            "SEARCH_BACKEND_ERROR",
            details,
        )
