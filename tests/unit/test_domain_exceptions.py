"""Tests for domain exceptions (error_code, message, details)."""

from docsearch.domain.exceptions import (
    DocSearchException,
    DocSourceNotConfiguredException,
    SearchBackendError,
    ValidationException,
)


def test_docsearch_exception_default_error_code() -> None:
    """Base DocSearchException uses class name as error_code when not provided."""
    exc = DocSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "DocSearchException"
    assert exc.details == {}


def test_docsearch_exception_to_dict() -> None:
    exc = DocSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="namespace")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "namespace"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_doc_source_not_configured() -> None:
    exc = DocSourceNotConfiguredException("discordjs-guide")
    assert exc.error_code == "DOC_SOURCE_NOT_CONFIGURED"
    assert exc.details == {"source": "discordjs-guide"}
    assert "discordjs-guide" in exc.message


def test_search_backend_error_with_status() -> None:
    exc = SearchBackendError("ddocs", "unexpected status 503", status_code=503)
    assert exc.error_code == "SEARCH_BACKEND_ERROR"
    assert exc.details == {"source": "ddocs", "reason": "unexpected status 503", "status_code": 503}


def test_search_backend_error_without_status() -> None:
    exc = SearchBackendError("ddocs", "timed out")
    assert "status_code" not in exc.details
    assert isinstance(exc, DocSearchException)
