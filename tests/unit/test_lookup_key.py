"""Tests for LookupKey encode/parse (<namespace>:<query>:<ordinal>)."""

import pytest

from docsearch.domain.exceptions import ValidationException
from docsearch.domain.lookup_key import LookupKey


class TestEncode:
    def test_encode_format(self) -> None:
        key = LookupKey(namespace="ddocs", query="rate limit", ordinal=1)
        assert key.encode() == "ddocs:rate limit:1"
        assert str(key) == "ddocs:rate limit:1"

    def test_namespace_with_separator_raises(self) -> None:
        with pytest.raises(ValidationException, match="must not contain separator"):
            LookupKey(namespace="dd:ocs", query="q", ordinal=0)

    def test_empty_namespace_raises(self) -> None:
        with pytest.raises(ValidationException):
            LookupKey(namespace="", query="q", ordinal=0)

    def test_negative_ordinal_raises(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            LookupKey(namespace="ddocs", query="q", ordinal=-1)
        assert exc_info.value.details == {"field": "ordinal"}


class TestParse:
    def test_parses_three_part_key(self) -> None:
        assert LookupKey.parse("ddocs:rate limit:1", "ddocs") == LookupKey("ddocs", "rate limit", 1)

    def test_query_may_contain_separator(self) -> None:
        key = LookupKey.parse("ddocs:guild:create:12", "ddocs")
        assert key == LookupKey("ddocs", "guild:create", 12)

    def test_round_trip_preserves_query_text(self) -> None:
        key = LookupKey(namespace="djsguide", query="  slash: commands ", ordinal=3)
        assert LookupKey.parse(key.encode(), "djsguide") == key

    @pytest.mark.parametrize(
        "value",
        [
            "rate limit",
            "ddocs:rate limit",
            "ddocs:rate limit:first",
            "ddocs:rate limit:-1",
            "djsguide:rate limit:1",
            ":rate limit:1",
            "",
        ],
    )
    def test_free_text_returns_none(self, value: str) -> None:
        assert LookupKey.parse(value, "ddocs") is None
