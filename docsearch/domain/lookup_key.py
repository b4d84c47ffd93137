"""Lookup key value object: ``<namespace>:<raw_query_text>:<ordinal>``.

The key is surfaced to the user as the value of an autocomplete choice
and echoed back verbatim on submit. Query text may contain the delimiter;
the namespace may not, and the ordinal is always the last segment.
"""

from dataclasses import dataclass

from docsearch.core.constants import CACHE_KEY_SEP
from docsearch.domain.exceptions import ValidationException


@dataclass(frozen=True)
class LookupKey:
    """Reference to a hit staged by one autocomplete request."""

    namespace: str
    query: str
    ordinal: int

    def __post_init__(self) -> None:
        if not self.namespace:
            raise ValidationException("Lookup key namespace must be non-empty", "namespace")
        if CACHE_KEY_SEP in self.namespace:
            raise ValidationException(
                f"Lookup key namespace must not contain separator {CACHE_KEY_SEP!r}",
                "namespace",
            )
        if self.ordinal < 0:
            raise ValidationException("Lookup key ordinal must be >= 0", "ordinal")

    def encode(self) -> str:
        return f"{self.namespace}{CACHE_KEY_SEP}{self.query}{CACHE_KEY_SEP}{self.ordinal}"

    def __str__(self) -> str:
        return self.encode()

    @classmethod
    def parse(cls, value: str, namespace: str) -> "LookupKey | None":
        """Parse value as a key of the given namespace.

        Returns None (not an error) when value is free text: fewer than three
        segments, a different namespace, or a non-numeric ordinal.
        """
        head, sep, rest = value.partition(CACHE_KEY_SEP)
        if not sep or head != namespace:
            return None
        query, sep, ordinal = rest.rpartition(CACHE_KEY_SEP)
        if not sep or not ordinal.isdigit() or not ordinal.isascii():
            return None
        return cls(namespace=namespace, query=query, ordinal=int(ordinal))
