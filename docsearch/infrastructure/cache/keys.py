"""Cache key builders. Single place for key format (DRY).

The namespace component must not contain CACHE_KEY_SEP. The query text
may: it sits between two fixed-position components, so keys stay
unambiguous.
"""

from docsearch.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_STAGED
from docsearch.domain.exceptions import ValidationException


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValidationException if value is empty or contains the separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValidationException: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValidationException(f"Cache key component {name!r} must be non-empty", name)
    if CACHE_KEY_SEP in value:
        raise ValidationException(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}",
            name,
        )


def staged_hit_key(namespace: str, query: str, ordinal: int) -> str:
    """Cache key for a hit staged by autocomplete (namespace + query + ordinal)."""
    _validate_key_component(namespace, "namespace")
    return (
        f"{CACHE_PREFIX_STAGED}{CACHE_KEY_SEP}{namespace}{CACHE_KEY_SEP}"
        f"{query}{CACHE_KEY_SEP}{ordinal}"
    )
