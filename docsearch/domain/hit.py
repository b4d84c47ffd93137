"""Search hit entities: a ranked result and its documentation hierarchy.

Hits are transient. They live for one request, or for the cache TTL as a
staged candidate, in which case they round-trip through to_dict/from_dict.
"""

from dataclasses import dataclass, field
from typing import Any

HIERARCHY_LEVELS = ("lvl0", "lvl1", "lvl2", "lvl3")


def _optional_text(value: Any) -> str | None:
    """Return value as a string, or None when missing or blank."""
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


@dataclass(frozen=True)
class Hierarchy:
    """Up to four breadcrumb levels, lvl0 broadest (category), lvl3 narrowest (anchor)."""

    lvl0: str | None = None
    lvl1: str | None = None
    lvl2: str | None = None
    lvl3: str | None = None

    def __post_init__(self) -> None:
        for name in HIERARCHY_LEVELS:
            object.__setattr__(self, name, _optional_text(getattr(self, name)))

    def levels(self) -> list[str | None]:
        """Return levels in order lvl0..lvl3 (None for absent levels)."""
        return [getattr(self, name) for name in HIERARCHY_LEVELS]

    def to_dict(self) -> dict[str, str | None]:
        return {name: getattr(self, name) for name in HIERARCHY_LEVELS}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Hierarchy":
        data = data or {}
        return cls(**{name: data.get(name) for name in HIERARCHY_LEVELS})


@dataclass(frozen=True)
class Hit:
    """One ranked search result from the documentation index."""

    url: str
    hierarchy: Hierarchy = field(default_factory=Hierarchy)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict (cache payload)."""
        return {"hierarchy": self.hierarchy.to_dict(), "url": self.url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Hit":
        """Build a Hit from a backend or cache payload; extra fields are ignored.

        Raises:
            ValueError: If url is missing or not a string.
        """
        url = data.get("url")
        if not isinstance(url, str) or not url:
            raise ValueError("Hit payload must contain a non-empty 'url'")
        hierarchy = data.get("hierarchy")
        if hierarchy is not None and not isinstance(hierarchy, dict):
            raise ValueError("Hit 'hierarchy' must be an object")
        return cls(url=url, hierarchy=Hierarchy.from_dict(hierarchy))
