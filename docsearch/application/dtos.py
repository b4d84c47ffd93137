"""DTOs produced by the search pipeline (no dependency on the HTTP layer)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Suggestion:
    """Autocomplete choice: display name (<= 100 chars) and opaque lookup key."""

    name: str
    value: str


@dataclass(frozen=True)
class RenderedMessage:
    """Outbound chat message.

    allowed_mentions holds the user IDs that may be pinged: the response
    target when one was given, otherwise empty so nobody is notified.
    """

    content: str
    allowed_mentions: list[str] = field(default_factory=list)
    ephemeral: bool = False
