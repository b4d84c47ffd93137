"""Text helpers for display strings (entity decoding, truncation)."""

import html


def decode_entities(value: str) -> str:
    """Decode HTML entities (e.g. ``&amp;``, ``&#39;``) found in index text."""
    return html.unescape(value)


def cut_text(value: str, length: int) -> str:
    """Truncate value to at most length characters, ending with an ellipsis.

    Prefers cutting at the last whitespace so words are not split; falls
    back to a hard cut when there is none.

    Args:
        value: Text to shorten.
        length: Maximum length of the result (including the ellipsis).

    Returns:
        value unchanged when it fits, otherwise a shortened copy.
    """
    if len(value) <= length:
        return value
    if length <= 3:
        return value[:length]
    limit = length - 3
    head = value[:limit]
    space = head.rfind(" ")
    if space > 0:
        head = head[:space].rstrip()
    return f"{head}..."
