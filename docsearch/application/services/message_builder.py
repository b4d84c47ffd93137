"""Chat markdown helpers and reply builders for rendered search results."""

from collections.abc import Sequence

from docsearch.application.dtos import RenderedMessage


def hide_link_embed(url: str) -> str:
    """Wrap url in angle brackets so chat clients do not unfurl it."""
    return f"<{url}>"


def hyperlink(text: str, url: str) -> str:
    return f"[{text}]({url})"


def inline_code(text: str) -> str:
    return f"`{text}`"


def italic(text: str) -> str:
    return f"*{text}*"


def user_mention(user_id: str) -> str:
    return f"<@{user_id}>"


def mention_list(target: str | None) -> list[str]:
    """Return [target] when a response target was given, else an empty list."""
    return [target] if target else []


def build_response_content(
    content: str | Sequence[str],
    header_text: str,
    icon: str,
    target: str | None = None,
) -> str:
    """Assemble a result reply: optional target line, source header, body.

    Args:
        content: Body text, or one line per result.
        header_text: Linked source name (e.g. "[Docs](<https://..>) results:").
        icon: Emoji shown before the header.
        target: Optional user ID to address the suggestion to.

    Returns:
        Newline-joined message content.
    """
    lines: list[str] = []
    if target:
        lines.append(italic(f"Documentation suggestion for {user_mention(target)}:"))
    lines.append(f"{icon} {header_text}")
    if isinstance(content, str):
        lines.append(content)
    else:
        lines.extend(content)
    return "\n".join(lines)


def error_response(content: str, target: str | None = None) -> RenderedMessage:
    """Build an ephemeral error reply (visible only to the requesting user)."""
    return RenderedMessage(
        content=content,
        allowed_mentions=mention_list(target),
        ephemeral=True,
    )
