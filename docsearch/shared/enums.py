"""Shared enumerations for the docsearch application.

Documentation sources and the cache namespaces their staged hits live under.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class CacheNamespace(_ValuesMixin, str, Enum):
    """Cache namespace per documentation source (first lookup key segment)."""

    DISCORD_DOCS = "ddocs"
    DISCORD_JS_GUIDE = "djsguide"


class DocSource(_ValuesMixin, str, Enum):
    """Documentation sources exposed by the HTTP adapter."""

    DISCORD_DEVELOPER_DOCS = "discord-developer-docs"
    DISCORDJS_GUIDE = "discordjs-guide"
