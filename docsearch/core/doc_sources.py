"""Documentation source registry.

Each source is one configuration record consumed by the shared search
pipeline. Static metadata (index, header, home page) lives here;
credentials and icons come from Settings and are resolved once at startup.
"""

import logging
from dataclasses import dataclass

from docsearch.core.config import Settings
from docsearch.shared.enums import CacheNamespace, DocSource

logger = logging.getLogger(__name__)

ALGOLIA_QUERY_URL = "https://{application_id}.algolia.net/1/indexes/{index_name}/query"


@dataclass(frozen=True)
class DocSourceConfig:
    """Configuration record for one documentation source."""

    key: DocSource
    namespace: CacheNamespace
    name: str
    index_endpoint: str
    application_id: str
    api_key: str
    home_url: str
    icon: str

    @property
    def header_text(self) -> str:
        """Linked source name shown above every result (link embed suppressed)."""
        return f"[{self.name}](<{self.home_url}>) results:"


@dataclass(frozen=True)
class _SourceMetadata:
    key: DocSource
    namespace: CacheNamespace
    name: str
    index_name: str
    home_url: str
    settings_prefix: str


_SOURCES: tuple[_SourceMetadata, ...] = (
    _SourceMetadata(
        key=DocSource.DISCORD_DEVELOPER_DOCS,
        namespace=CacheNamespace.DISCORD_DOCS,
        name="Discord Developer docs",
        index_name="discord",
        home_url="https://discord.com/developers/docs",
        settings_prefix="discord_developer_docs",
    ),
    _SourceMetadata(
        key=DocSource.DISCORDJS_GUIDE,
        namespace=CacheNamespace.DISCORD_JS_GUIDE,
        name="Discord.js Guide",
        index_name="discordjs",
        home_url="https://discordjs.guide",
        settings_prefix="djs_guide",
    ),
)


def build_doc_sources(settings: Settings) -> dict[DocSource, DocSourceConfig]:
    """Resolve configuration records for every source that has credentials.

    A source missing its Algolia application ID or key is skipped with a
    warning so the remaining sources still serve requests.

    Args:
        settings: Loaded application settings.

    Returns:
        Mapping of DocSource to its configuration record.
    """
    sources: dict[DocSource, DocSourceConfig] = {}
    for meta in _SOURCES:
        application_id: str = getattr(settings, f"{meta.settings_prefix}_algolia_application_id")
        api_key: str = getattr(
            settings, f"{meta.settings_prefix}_algolia_application_key"
        ).get_secret_value()
        if not application_id or not api_key:
            logger.warning(
                "Documentation source %s disabled: set %s_ALGOLIA_APPLICATION_ID and %s_ALGOLIA_APPLICATION_KEY",
                meta.key.value,
                meta.settings_prefix.upper(),
                meta.settings_prefix.upper(),
            )
            continue
        sources[meta.key] = DocSourceConfig(
            key=meta.key,
            namespace=meta.namespace,
            name=meta.name,
            index_endpoint=ALGOLIA_QUERY_URL.format(
                application_id=application_id, index_name=meta.index_name
            ),
            application_id=application_id,
            api_key=api_key,
            home_url=meta.home_url,
            icon=getattr(settings, f"{meta.settings_prefix}_icon"),
        )
    return sources
