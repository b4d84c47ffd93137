"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Documentation source credentials are optional here;
build_doc_sources() skips any source whose credentials are missing.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docsearch.core.constants import DEFAULT_USER_AGENT, STAGED_HIT_TTL


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "docsearch"
    app_version: str = "1.0.0"
    debug: bool = False

    # Outbound HTTP (search backend)
    http_timeout_seconds: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    # Redis Cache
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    staged_hit_ttl_seconds: int = STAGED_HIT_TTL

    # Discord Developer docs (Algolia DocSearch)
    discord_developer_docs_algolia_application_id: str = ""
    discord_developer_docs_algolia_application_key: SecretStr = SecretStr("")
    discord_developer_docs_icon: str = ":blue_book:"

    # discord.js Guide (Algolia DocSearch)
    djs_guide_algolia_application_id: str = ""
    djs_guide_algolia_application_key: SecretStr = SecretStr("")
    djs_guide_icon: str = ":green_book:"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Reject non-positive TTL and timeout values."""
        if self.staged_hit_ttl_seconds <= 0:
            raise ValueError(
                f"STAGED_HIT_TTL_SECONDS must be positive, got: {self.staged_hit_ttl_seconds}"
            )
        if self.http_timeout_seconds <= 0:
            raise ValueError(
                f"HTTP_TIMEOUT_SECONDS must be positive, got: {self.http_timeout_seconds}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
