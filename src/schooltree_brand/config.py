"""Engine configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from schooltree_brand.defaults import DEFAULT_BRAND_ID


class Settings(BaseSettings):
    """Settings loaded from environment variables (and an optional .env file).

    BRAND_ID and API_BASE_URL are local-development overrides; they are read
    once when the settings object is created.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Tenant selection
    brand_id: str | None = None
    fallback_brand_id: str = DEFAULT_BRAND_ID  # used when nothing reports a tenant
    default_brand_id: str = DEFAULT_BRAND_ID  # served when a tenant id is unknown

    # Overrides
    api_base_url: str | None = None

    # Extra brand documents (<dir>/<brand_id>/brand.config.json)
    brands_dir: Path | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
