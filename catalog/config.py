"""
Configuration management using Pydantic Settings.
Challenge: Centralized config for the API server and the ingestion script.
Design: Single source of truth for all environment variables (MASTER_KEY, PORT, ...).
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment. Validates at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Meilisearch Product Catalog API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    # Meilisearch
    meili_url: str = "http://localhost:7700"
    master_key: str | None = None
    meili_timeout_seconds: float = 30.0
    index_name: str = "sku"
    primary_key: str = "id"
    # Attributes get-by-id and future filters rely on
    filterable_attributes: list[str] = ["id", "category_id", "category_name", "status"]

    # Ingestion
    data_file: str = "sku.json"
    batch_size: int = 1000
    batch_pause_seconds: float = 0.1
    poll_interval_seconds: float = 0.5
    # None keeps polling until a terminal status
    poll_timeout_seconds: float | None = 300.0
    wait_for_all_tasks: bool = True

    # Search
    default_search_limit: int = 20

    @field_validator("batch_size")
    @classmethod
    def _positive_batch_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("batch_size must be positive")
        return value

    @field_validator("poll_timeout_seconds", mode="before")
    @classmethod
    def _empty_timeout_disables(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance. Avoids re-reading env on every request."""
    return Settings()
