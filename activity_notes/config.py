"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - allowed_categories is the only category allow-list in the process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Allow-list lives here and is injected into the normalizer and the dashboard,
      never re-declared per component
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from activity_notes.core.domain_types import (
    ALLOWED_CATEGORIES, FALLBACK_CATEGORY, MAX_SELECTED_CATEGORIES,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://notes:notes@db:5432/notes"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres provides postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Categories
    allowed_categories: list[str] = list(ALLOWED_CATEGORIES)
    fallback_category: str = FALLBACK_CATEGORY
    max_selected_categories: int = MAX_SELECTED_CATEGORIES

    # Dashboard
    reminder_threshold_days: int = 5
    dashboard_cache_max_entries: int = 1024

    # Note generation placeholder latency, 0 disables
    note_generation_delay_ms: int = 300

    # Auth
    session_cookie_name: str = "session_token"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
