"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Stack traces reach clients only when environment == "development"
"""

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tiffin.core.pagination import ListDefaults


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://tiffin:tiffin@db:5432/tiffin"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Runtime
    environment: Literal["development", "test", "production"] = "development"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # List defaults
    default_page: int = Field(1, ge=1)
    default_limit: int = Field(10, ge=1, le=100)
    default_sort_by: str = "updatedAt"
    default_sort_type: Literal["asc", "desc"] = "desc"

    # Access keys
    access_key_ttl_days: int = Field(30, ge=1)
    access_key_initial_ttl_days: int = Field(60, ge=1)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def expose_stack_traces(self) -> bool:
        return self.environment == "development"

    @property
    def list_defaults(self) -> ListDefaults:
        return ListDefaults(
            page=self.default_page,
            limit=self.default_limit,
            sort_by=self.default_sort_by,
            sort_type=self.default_sort_type,
        )

    @property
    def access_key_ttl(self) -> timedelta:
        return timedelta(days=self.access_key_ttl_days)

    @property
    def access_key_initial_ttl(self) -> timedelta:
        return timedelta(days=self.access_key_initial_ttl_days)


@lru_cache
def get_settings() -> Settings:
    return Settings()
