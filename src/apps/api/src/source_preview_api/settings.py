"""API settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    fetch_timeout_seconds: float = 30.0
    max_source_bytes: int | None = None
    merge_fields: bool = False
    include_diagnostics: bool = True
    strict_status: bool = False
    user_agent: str = "source-preview/1.0"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
